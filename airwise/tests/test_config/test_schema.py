"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from airwise.config.schema import (
    AppConfig,
    CredentialsConfig,
    FallbackConfig,
    ForecastConfig,
    has_credential,
)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.demo_mode is False
        assert config.forecast.days == 5
        assert config.fallback.latitude == 17.3850
        assert config.fallback.longitude == 78.4867
        assert config.news.title_max_chars == 50

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            CredentialsConfig(aqicn_api_key="k", bogus=True)


class TestForecastConfig:
    def test_days_bounds(self):
        ForecastConfig(days=1)
        ForecastConfig(days=7)
        with pytest.raises(ValidationError):
            ForecastConfig(days=0)
        with pytest.raises(ValidationError):
            ForecastConfig(days=8)


class TestFallbackConfig:
    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            FallbackConfig(latitude=91.0)


class TestCredentials:
    def test_has_credential(self):
        assert has_credential("abc") is True
        assert has_credential("") is False
        assert has_credential(None) is False
        assert has_credential("YOUR_AQICN_API_KEY") is False

    def test_credential_lookup(self):
        config = AppConfig(credentials=CredentialsConfig(aqicn_api_key="k"))
        assert config.credential("aqicn_api_key") == "k"
        assert config.credential("youtube_api_key") is None

    def test_placeholder_is_absent(self):
        config = AppConfig(
            credentials=CredentialsConfig(openweathermap_api_key="YOUR_OPENWEATHERMAP_API_KEY")
        )
        assert config.credential("openweathermap_api_key") is None

    def test_demo_mode_hides_credentials(self):
        config = AppConfig(
            demo_mode=True, credentials=CredentialsConfig(aqicn_api_key="k")
        )
        assert config.credential("aqicn_api_key") is None
