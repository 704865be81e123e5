"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

PLACEHOLDER_PREFIX = "YOUR_"


def has_credential(value: str | None) -> bool:
    """A credential counts only if it is set and not a template placeholder."""
    return bool(value) and not value.startswith(PLACEHOLDER_PREFIX)


class CredentialsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    aqicn_api_key: str = ""
    openweathermap_api_key: str = ""
    youtube_api_key: str = ""
    reddit_client_id: str = ""
    reddit_client_secret: str = ""
    reddit_username: str = ""
    reddit_password: str = ""
    reddit_user_agent: str = "airwise/0.1.0"
    gemini_api_key: str = ""


class EndpointsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    waqi_base_url: str = "https://api.waqi.info"
    openweathermap_base_url: str = "https://api.openweathermap.org"
    youtube_base_url: str = "https://www.googleapis.com/youtube/v3"
    google_news_base_url: str = "https://news.google.com"
    reddit_auth_url: str = "https://www.reddit.com/api/v1/access_token"
    reddit_api_base_url: str = "https://oauth.reddit.com"


class LlmConfig(BaseModel):
    model_config = {"extra": "forbid"}

    model: str = "gemini-2.0-flash"
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    days: int = Field(default=5, ge=1, le=7)


class FallbackConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city_label: str = "Hyderabad"
    latitude: float = Field(default=17.3850, ge=-90.0, le=90.0)
    longitude: float = Field(default=78.4867, ge=-180.0, le=180.0)


class NewsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_results: int = Field(default=5, ge=1, le=50)
    title_max_chars: int = Field(default=50, ge=1)


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    request_timeout_seconds: float = Field(default=30.0, gt=0.0)
    random_seed: int | None = None


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    demo_mode: bool = False
    credentials: CredentialsConfig = CredentialsConfig()
    endpoints: EndpointsConfig = EndpointsConfig()
    llm: LlmConfig = LlmConfig()
    forecast: ForecastConfig = ForecastConfig()
    fallback: FallbackConfig = FallbackConfig()
    news: NewsConfig = NewsConfig()
    ops: OpsConfig = OpsConfig()

    def credential(self, name: str) -> str | None:
        """Return a usable credential, or None when absent or in demo mode."""
        if self.demo_mode:
            return None
        value = getattr(self.credentials, name)
        return value if has_credential(value) else None
