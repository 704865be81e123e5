"""Tests for the Gemini client with a mocked SDK."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from pydantic import BaseModel

from airwise.llm.client import GeminiClient, LlmError, Media


class Answer(BaseModel):
    city: str


def _sdk(text: str | None = None, error: Exception | None = None) -> MagicMock:
    sdk = MagicMock()
    sdk.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=text), side_effect=error
    )
    return sdk


class TestGeminiClient:
    def test_unconfigured_raises(self):
        client = GeminiClient(None)
        assert client.is_configured() is False
        with pytest.raises(LlmError, match="GEMINI_API_KEY"):
            asyncio.run(client.generate("hi", Answer))

    def test_parses_json_output(self):
        sdk = _sdk('{"city": "Pune"}')
        with patch("airwise.llm.client.genai.Client", return_value=sdk) as ctor:
            client = GeminiClient("key", model="gemini-test")
            result = asyncio.run(client.generate("where?", Answer))

        assert result == Answer(city="Pune")
        ctor.assert_called_once_with(api_key="key")
        kwargs = sdk.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == ["where?"]
        assert kwargs["config"].response_mime_type == "application/json"

    def test_media_prepended(self):
        sdk = _sdk('{"city": "Pune"}')
        with patch("airwise.llm.client.genai.Client", return_value=sdk):
            client = GeminiClient("key")
            asyncio.run(client.generate("read", Answer, media=Media(b"%PDF", "application/pdf")))

        contents = sdk.aio.models.generate_content.call_args.kwargs["contents"]
        assert len(contents) == 2
        assert contents[1] == "read"

    def test_invalid_output_raises(self):
        with patch("airwise.llm.client.genai.Client", return_value=_sdk('{"town": "x"}')):
            with pytest.raises(LlmError, match="did not match"):
                asyncio.run(GeminiClient("key").generate("q", Answer))

    def test_empty_output_raises(self):
        with patch("airwise.llm.client.genai.Client", return_value=_sdk(None)):
            with pytest.raises(LlmError, match="no output"):
                asyncio.run(GeminiClient("key").generate("q", Answer))

    def test_transport_error_wrapped(self):
        sdk = _sdk(error=httpx.ConnectError("down"))
        with patch("airwise.llm.client.genai.Client", return_value=sdk):
            with pytest.raises(LlmError, match="request failed"):
                asyncio.run(GeminiClient("key").generate("q", Answer))

    def test_sdk_client_reused(self):
        with patch("airwise.llm.client.genai.Client", return_value=_sdk('{"city": "A"}')) as ctor:
            client = GeminiClient("key")
            asyncio.run(client.generate("1", Answer))
            asyncio.run(client.generate("2", Answer))
        assert ctor.call_count == 1

    def test_connection_reset_wrapped(self):
        sdk = _sdk(error=ConnectionError("reset"))
        with patch("airwise.llm.client.genai.Client", return_value=sdk):
            with pytest.raises(LlmError, match="request failed: reset"):
                asyncio.run(GeminiClient("key").generate("q", Answer))
