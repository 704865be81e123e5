"""Gemini client: structured JSON generation through google-genai."""

import logging
from dataclasses import dataclass
from typing import TypeVar

import httpx
from google import genai
from google.genai import errors, types
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class LlmError(Exception):
    """Raised when the model is unconfigured, unreachable or returns bad output."""


@dataclass(frozen=True)
class Media:
    data: bytes
    mime_type: str


class GeminiClient:
    """Thin wrapper that asks Gemini for JSON matching a pydantic model."""

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.4,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client: genai.Client | None = None

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _sdk(self) -> genai.Client:
        if not self.is_configured():
            raise LlmError("GEMINI_API_KEY not set")
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(
        self, prompt: str, output_model: type[M], media: Media | None = None
    ) -> M:
        sdk = self._sdk()
        contents: list = [prompt]
        if media is not None:
            contents.insert(0, types.Part.from_bytes(data=media.data, mime_type=media.mime_type))

        try:
            response = await sdk.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    response_mime_type="application/json",
                    response_schema=output_model,
                ),
            )
        except (errors.APIError, httpx.HTTPError) as e:
            logger.error("Gemini request failed (%s): %s", output_model.__name__, e)
            raise LlmError(f"Gemini request failed: {e}") from e
        except Exception as e:
            # aiohttp transport errors and other SDK internals
            logger.exception("Gemini SDK call failed (%s)", output_model.__name__)
            raise LlmError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise LlmError(f"Gemini returned no output for {output_model.__name__}")
        try:
            return output_model.model_validate_json(text)
        except ValidationError as e:
            raise LlmError(f"Gemini output did not match {output_model.__name__}: {e}") from e
