"""
Hugging Face Inference API wrapper (XTTS-v2).

Posts the text to the hosted model and returns the binary audio body.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from speech_gateway import settings
from speech_gateway.tts.errors import TtsConfigurationError, TtsProviderError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api-inference.huggingface.co/models/coqui-ai/XTTS-v2"
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT_SECONDS = 60.0


class HuggingFaceTTSService:
    """Call a hosted text-to-speech model with a bearer token."""

    name = "huggingface"

    def __init__(
        self,
        *,
        api_token: Optional[str] = None,
        api_url: Optional[str] = None,
        language: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_token = api_token
        self.api_url = api_url
        self.language = language
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _token(self) -> Optional[str]:
        return self.api_token or settings.huggingface_token()

    def is_configured(self) -> bool:
        return bool(self._token())

    def _build_request(self, text: str) -> tuple[str, dict, dict]:
        cfg = settings.section("huggingface")
        url = self.api_url or cfg.get("api_url") or DEFAULT_API_URL
        headers = {
            "Authorization": f"Bearer {self._token()}",
            "Content-Type": "application/json",
        }
        payload = {
            "inputs": {
                "text": text,
                "speaker_embeddings": None,  # model default voice
                "language": self.language or cfg.get("language") or DEFAULT_LANGUAGE,
            }
        }
        return url, headers, payload

    async def synthesize(self, text: str) -> bytes:
        """
        Synthesize text through the inference endpoint.

        Raises:
            TtsConfigurationError: no API token is available.
            TtsProviderError: transport failure or non-2xx response.
        """
        if not self._token():
            raise TtsConfigurationError("Hugging Face API token is not configured")

        url, headers, payload = self._build_request(text)
        timeout_s = self.timeout_seconds or float(
            settings.section("huggingface").get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
        )

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(timeout_s), transport=self.transport) as client:
                resp = await client.post(url, json=payload, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Hugging Face returned %s: %s", exc.response.status_code, exc.response.text[:200])
            raise TtsProviderError(
                "Failed to convert text to speech using Hugging Face: "
                f"Request failed with status code {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TtsProviderError(
                f"Failed to convert text to speech using Hugging Face: {exc}"
            ) from exc

        audio = resp.content
        logger.info("Hugging Face synthesized %d chars into %d bytes", len(text), len(audio))
        return audio


__all__ = ["HuggingFaceTTSService"]
