"""
Azure Cognitive Services speech synthesis wrapper.

Synthesizes text with a neural voice into a single in-memory MP3 buffer.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from speech_gateway import settings
from speech_gateway.tts.errors import TtsConfigurationError, TtsProviderError

logger = logging.getLogger(__name__)

DEFAULT_VOICE = "en-US-JennyNeural"
OUTPUT_FORMAT = "Audio16Khz32KBitRateMonoMp3"


class AzureTTSService:
    """Manage Azure neural voice synthesis."""

    name = "azure"

    def __init__(
        self,
        *,
        subscription_key: Optional[str] = None,
        region: Optional[str] = None,
        voice: Optional[str] = None,
    ) -> None:
        self.subscription_key = subscription_key
        self.region = region
        self.voice = voice
        self._sdk = None

    def _get_sdk(self):
        """Lazy-load the Azure Speech SDK."""
        if self._sdk is not None:
            return self._sdk

        try:
            import azure.cognitiveservices.speech as speechsdk
        except ImportError as exc:
            raise RuntimeError(
                "azure-cognitiveservices-speech is not installed. "
                "Run `pip install azure-cognitiveservices-speech`."
            ) from exc

        self._sdk = speechsdk
        return self._sdk

    def _credentials(self) -> tuple[Optional[str], Optional[str]]:
        env_key, env_region = settings.azure_credentials()
        return self.subscription_key or env_key, self.region or env_region

    def is_configured(self) -> bool:
        key, region = self._credentials()
        return bool(key and region)

    def synthesize_sync(self, text: str) -> bytes:
        """
        Synthesize text to MP3 bytes, blocking until the SDK finishes.

        Raises:
            TtsConfigurationError: key or region is missing.
            TtsProviderError: the SDK reported anything but a completed synthesis.
        """
        key, region = self._credentials()
        if not key or not region:
            raise TtsConfigurationError("Azure Speech credentials are not configured")

        speechsdk = self._get_sdk()

        speech_config = speechsdk.SpeechConfig(subscription=key, region=region)
        speech_config.speech_synthesis_voice_name = (
            self.voice or settings.section("azure").get("voice") or DEFAULT_VOICE
        )
        speech_config.set_speech_synthesis_output_format(
            getattr(speechsdk.SpeechSynthesisOutputFormat, OUTPUT_FORMAT)
        )

        # audio_config=None keeps the result in memory instead of the speaker
        synthesizer = speechsdk.SpeechSynthesizer(speech_config=speech_config, audio_config=None)
        result = synthesizer.speak_text_async(text).get()

        if result.reason == speechsdk.ResultReason.SynthesizingAudioCompleted:
            audio = bytes(result.audio_data)
            logger.info("Azure synthesized %d chars into %d bytes", len(text), len(audio))
            return audio

        details = getattr(result, "cancellation_details", None)
        reason = getattr(details, "reason", result.reason)
        message = f"Speech synthesis canceled: {reason}"
        error_details = getattr(details, "error_details", None)
        if error_details:
            message = f"{message} ({error_details})"
        raise TtsProviderError(message)

    async def synthesize(self, text: str) -> bytes:
        return await run_in_threadpool(self.synthesize_sync, text)


__all__ = ["AzureTTSService"]
