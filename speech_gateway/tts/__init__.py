"""TTS service module."""
from speech_gateway.tts.azure_tts import AzureTTSService
from speech_gateway.tts.errors import TtsConfigurationError, TtsProviderError
from speech_gateway.tts.huggingface_tts import HuggingFaceTTSService

__all__ = ["AzureTTSService", "HuggingFaceTTSService", "TtsProviderError", "TtsConfigurationError"]
