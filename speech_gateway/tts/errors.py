"""Errors raised by the TTS providers."""


class TtsProviderError(RuntimeError):
    """A provider failed to produce audio."""


class TtsConfigurationError(TtsProviderError):
    """A provider is missing the credentials it needs."""


__all__ = ["TtsProviderError", "TtsConfigurationError"]
