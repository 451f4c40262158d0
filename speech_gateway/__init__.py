"""Speech Gateway: forwards text to a hosted TTS provider and returns MP3 audio."""

__version__ = "0.1.0"
