import pytest

import speech_gateway.settings as settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test without real credentials or a developer settings file."""
    for var in ("AZURE_SPEECH_KEY", "AZURE_SPEECH_REGION", "HUGGINGFACE_API_TOKEN"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings, "SETTINGS", {})
