"""
Settings shared between the FastAPI app and the TTS providers.

Values come from config/settings.yaml; provider secrets prefer the environment
(optionally populated from a .env file).
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
CONFIG_PATH = ROOT_DIR / "config" / "settings.yaml"

load_dotenv()


def _load_settings() -> Dict:
    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}
    except FileNotFoundError:
        return {}


SETTINGS = _load_settings()


def section(name: str) -> Dict:
    return SETTINGS.get(name) or {}


def azure_credentials() -> tuple[Optional[str], Optional[str]]:
    """Return (subscription_key, region); either may be None."""
    cfg = section("azure")
    key = os.environ.get("AZURE_SPEECH_KEY") or cfg.get("subscription_key")
    region = os.environ.get("AZURE_SPEECH_REGION") or cfg.get("region")
    return key or None, region or None


def huggingface_token() -> Optional[str]:
    return os.environ.get("HUGGINGFACE_API_TOKEN") or section("huggingface").get("api_token") or None


def max_text_chars() -> int:
    return int(SETTINGS.get("max_text_chars") or 8000)


def server_address() -> tuple[str, int]:
    host = os.environ.get("HOST") or SETTINGS.get("local_api_host", "127.0.0.1")
    port = os.environ.get("PORT") or SETTINGS.get("local_api_port", 5000)
    return host, int(port)


def log_level() -> str:
    return str(SETTINGS.get("log_level", "info")).lower()
