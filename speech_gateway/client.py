"""
Command-line client for the Speech Gateway.

Sends one synthesis request and writes the returned MP3 to a file:

    speech-gateway-say "Hello there" --model huggingface --output hello.mp3
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import httpx

DEFAULT_URL = "http://127.0.0.1:5000"
MODELS = ("azure", "huggingface")


class GatewayError(RuntimeError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class GatewayClient:
    """Thin httpx wrapper around POST /text-to-speech."""

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        *,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def synthesize(self, text: str, model: str = "azure") -> bytes:
        if not text or not text.strip():
            raise ValueError("Text is empty.")

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            resp = client.post(f"{self.base_url}/text-to-speech", json={"text": text, "model": model})

        if resp.status_code != 200:
            try:
                data = resp.json()
            except ValueError:
                data = None
            message = (data.get("error") if isinstance(data, dict) else None) or resp.text
            raise GatewayError(resp.status_code, message)
        return resp.content


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Convert text to speech through the Speech Gateway")
    parser.add_argument("text", type=str, help="Text to synthesize")
    parser.add_argument("--model", choices=MODELS, default="azure", help="TTS provider (default: azure)")
    parser.add_argument("--output", type=Path, default=Path("speech.mp3"), help="Where to write the MP3")
    parser.add_argument("--url", type=str, default=DEFAULT_URL, help="Gateway base URL")
    args = parser.parse_args(argv)

    try:
        audio = GatewayClient(args.url).synthesize(args.text, args.model)
    except (ValueError, GatewayError, httpx.HTTPError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    args.output.write_bytes(audio)
    print(f"Wrote {len(audio)} bytes to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
