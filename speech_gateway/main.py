"""
Speech Gateway - FastAPI server
Forwards text to Azure Speech or Hugging Face and returns the MP3 audio.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import FileResponse, Response

from speech_gateway import __version__, settings
from speech_gateway.tts import AzureTTSService, HuggingFaceTTSService

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

TEXT_REQUIRED = "Text is required"
INVALID_MODEL = "Invalid model specified"

# Keyed by the "model" field of the request body
PROVIDERS = {
    "azure": AzureTTSService(),
    "huggingface": HuggingFaceTTSService(),
}

# ------------------------------------------------------------
# FastAPI app
# ------------------------------------------------------------
app = FastAPI(
    title="Speech Gateway",
    description="Text-to-speech gateway for Azure Speech and Hugging Face",
    version=__version__,
)

# The bundled UI is same-origin; allow other local dev servers too
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Text is checked before model, as in the route itself
    body = exc.body if isinstance(exc.body, dict) else {}
    text = body.get("text")
    message = INVALID_MODEL if isinstance(text, str) and text.strip() else TEXT_REQUIRED
    return JSONResponse(status_code=400, content={"error": message})


# ------------------------------------------------------------
# Pydantic Schemas
# ------------------------------------------------------------
class TtsRequest(BaseModel):
    text: Optional[str] = None
    model: Optional[str] = None  # "azure" or "huggingface"


# ------------------------------------------------------------
# Routes
# ------------------------------------------------------------
@app.get("/")
async def index():
    return FileResponse(str(STATIC_DIR / "index.html"), media_type="text/html")


@app.get("/api/health")
async def health_check():
    return {
        "status": "ok",
        "service": "Speech Gateway",
        "version": __version__,
        "providers": {name: {"configured": svc.is_configured()} for name, svc in PROVIDERS.items()},
    }


@app.post("/text-to-speech")
async def text_to_speech(req: TtsRequest):
    text = (req.text or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail=TEXT_REQUIRED)

    provider = PROVIDERS.get(req.model or "")
    if provider is None:
        raise HTTPException(status_code=400, detail=INVALID_MODEL)

    limit = settings.max_text_chars()
    if len(text) > limit:
        text = text[:limit]

    try:
        audio = await provider.synthesize(text)
    except Exception as exc:
        logger.exception("Text-to-speech failed with provider %s", req.model)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Length": str(len(audio))},
    )


def run() -> None:
    level = settings.log_level()
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host, port = settings.server_address()
    uvicorn.run("speech_gateway.main:app", host=host, port=port, log_level=level)


if __name__ == "__main__":
    run()
