import logging
import mimetypes
import tempfile
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from pronounce import config
from pronounce.dictionary import fetch_page
from pronounce.errors import FetchError, PronounceError
from pronounce.speak import speak

logger = logging.getLogger(__name__)

app = FastAPI()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SpeakRequest(BaseModel):
    text: str
    # Only a literal JSON true selects every pronunciation
    speak_all: Any = Field(None, alias="all")


@app.exception_handler(PronounceError)
async def pronounce_error_handler(request: Request, exc: PronounceError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.post("/speak")
def speak_endpoint(req: SpeakRequest):
    # Clips and the merged output live only as long as this request
    with tempfile.TemporaryDirectory(prefix="pronounce-", dir=config.TMP_DIR) as workdir:
        output = speak(req.text, req.speak_all is True, workdir)
        with open(output, "rb") as f:
            data = f.read()

    media_type = mimetypes.guess_type(output)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)


@app.get("/debug/{word}")
def debug_page(word: str):
    try:
        return PlainTextResponse(fetch_page(word))
    except FetchError as e:
        logger.warning("Debug fetch failed for %s: %s", word, e)
        return PlainTextResponse("Failed to fetch page", status_code=500)


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Registered last so the API routes take precedence
app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True), name="public")


def run():
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Server running on http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
