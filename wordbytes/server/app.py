"""FastAPI application exposing the word codec over HTTP.

WHY: Other services (web front ends, chat bots, scripts without a Python
environment) need to turn bytes into words and back without linking the
package. FastAPI gives request validation and OpenAPI docs for free.

HOW: Four endpoints. POST /encode and POST /decode wrap the Encoder and
Decoder, with bytes carried as base64 in JSON. GET /padding-words lists
the reserved tokens and GET /health is a liveness check. The dictionary
is provided through a FastAPI dependency so tests can override it.

RULES:
- Codec errors (unknown word, malformed padding) map to HTTP 400
- Invalid base64 input maps to HTTP 400
- Error responses use the ErrorResponse schema
- The dictionary is loaded once per process (load_dictionary caches it)
"""

from __future__ import annotations

import base64
import binascii
import logging
import sys
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException

from wordbytes import __version__
from wordbytes.config import API_HOST, api_port_setting
from wordbytes.core.codec import Decoder, Encoder
from wordbytes.core.dictionary import Dictionary, load_dictionary
from wordbytes.core.errors import WordbytesError
from wordbytes.core.wire import MARKER, PADDING_WORDS, SEPARATOR, bit_remainder
from wordbytes.server.models import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    ErrorResponse,
    HealthResponse,
    PaddingWord,
    PaddingWordsResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="wordbytes API",
    description=(
        "Encode bytes as a dash-separated sequence of dictionary words "
        "(11 bits per word) and decode word-sequences back into bytes."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_dictionary() -> Dictionary:
    """Dependency returning the process-wide dictionary."""
    return load_dictionary()


DictionaryDep = Annotated[Dictionary, Depends(get_dictionary)]


# ---------------------------------------------------------------------------
# Codec endpoints
# ---------------------------------------------------------------------------


@app.post(
    "/encode",
    response_model=EncodeResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid base64 input."}},
    tags=["codec"],
    summary="Encode bytes as words",
)
async def encode_bytes(request: EncodeRequest, dictionary: DictionaryDep) -> EncodeResponse:
    try:
        data = base64.b64decode(request.data, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.info("Rejected encode request: %s", e)
        raise HTTPException(status_code=400, detail="Invalid base64 data: {}".format(e)) from e

    words = Encoder(dictionary).encode_words(data)
    remainder = bit_remainder(len(data))
    return EncodeResponse(
        words=SEPARATOR.join(words),
        word_count=len(words) - (2 if remainder else 0),
        remainder=remainder,
    )


@app.post(
    "/decode",
    response_model=DecodeResponse,
    responses={400: {"model": ErrorResponse, "description": "Unknown word or malformed padding."}},
    tags=["codec"],
    summary="Decode words into bytes",
)
async def decode_words(request: DecodeRequest, dictionary: DictionaryDep) -> DecodeResponse:
    try:
        data = Decoder(dictionary).decode(request.words)
    except WordbytesError as e:
        logger.info("Rejected decode request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return DecodeResponse(
        data=base64.b64encode(data).decode("ascii"),
        byte_length=len(data),
    )


# ---------------------------------------------------------------------------
# Metadata endpoints
# ---------------------------------------------------------------------------


@app.get(
    "/padding-words",
    response_model=PaddingWordsResponse,
    tags=["codec"],
    summary="List the reserved marker and padding words",
)
async def list_padding_words() -> PaddingWordsResponse:
    return PaddingWordsResponse(
        marker=MARKER,
        padding_words=[
            PaddingWord(remainder=remainder, word=word)
            for remainder, word in enumerate(PADDING_WORDS, start=1)
        ],
    )


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_api():
    """Entry point for the wordbytes-api console script.

    RULES:
    - An invalid API_PORT exits with an error message instead of a traceback
    """
    import uvicorn

    try:
        port = api_port_setting()
    except ValueError as e:
        sys.exit("Error: {}".format(e))
    uvicorn.run(app, host=API_HOST, port=port)
