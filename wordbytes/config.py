"""Configuration settings and .env loading.

WHY: The few knobs the tool has (replacement word list, read size, log
level, API bind address) should be adjustable per machine without code
changes, and should live in one place that is easy to find.

HOW: python-dotenv loads a .env file on import. Settings are module-level
values read from the environment with defaults. chunk_size_setting()
validates the one numeric setting that can be mistyped.

RULES:
- WORDBYTES_DICTIONARY: word-list path; empty means the bundled list
- WORDBYTES_CHUNK_SIZE: CLI read size in bytes (rounded up to a multiple of 11)
- WORDBYTES_LOG_LEVEL: default CLI log level name
- API_HOST / API_PORT: bind address of the wordbytes-api server
- Environment variables always win over .env values
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Codec settings
# ---------------------------------------------------------------------------

WORDBYTES_DICTIONARY = os.getenv("WORDBYTES_DICTIONARY", "").strip()
WORDBYTES_CHUNK_SIZE = os.getenv("WORDBYTES_CHUNK_SIZE", "11264")
WORDBYTES_LOG_LEVEL = os.getenv("WORDBYTES_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# API server settings
# ---------------------------------------------------------------------------

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = os.getenv("API_PORT", "8000")


def chunk_size_setting() -> int:
    """Return WORDBYTES_CHUNK_SIZE as a positive integer.

    RULES:
    - Raises ValueError for non-integer or non-positive values
    """
    try:
        value = int(WORDBYTES_CHUNK_SIZE)
    except ValueError:
        raise ValueError(
            "WORDBYTES_CHUNK_SIZE must be an integer, got {!r}".format(WORDBYTES_CHUNK_SIZE)
        ) from None
    if value <= 0:
        raise ValueError("WORDBYTES_CHUNK_SIZE must be positive, got {}".format(value))
    return value


def api_port_setting() -> int:
    """Return API_PORT as an integer.

    WHY: Only wordbytes-api binds a port, so a mistyped value must not
    break the codec CLI at import time.

    RULES:
    - Raises ValueError for non-integer values or ports outside 1..65535
    """
    try:
        value = int(API_PORT)
    except ValueError:
        raise ValueError("API_PORT must be an integer, got {!r}".format(API_PORT)) from None
    if not 0 < value < 65536:
        raise ValueError("API_PORT must be between 1 and 65535, got {}".format(value))
    return value
