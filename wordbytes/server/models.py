"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request and one response model per endpoint. Binary data
travels as standard base64 text inside JSON.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Binary payloads are base64 (RFC 4648, with padding)
- Python 3.9+ compatible (use List/Optional from typing)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class EncodeRequest(BaseModel):
    """Bytes to encode, as base64."""

    data: str = Field(
        description="Base64-encoded bytes to encode. Empty string encodes to no words.",
        json_schema_extra={"example": "aGVsbG8="},
    )


class EncodeResponse(BaseModel):
    """Result of encoding a byte string."""

    words: str = Field(description="Dash-joined word-sequence, marker and padding word last.")
    word_count: int = Field(description="Number of dictionary words, excluding marker and padding word.")
    remainder: int = Field(description="Bits used in the final word (0 when the input fits exactly).")


class DecodeRequest(BaseModel):
    """Word-sequence to decode."""

    words: str = Field(description="Dash-joined word-sequence as produced by /encode.")


class DecodeResponse(BaseModel):
    """Result of decoding a word-sequence."""

    data: str = Field(description="Base64-encoded decoded bytes.")
    byte_length: int = Field(description="Number of decoded bytes.")


class PaddingWord(BaseModel):
    """One reserved padding word."""

    remainder: int = Field(description="Bits in the final word this padding word stands for (1-10).")
    word: str = Field(description="The reserved padding word.")


class PaddingWordsResponse(BaseModel):
    """The reserved tokens of the wire format."""

    marker: str = Field(description="Marker token that precedes the padding word.")
    padding_words: List[PaddingWord] = Field(description="Padding word for each remainder.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
