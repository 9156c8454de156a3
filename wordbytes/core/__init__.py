"""Core codec modules.

WHY: The core package holds everything with real algorithmic content —
bit regrouping, the dictionary, and the padding scheme. The CLI and the
HTTP API only move bytes and text in and out of it.

HOW: bits.py regroups bytes into 11-bit symbols and back, wire.py defines
the reserved tokens, dictionary.py maps symbols to words, codec.py holds
the Encoder and Decoder, stream.py encodes chunked input, and errors.py
defines the exception hierarchy.

RULES:
- No I/O in the core beyond loading the dictionary file
- Every function is deterministic and free of shared mutable state
"""

from wordbytes.core.codec import Decoder, Encoder, decode, encode
from wordbytes.core.dictionary import Dictionary, load_dictionary
from wordbytes.core.errors import (
    DictionaryError,
    InvalidSymbolError,
    MalformedPaddingError,
    UnknownWordError,
    WordbytesError,
)
from wordbytes.core.stream import StreamEncoder, iter_encode

__all__ = [
    "Decoder",
    "Dictionary",
    "DictionaryError",
    "Encoder",
    "InvalidSymbolError",
    "MalformedPaddingError",
    "StreamEncoder",
    "UnknownWordError",
    "WordbytesError",
    "decode",
    "encode",
    "iter_encode",
    "load_dictionary",
]
