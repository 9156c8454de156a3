"""Encoder and Decoder between byte buffers and word-sequences.

WHY: This is the public heart of the package. It turns arbitrary bytes
into a dash-joined line of dictionary words and back, and it has to get
the byte count exactly right even though 8N bits rarely divide into
11-bit symbols.

HOW: The Encoder splits the bytes into 11-bit symbols, maps each to a
word, and when ``8N mod 11`` is non-zero appends the marker plus the
padding word for that remainder. The Decoder strips and validates the
marker/padding pair, maps words back to symbols, computes the original
byte length from the symbol count and remainder, and joins the symbols
back into bytes.

RULES:
- Empty input encodes to "" and "" decodes to b""
- The marker is emitted only when the remainder is non-zero
- The marker must be second-to-last and followed by one padding word
- Without a marker, byte length is floor(11 * symbols / 8)
- Unknown tokens raise UnknownWordError, never a silent default
- Padding is never inferred from decoded byte values
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wordbytes.core.bits import SYMBOL_BITS, join, split
from wordbytes.core.dictionary import Dictionary, load_dictionary
from wordbytes.core.errors import MalformedPaddingError, UnknownWordError
from wordbytes.core.wire import MARKER, SEPARATOR, bit_remainder, padding_word, remainder_of

logger = logging.getLogger(__name__)


class Encoder:
    """Encode byte buffers as word-sequences with a given dictionary."""

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    def encode_words(self, data: bytes | bytearray) -> list[str]:
        """Return the words for ``data``, marker and padding word included.

        Args:
            data: Any byte buffer, including an empty one.

        Returns:
            ``ceil(8N / 11)`` dictionary words, followed by the marker and
            a padding word when ``8N mod 11`` is not zero.
        """
        symbols = split(data)
        words = [self.dictionary.word_at(s) for s in symbols]

        remainder = bit_remainder(len(data))
        if remainder:
            words.append(MARKER)
            words.append(padding_word(remainder))

        logger.debug(
            "Encoded %d bytes as %d symbols (remainder %d)",
            len(data), len(symbols), remainder,
        )
        return words

    def encode(self, data: bytes | bytearray) -> str:
        """Return the dash-joined word-sequence for ``data``."""
        return SEPARATOR.join(self.encode_words(data))


class Decoder:
    """Decode word-sequences back into the exact original bytes."""

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    def decode(self, text: str) -> bytes:
        """Decode a dash-joined word-sequence.

        The text is split on the separator as-is; trailing newlines and
        other framing must be stripped by the caller.

        Raises:
            UnknownWordError: a token is not in the dictionary.
            MalformedPaddingError: the marker or padding word is misplaced.
        """
        if not text:
            return b""
        return self.decode_words(text.split(SEPARATOR))

    def decode_words(self, words: Sequence[str]) -> bytes:
        """Decode an already split list of tokens.

        WHY: Callers that hold words as a list (the HTTP API, tests) should
        not have to join them just to have them split again.

        HOW: Peels off the marker/padding pair, resolves the rest through
        the dictionary, derives the byte length and joins the symbols.

        RULES:
        - An empty list decodes to b""
        - Remainder r means the last symbol carries only r real bits
        - The resulting bit length must be a whole number of bytes
        """
        words, remainder = _strip_padding(list(words))

        symbols = []
        for position, word in enumerate(words):
            try:
                symbols.append(self.dictionary.index_of(word))
            except UnknownWordError:
                raise UnknownWordError(word, position) from None

        bit_len = len(symbols) * SYMBOL_BITS
        if remainder:
            bit_len -= SYMBOL_BITS - remainder
            if bit_len % 8:
                raise MalformedPaddingError(
                    "Padding word for remainder {} does not match {} words".format(
                        remainder, len(symbols)
                    )
                )

        byte_len = bit_len // 8
        logger.debug(
            "Decoding %d symbols into %d bytes (remainder %d)",
            len(symbols), byte_len, remainder,
        )
        return join(symbols, byte_len)


def _strip_padding(words: list[str]) -> tuple[list[str], int]:
    """Split off a trailing marker/padding pair; return (words, remainder)."""
    if MARKER not in words:
        return words, 0

    position = words.index(MARKER)
    if position != len(words) - 2:
        raise MalformedPaddingError(
            "Marker {!r} at position {} must be followed by exactly one padding word".format(
                MARKER, position
            )
        )

    remainder = remainder_of(words[-1])
    if remainder is None:
        raise MalformedPaddingError(
            "{!r} after marker {!r} is not a padding word".format(words[-1], MARKER)
        )
    if position == 0:
        raise MalformedPaddingError("Marker {!r} has no words before it".format(MARKER))

    return words[:position], remainder


def encode(data: bytes | bytearray, dictionary: Dictionary | None = None) -> str:
    """Encode ``data`` with ``dictionary`` (default: the loaded dictionary)."""
    if dictionary is None:
        dictionary = load_dictionary()
    return Encoder(dictionary).encode(data)


def decode(text: str, dictionary: Dictionary | None = None) -> bytes:
    """Decode ``text`` with ``dictionary`` (default: the loaded dictionary)."""
    if dictionary is None:
        dictionary = load_dictionary()
    return Decoder(dictionary).decode(text)
