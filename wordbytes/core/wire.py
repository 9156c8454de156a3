"""Wire-format constants: separator, marker token and padding words.

WHY: The encoder, decoder and dictionary validation all need to agree on
which tokens are reserved. Keeping them in one place makes the wire
format easy to find and impossible to drift between modules.

HOW: A word-sequence is dictionary words joined by SEPARATOR. When the
input's bit length is not a multiple of 11, the encoder appends MARKER
followed by the padding word for the remainder (``8N mod 11``, 1..10).

RULES:
- Reserved tokens are never valid dictionary entries
- PADDING_WORDS[r - 1] encodes remainder r
- A remainder of 0 means exact fit: no marker is emitted
"""

from __future__ import annotations

SEPARATOR = "-"

MARKER = "of"

PADDING_WORDS: tuple[str, ...] = (
    "an", "as", "at", "be", "by",
    "do", "go", "if", "in", "is",
)

RESERVED_WORDS = frozenset((MARKER,) + PADDING_WORDS)

_REMAINDER_BY_WORD = {word: i + 1 for i, word in enumerate(PADDING_WORDS)}


def bit_remainder(byte_len: int) -> int:
    """Bits in the final, partially filled symbol (0 when it is full)."""
    return (byte_len * 8) % 11


def padding_word(remainder: int) -> str:
    """Return the padding word that encodes ``remainder`` (1..10)."""
    if not 1 <= remainder <= len(PADDING_WORDS):
        raise ValueError("Padding remainder must be 1..10, got {}".format(remainder))
    return PADDING_WORDS[remainder - 1]


def remainder_of(word: str) -> int | None:
    """Return the remainder encoded by a padding word, or None if it is not one."""
    return _REMAINDER_BY_WORD.get(word)
