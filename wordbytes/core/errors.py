"""Exception types raised by the word codec.

WHY: Callers (CLI, HTTP API, tests) need typed exceptions to tell a bad
word-sequence apart from a bad dictionary or an internal defect, and to
report each one clearly instead of failing with a bare KeyError.

HOW: A single base class, WordbytesError, with one subclass per failure
mode. Each exception is raised where the problem is detected and
propagates unchanged through the codec.

RULES:
- All codec errors derive from WordbytesError
- UnknownWordError always carries the offending token and its position
- InvalidSymbolError signals a defect in bit arithmetic, never bad input
- No condition is retryable: the codec is a pure function of its input
"""

from __future__ import annotations


class WordbytesError(Exception):
    """Base class for every error raised by the word codec."""


class UnknownWordError(WordbytesError):
    """Raised when a token is neither a dictionary word nor the marker.

    WHY: Decoding must never substitute a default for an unknown token;
    a single bad word changes every byte after it.

    HOW: Raised by Dictionary.index_of and re-raised by the Decoder with
    the token's position in the word-sequence filled in.

    RULES:
    - word is the literal token (may be "" for doubled dashes)
    - position is the zero-based token index, or None when unknown
    """

    def __init__(self, word: str, position: int | None = None) -> None:
        self.word = word
        self.position = position
        if position is None:
            message = "Unknown word {!r}".format(word)
        else:
            message = "Unknown word {!r} at position {}".format(word, position)
        super().__init__(message)


class MalformedPaddingError(WordbytesError):
    """Raised when the marker or padding word is missing, misplaced or inconsistent.

    RULES:
    - The marker must be second-to-last, followed by exactly one padding word
    - The padding remainder must agree with the number of symbols
    """


class InvalidSymbolError(WordbytesError):
    """Raised when a symbol falls outside the 11-bit range [0, 2047].

    WHY: Dictionary lookups and bit slicing can only ever produce values in
    range. A value outside it is an internal invariant violation and must
    stop the call rather than wrap around silently.
    """

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__("Symbol {} is outside the range 0..2047".format(value))


class DictionaryError(WordbytesError):
    """Raised when a word list cannot serve as the codec dictionary."""
