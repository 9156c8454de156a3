"""The 2048-word dictionary mapping symbols to words and back.

WHY: Each 11-bit symbol is written as one word, so the codec needs a
fixed bijection between 0..2047 and 2048 distinct words, with O(1) lookup
in both directions. Making it an injected, immutable object (instead of a
module-level table) lets tests swap in a small synthetic word list.

HOW: Dictionary validates a word list once at construction and keeps a
tuple (index -> word) plus a dict (word -> index). from_text() parses the
plain word-list format (whitespace-separated words).
load_dictionary() returns a cached instance built from an explicit path,
the WORDBYTES_DICTIONARY setting, or the bundled data/dictionary.txt.

RULES:
- Exactly 2048 words, all distinct and non-empty
- Words contain no separator dash and no whitespace
- No word equals the marker or a padding word
- Instances are never mutated after construction
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib.resources import files
from pathlib import Path

from wordbytes import config
from wordbytes.core.bits import SYMBOL_BITS
from wordbytes.core.errors import DictionaryError, InvalidSymbolError, UnknownWordError
from wordbytes.core.wire import RESERVED_WORDS, SEPARATOR

logger = logging.getLogger(__name__)

DICTIONARY_SIZE = 1 << SYMBOL_BITS  # 2048

BUNDLED_DICTIONARY = "data/dictionary.txt"


class Dictionary:
    """Immutable bijection between symbols 0..2047 and words.

    WHY: The encoder needs ``word_at`` and the decoder needs ``index_of``;
    both must be fast and must agree with each other exactly.

    HOW: The constructor validates the word list and builds the reverse
    lookup. Any violation raises DictionaryError naming the first problem.

    RULES:
    - word_at raises InvalidSymbolError outside 0..2047
    - index_of raises UnknownWordError for unknown words
    """

    def __init__(self, words: Iterable[str]) -> None:
        words = tuple(words)
        if len(words) != DICTIONARY_SIZE:
            raise DictionaryError(
                "Dictionary must contain exactly {} words, got {}".format(
                    DICTIONARY_SIZE, len(words)
                )
            )

        indices: dict[str, int] = {}
        for index, word in enumerate(words):
            if not word:
                raise DictionaryError("Empty word at index {}".format(index))
            if SEPARATOR in word or any(c.isspace() for c in word):
                raise DictionaryError(
                    "Word {!r} at index {} contains a dash or whitespace".format(word, index)
                )
            if word in RESERVED_WORDS:
                raise DictionaryError(
                    "Word {!r} at index {} is reserved for padding".format(word, index)
                )
            if word in indices:
                raise DictionaryError(
                    "Duplicate word {!r} at indices {} and {}".format(word, indices[word], index)
                )
            indices[word] = index

        self._words = words
        self._indices = indices

    @classmethod
    def from_text(cls, text: str) -> Dictionary:
        """Build a dictionary from whitespace-separated words."""
        return cls(text.split())

    @classmethod
    def from_file(cls, path: str | Path) -> Dictionary:
        """Read a UTF-8 word-list file and build a dictionary from it."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    @property
    def words(self) -> tuple[str, ...]:
        """All 2048 words in symbol order."""
        return self._words

    def word_at(self, index: int) -> str:
        """Return the word for symbol ``index``.

        RULES:
        - Raises InvalidSymbolError when ``index`` is outside 0..2047
        """
        if not 0 <= index < DICTIONARY_SIZE:
            raise InvalidSymbolError(index)
        return self._words[index]

    def index_of(self, word: str) -> int:
        """Return the symbol for ``word``.

        Lookup is exact: no case folding or trimming is applied.

        RULES:
        - Raises UnknownWordError (without a position) for words not in the list
        """
        try:
            return self._indices[word]
        except KeyError:
            raise UnknownWordError(word) from None

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return "Dictionary({!r} ... {!r})".format(self._words[0], self._words[-1])


def load_dictionary(path: str | Path | None = None) -> Dictionary:
    """Return the process-wide dictionary, loading it on first use.

    WHY: Parsing and validating 2048 words on every call would be wasted
    work; the dictionary never changes during a run.

    HOW: Resolves the source (explicit path, then the WORDBYTES_DICTIONARY
    setting, then the bundled list) and caches one instance per source.

    RULES:
    - Missing files raise FileNotFoundError from the read
    - Invalid word lists raise DictionaryError
    """
    if path is None and config.WORDBYTES_DICTIONARY:
        path = config.WORDBYTES_DICTIONARY
    return _load_cached(str(Path(path).resolve()) if path is not None else None)


@lru_cache(maxsize=None)
def _load_cached(path: str | None) -> Dictionary:
    if path is None:
        text = files("wordbytes").joinpath(BUNDLED_DICTIONARY).read_text(encoding="utf-8")
        dictionary = Dictionary.from_text(text)
    else:
        dictionary = Dictionary.from_file(path)
    logger.debug("Loaded %d words from %s", len(dictionary), path or "bundled word list")
    return dictionary
