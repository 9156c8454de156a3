"""Incremental encoding of byte streams.

WHY: The CLI reads stdin until exhaustion and inputs can be larger than
is comfortable to hold twice in memory (bytes plus word list). Encoding
block by block keeps memory flat while producing exactly the same output
as Encoder.encode on the whole input.

HOW: 11 bytes are exactly 8 symbols, so input is buffered into 11-byte
blocks that each split on their own without touching their neighbours.
StreamEncoder.feed() emits the words for every complete block and keeps
the rest pending. finish() splits the final partial block and appends the
marker and padding word based on the total byte count seen.

RULES:
- Output joined with "-" equals Encoder.encode(all input)
- Chunk boundaries never affect the output
- finish() is called exactly once; feed() after finish() is an error
- iter_encode() rounds the read size up to a multiple of 11
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO

from wordbytes.core.bits import BLOCK_SIZE, split_block
from wordbytes.core.dictionary import Dictionary
from wordbytes.core.wire import MARKER, bit_remainder, padding_word

logger = logging.getLogger(__name__)


class StreamEncoder:
    """Encode a byte stream chunk by chunk.

    Attributes:
        dictionary: The dictionary mapping symbols to words.
        total_bytes: Number of bytes fed so far.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        self.total_bytes = 0
        self._pending = bytearray()
        self._finished = False

    def feed(self, chunk: bytes | bytearray) -> list[str]:
        """Buffer ``chunk`` and return the words of every complete block."""
        if self._finished:
            raise RuntimeError("StreamEncoder.feed() called after finish()")

        self.total_bytes += len(chunk)
        self._pending += chunk

        complete = len(self._pending) - len(self._pending) % BLOCK_SIZE
        words: list[str] = []
        for start in range(0, complete, BLOCK_SIZE):
            block = self._pending[start:start + BLOCK_SIZE]
            words.extend(self.dictionary.word_at(s) for s in split_block(block))
        del self._pending[:complete]
        return words

    def finish(self) -> list[str]:
        """Return the words of the final partial block plus the padding marker."""
        if self._finished:
            raise RuntimeError("StreamEncoder.finish() called twice")
        self._finished = True

        words = [self.dictionary.word_at(s) for s in split_block(self._pending)]
        self._pending.clear()

        remainder = bit_remainder(self.total_bytes)
        if remainder:
            words.append(MARKER)
            words.append(padding_word(remainder))

        logger.debug("Stream finished after %d bytes (remainder %d)", self.total_bytes, remainder)
        return words


def iter_encode(
    stream: BinaryIO,
    dictionary: Dictionary,
    chunk_size: int = BLOCK_SIZE * 1024,
) -> Iterator[str]:
    """Read ``stream`` until exhaustion and yield its words in order.

    Args:
        stream: A binary file object (e.g. ``sys.stdin.buffer``).
        dictionary: The dictionary mapping symbols to words.
        chunk_size: Bytes per read, rounded up to a multiple of 11.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive, got {}".format(chunk_size))
    chunk_size = -(-chunk_size // BLOCK_SIZE) * BLOCK_SIZE

    encoder = StreamEncoder(dictionary)
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield from encoder.feed(chunk)
    yield from encoder.finish()
