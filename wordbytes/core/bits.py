"""8-bit <-> 11-bit regrouping of byte buffers.

WHY: Every dictionary word carries 11 bits, but input arrives as whole
bytes. The codec needs a lossless way to read a byte buffer as a run of
11-bit symbols and to write such symbols back into bytes, without the
off-by-one mistakes that hand-unrolled shift code tends to grow.

HOW: The buffer is viewed as one big-endian bitstream (bit 0 is the most
significant bit of byte 0). Symbol ``i`` occupies bits ``11*i`` to
``11*i + 10``. Depending on ``bit_shift = (11*i) % 8`` that window spans
two bytes (``bit_shift < 5``), exactly fills the second byte
(``bit_shift == 5``) or spans three bytes (``bit_shift > 5``). Rather than
branch on those cases, _window() computes the spanned byte range once and
the spanned bytes are handled as a single integer.

RULES:
- split() zero-pads the final symbol on the right
- join() returns exactly the requested byte count
- write_symbol() is read-modify-write: bits outside the window survive
- Symbols outside 0..2047 raise InvalidSymbolError
- shift_11() / split_block() are the block-wise form used for streaming;
  they must agree with split() symbol for symbol
"""

from __future__ import annotations

from collections.abc import Iterable

from wordbytes.core.errors import InvalidSymbolError

# ---------------------------------------------------------------------------
# Symbol geometry
# ---------------------------------------------------------------------------

SYMBOL_BITS = 11
SYMBOL_MASK = (1 << SYMBOL_BITS) - 1  # 0b111_1111_1111

BLOCK_SIZE = 11
"""Bytes per block; 11 bytes hold exactly 8 symbols (88 bits)."""


def symbol_count(byte_len: int) -> int:
    """Number of symbols needed for ``byte_len`` bytes: ceil(8N / 11)."""
    return (byte_len * 8 + SYMBOL_BITS - 1) // SYMBOL_BITS


def _window(index: int) -> tuple[int, int, int]:
    """Return (start, stop, shift) for the bytes holding symbol ``index``.

    ``shift`` is how far the symbol sits above the least significant bit
    of the integer formed by ``buffer[start:stop]``.
    """
    bit_offset = index * SYMBOL_BITS
    start = bit_offset // 8
    stop = (bit_offset + SYMBOL_BITS - 1) // 8 + 1
    shift = (stop - start) * 8 - (bit_offset % 8) - SYMBOL_BITS
    return start, stop, shift


# ---------------------------------------------------------------------------
# Random access to single symbols
# ---------------------------------------------------------------------------


def read_symbol(buffer: bytes | bytearray, index: int) -> int:
    """Read the 11-bit symbol at bit offset ``11 * index``.

    Bytes past the end of ``buffer`` read as zero.
    """
    start, stop, shift = _window(index)
    chunk = bytes(buffer[start:stop])
    chunk += bytes(stop - start - len(chunk))
    return (int.from_bytes(chunk, "big") >> shift) & SYMBOL_MASK


def write_symbol(buffer: bytearray, index: int, value: int) -> None:
    """Write ``value`` into the 11-bit window at bit offset ``11 * index``.

    Only the bits of the window change; neighbouring bits already set by
    other symbols are preserved.

    Raises:
        InvalidSymbolError: ``value`` is outside 0..2047.
        ValueError: the window extends past the end of ``buffer``.
    """
    if not 0 <= value <= SYMBOL_MASK:
        raise InvalidSymbolError(value)

    start, stop, shift = _window(index)
    if stop > len(buffer):
        raise ValueError(
            "Symbol {} needs {} bytes, buffer has {}".format(index, stop, len(buffer))
        )

    mask = SYMBOL_MASK << shift
    window = int.from_bytes(buffer[start:stop], "big")
    window = (window & ~mask) | (value << shift)
    buffer[start:stop] = window.to_bytes(stop - start, "big")


# ---------------------------------------------------------------------------
# Whole-buffer conversion
# ---------------------------------------------------------------------------


def split(data: bytes | bytearray) -> list[int]:
    """Slice ``data`` into consecutive 11-bit symbols.

    Returns ``ceil(8 * len(data) / 11)`` values; an empty buffer gives an
    empty list. Missing bits in the final symbol are zero.
    """
    return [read_symbol(data, i) for i in range(symbol_count(len(data)))]


def join(symbols: Iterable[int], byte_len: int) -> bytes:
    """Write ``symbols`` back into a buffer of exactly ``byte_len`` bytes.

    The caller supplies ``byte_len`` because several byte lengths share the
    same symbol count once zero padding is involved. Bits of the final
    symbol that fall past ``byte_len`` are dropped.

    Raises:
        InvalidSymbolError: a symbol is outside 0..2047.
        ValueError: ``byte_len`` is negative or larger than the symbols fill.
    """
    symbols = list(symbols)
    capacity = (len(symbols) * SYMBOL_BITS + 7) // 8
    if not 0 <= byte_len <= capacity:
        raise ValueError(
            "Cannot produce {} bytes from {} symbols (at most {})".format(
                byte_len, len(symbols), capacity
            )
        )

    buffer = bytearray(capacity)
    for index, value in enumerate(symbols):
        write_symbol(buffer, index, value)
    del buffer[byte_len:]
    return bytes(buffer)


# ---------------------------------------------------------------------------
# Block-wise form for streaming
# ---------------------------------------------------------------------------


def shift_11(buffer: bytearray) -> None:
    """Shift ``buffer`` left by 11 bits in place, filling with zeros."""
    if len(buffer) < 2:
        raise ValueError("shift_11 needs at least 2 bytes, got {}".format(len(buffer)))

    for i in range(len(buffer) - 2):
        buffer[i] = ((buffer[i + 1] & 0b11111) << 3) | ((buffer[i + 2] & 0b11100000) >> 5)

    buffer[-2] = (buffer[-1] & 0b11111) << 3
    buffer[-1] = 0


def split_block(block: bytes | bytearray) -> list[int]:
    """Split one block by repeatedly taking the top 11 bits and shifting.

    Produces the same symbols as split(); used by the streaming encoder on
    BLOCK_SIZE-byte blocks and on the final partial block.
    """
    count = symbol_count(len(block))
    # Two spare zero bytes keep the top-11-bit read in range for short blocks.
    buffer = bytearray(block) + bytes(2)
    symbols = []
    for _ in range(count):
        symbols.append((buffer[0] << 3) | (buffer[1] >> 5))
        shift_11(buffer)
    return symbols
