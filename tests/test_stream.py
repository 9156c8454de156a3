"""Tests for the streaming encoder.

WHY: The CLI encodes through StreamEncoder, so its output must match the
whole-buffer Encoder byte for byte no matter how the input is chunked.

HOW: Feeds the same data through different chunkings (single bytes,
11-byte blocks, odd sizes, one big chunk) and compares against
Encoder.encode. iter_encode is driven with io.BytesIO streams.

RULES:
- Output equality is checked on the dash-joined string
- All random data uses the seeded rng fixture
"""

import io

import pytest

from wordbytes.core.stream import StreamEncoder, iter_encode


def _encode_in_chunks(dictionary, data, size):
    stream = StreamEncoder(dictionary)
    words = []
    for start in range(0, len(data), size):
        words.extend(stream.feed(data[start:start + size]))
    words.extend(stream.finish())
    return "-".join(words)


class TestStreamEncoder:
    """feed()/finish() reproduce Encoder.encode."""

    @pytest.mark.parametrize("chunk_size", [1, 2, 5, 11, 13, 64, 1000])
    def test_matches_encoder(self, synthetic_dictionary, encoder, rng, chunk_size):
        for length in (0, 1, 10, 11, 12, 33, 100, 257):
            data = bytes(rng.randrange(256) for _ in range(length))
            assert _encode_in_chunks(synthetic_dictionary, data, chunk_size) == encoder.encode(data)

    def test_feed_returns_only_complete_blocks(self, synthetic_dictionary):
        stream = StreamEncoder(synthetic_dictionary)
        assert stream.feed(b"\xff" * 10) == []
        assert stream.feed(b"\xff") == ["w2047"] * 8
        assert stream.total_bytes == 11

    def test_finish_adds_marker(self, synthetic_dictionary):
        stream = StreamEncoder(synthetic_dictionary)
        stream.feed(b"\xff")
        assert stream.finish() == ["w2040", "of", "if"]

    def test_finish_on_empty_stream(self, synthetic_dictionary):
        assert StreamEncoder(synthetic_dictionary).finish() == []

    def test_feed_after_finish(self, synthetic_dictionary):
        stream = StreamEncoder(synthetic_dictionary)
        stream.finish()
        with pytest.raises(RuntimeError):
            stream.feed(b"x")

    def test_finish_twice(self, synthetic_dictionary):
        stream = StreamEncoder(synthetic_dictionary)
        stream.finish()
        with pytest.raises(RuntimeError):
            stream.finish()


class TestIterEncode:
    """iter_encode reads a binary stream until exhaustion."""

    def test_matches_encoder(self, synthetic_dictionary, encoder, rng):
        data = bytes(rng.randrange(256) for _ in range(1234))
        words = iter_encode(io.BytesIO(data), synthetic_dictionary, chunk_size=100)
        assert "-".join(words) == encoder.encode(data)

    def test_empty_stream(self, synthetic_dictionary):
        assert list(iter_encode(io.BytesIO(b""), synthetic_dictionary)) == []

    def test_rejects_non_positive_chunk_size(self, synthetic_dictionary):
        with pytest.raises(ValueError):
            list(iter_encode(io.BytesIO(b"abc"), synthetic_dictionary, chunk_size=0))
