"""Shared test fixtures for the wordbytes test suite.

WHY: Most tests need a dictionary. A synthetic one (w0000..w2047) makes
expected words easy to compute by hand from symbol values; the bundled
list checks the real resource.

HOW: Session-scoped fixtures build each dictionary once; the codec never
mutates them.

RULES:
- SYNTHETIC_WORDS[i] == "w{:04d}".format(i), so a word names its symbol
- Random data uses a fixed seed for reproducibility
"""

import random

import pytest

from wordbytes.core.codec import Decoder, Encoder
from wordbytes.core.dictionary import Dictionary, load_dictionary

SYNTHETIC_WORDS = ["w{:04d}".format(i) for i in range(2048)]


@pytest.fixture(scope="session")
def synthetic_dictionary():
    """Dictionary whose word for symbol i is 'w' plus i zero-padded to 4 digits."""
    return Dictionary(SYNTHETIC_WORDS)


@pytest.fixture(scope="session")
def bundled_dictionary():
    """The 2048-word list shipped with the package."""
    return load_dictionary()


@pytest.fixture
def encoder(synthetic_dictionary):
    return Encoder(synthetic_dictionary)


@pytest.fixture
def decoder(synthetic_dictionary):
    return Decoder(synthetic_dictionary)


@pytest.fixture
def rng():
    """Seeded random generator for fuzz-style tests."""
    return random.Random(0x11B17)
