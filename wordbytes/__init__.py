"""wordbytes — reversible byte <-> word-sequence codec.

WHY: Binary data (keys, hashes, tokens) is hard to read aloud, copy by
hand or paste into places that mangle it. This package writes any byte
sequence as a dash-separated line of dictionary words and turns such a
line back into the exact original bytes.

HOW: Bytes are regrouped into 11-bit symbols (core.bits), each symbol is
written as one of 2048 dictionary words (core.dictionary), and a trailing
marker plus padding word records how many bits of the last symbol are
real (core.codec). The CLI and the HTTP API are thin layers over the codec.

RULES:
- decode(encode(b)) == b for every byte string b
- The wire format is words joined by "-", marker and padding word last
- The dictionary is immutable and injected into the codec
"""

__version__ = "0.1.0"
