"""Tests for configuration settings.

WHY: A mistyped WORDBYTES_CHUNK_SIZE or API_PORT should produce a clear
error at the point of use, not a traceback at import time or a confusing
failure deep in the stream reader.

HOW: Patches the module-level settings with monkeypatch and calls the
validating accessors.
"""

import pytest

from wordbytes import config


class TestChunkSize:
    def test_default(self, monkeypatch):
        monkeypatch.setattr(config, "WORDBYTES_CHUNK_SIZE", "11264")
        assert config.chunk_size_setting() == 11264

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setattr(config, "WORDBYTES_CHUNK_SIZE", "lots")
        with pytest.raises(ValueError, match="must be an integer"):
            config.chunk_size_setting()

    def test_not_positive(self, monkeypatch):
        monkeypatch.setattr(config, "WORDBYTES_CHUNK_SIZE", "0")
        with pytest.raises(ValueError, match="must be positive"):
            config.chunk_size_setting()


class TestApiPort:
    def test_default(self, monkeypatch):
        monkeypatch.setattr(config, "API_PORT", "8000")
        assert config.api_port_setting() == 8000

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setattr(config, "API_PORT", "eighty")
        with pytest.raises(ValueError, match="API_PORT must be an integer, got 'eighty'"):
            config.api_port_setting()

    def test_out_of_range(self, monkeypatch):
        monkeypatch.setattr(config, "API_PORT", "70000")
        with pytest.raises(ValueError, match="between 1 and 65535"):
            config.api_port_setting()

    def test_bad_port_does_not_break_the_cli(self, monkeypatch, tmp_path):
        from wordbytes.cli import main

        monkeypatch.setattr(config, "API_PORT", "eighty")
        source = tmp_path / "in.bin"
        source.write_bytes(b"\xff")
        target = tmp_path / "out.txt"

        main(["encode", "-i", str(source), "-o", str(target)])

        assert target.read_text(encoding="utf-8").endswith("-of-if")
