import logging
import zlib

import pytest

from byteraster.codec.stages.compression.modules.deflate import Config, decompress, try_compress


def _boom(data: bytes, level: int) -> bytes:
    raise zlib.error("forced failure")


def test_deflate_compresses_at_best_level():
    payload = b"abcabcabc" * 100
    is_compressed, body = try_compress(payload, cfg=Config())

    assert is_compressed is True
    assert body == zlib.compress(payload, 9)
    assert decompress(body, cfg=Config()) == payload


def test_deflate_compresses_even_when_output_grows():
    # Tiny inputs grow under zlib; compression is still used.
    payload = b"\x00\x01\x02\x03\x04"
    is_compressed, body = try_compress(payload, cfg=Config())

    assert is_compressed is True
    assert len(body) > len(payload)


def test_deflate_failure_falls_back_to_raw(caplog):
    payload = b"some payload bytes"
    with caplog.at_level(logging.WARNING):
        is_compressed, body = try_compress(payload, cfg=Config(compress=_boom))

    assert is_compressed is False
    assert body == payload
    assert "Compression failed" in caplog.text


def test_deflate_failure_uses_injected_logger(caplog):
    logger = logging.getLogger("test.injected")
    with caplog.at_level(logging.WARNING, logger="test.injected"):
        try_compress(b"x", cfg=Config(compress=_boom, logger=logger))

    assert [r.name for r in caplog.records] == ["test.injected"]


def test_deflate_rejects_invalid_body():
    with pytest.raises(ValueError, match="decompression failed"):
        decompress(b"definitely not zlib", cfg=Config())


def test_deflate_rejects_bad_level():
    with pytest.raises(ValueError, match="out of range"):
        try_compress(b"x", cfg=Config(level=10))


def test_deflate_rejects_non_bytes():
    with pytest.raises(TypeError):
        try_compress("text", cfg=Config())
