import hashlib
import json
from pathlib import Path

import pytest
from PIL import Image

from byteraster.codec.codec import PixelCodec
from byteraster.codec.config import config_for_variant

from tests.conftest import outputs_unrev_test_dir, random_payload


def _sha256(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


@pytest.mark.parametrize("variant", ["rgba", "rgb"])
def test_codec_file_roundtrip_artifacts(request, variant: str):
    """
    Writes input, PNG, decoded output and a small manifest for manual review.
    """
    out_dir = outputs_unrev_test_dir(request)

    payload = random_payload(1500, seed=42) + b"tail" * 16
    src = out_dir / "input.bin"
    png = out_dir / "encoded.png"
    dec = out_dir / "decoded.bin"
    src.write_bytes(payload)

    codec = PixelCodec(config_for_variant(variant))
    grid = codec.encode_file(src, png)
    decoded = codec.decode_file(png, dec)

    with Image.open(png) as img:
        assert img.mode == ("RGBA" if variant == "rgba" else "RGB")
        assert img.size == (grid.shape[1], grid.shape[0])

    if variant == "rgba":
        assert decoded == payload
    else:
        assert decoded[:len(payload)] == payload
        assert set(decoded[len(payload):]) <= {0}
    assert dec.read_bytes() == decoded

    manifest = {
        "variant": variant,
        "payload_len": len(payload),
        "image_size": [grid.shape[1], grid.shape[0]],
        "decoded_len": len(decoded),
        "payload_sha256": _sha256(payload),
        "decoded_sha256": _sha256(decoded),
    }
    (out_dir / "manifest.json").write_text(json.dumps(manifest, indent=2))


def test_codec_decode_file_missing_input(tmp_path: Path):
    codec = PixelCodec(config_for_variant("rgba"))
    with pytest.raises(OSError):
        codec.decode_file(tmp_path / "nope.png", tmp_path / "out.bin")
