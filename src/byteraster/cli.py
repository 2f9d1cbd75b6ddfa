from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from byteraster.codec.codec import PixelCodec
from byteraster.codec.config import VARIANTS, config_for_variant

log = logging.getLogger("byteraster")

ENCODE = "encode"
DECODE = "decode"

_DEFAULT_SUFFIX = {ENCODE: ".png", DECODE: ".bin"}


class _UsageParser(argparse.ArgumentParser):
    """
    Usage errors print the usage block and a one-line ERROR to stderr.
    """

    def format_usage(self) -> str:
        return (
            f"USAGE: {self.prog} <-e|-d> <in.file> [out.file]\n"
            "Modes:\n"
            "-e: Encode bytes as color to png\n"
            "-d: Decode png data back to bytes\n"
        )

    def error(self, message: str):
        self.exit(2, f"{self.format_usage()}ERROR: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    ap = _UsageParser(prog="byteraster", description="Store any file as PNG pixels and back")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("-e", dest="mode", action="store_const", const=ENCODE, help="encode bytes as color to png")
    mode.add_argument("-d", dest="mode", action="store_const", const=DECODE, help="decode png data back to bytes")
    ap.add_argument("input", help="input file")
    ap.add_argument("output", nargs="?", default=None, help="output file (default: input with .png/.bin)")
    ap.add_argument("--variant", choices=sorted(VARIANTS), default="rgba", help="pixel layout (default: rgba)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def default_output_path(in_path: Path, mode: str) -> Path:
    return in_path.with_suffix(_DEFAULT_SUFFIX[mode])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    in_path = Path(args.input)
    codec = PixelCodec(config_for_variant(args.variant))

    try:
        # with_suffix() raises ValueError for a path with an empty name ("/")
        out_path = Path(args.output) if args.output else default_output_path(in_path, args.mode)
        if args.mode == ENCODE:
            grid = codec.encode_file(in_path, out_path)
            log.info("wrote %s (%dx%d)", out_path, grid.shape[1], grid.shape[0])
        else:
            payload = codec.decode_file(in_path, out_path)
            log.info("wrote %s (%d bytes)", out_path, len(payload))
    except (OSError, ValueError, OverflowError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
