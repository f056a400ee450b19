from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..codec import FormatError, SaveFailed
from ..pipeline import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, BlurJob, BlurSettings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply a 3x3 box blur to an uncompressed 24-bit BMP image."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT_PATH, help=f"Input BMP (default: {DEFAULT_INPUT_PATH})")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT_PATH, help=f"Blurred BMP to write (default: {DEFAULT_OUTPUT_PATH})"
    )
    parser.add_argument(
        "--keep-input",
        action="store_true",
        help="Do not re-save the decoded original over the input file",
    )
    parser.add_argument("--preview", metavar="PATH", help="Also save the blurred image as PNG (or any Pillow format)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> BlurSettings:
    return BlurSettings(
        input_path=args.input,
        output_path=args.output,
        rewrite_input=not args.keep_input,
        preview_path=args.preview,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = build_settings(args)
    try:
        BlurJob(settings).run()
    except FormatError as exc:
        print(str(exc), file=sys.stderr)
        print("Failed to load image", file=sys.stderr)
        return 1
    except SaveFailed as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Image processed and saved as {settings.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
