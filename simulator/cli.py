"""Command-line entry point: simulate a snippet or scan an image into code."""

from __future__ import annotations

import argparse
import base64
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .api import handle_execute
from .config import ScanConfig
from .image_scanner import ImageScanner
from . import constants

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _image_data_url(path: Path) -> str:
    media_type = "image/png" if path.suffix.lower() == ".png" else "image/jpeg"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippet-sim",
        description="Simulate running a code snippet, or turn an image into code",
    )
    parser.add_argument("file", nargs="?", help="Snippet file to simulate ('-' for stdin)")
    parser.add_argument(
        "--language",
        "-l",
        choices=constants.SUPPORTED_LANGUAGES,
        help="Snippet language",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the full result as JSON"
    )
    parser.add_argument(
        "--scan-image",
        metavar="IMAGE",
        help="Generate code from a PNG/JPEG image instead of simulating a snippet",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def _scan(image_path: str) -> int:
    logger.info("Scanning image %s", image_path)
    scanner = ImageScanner(ScanConfig.from_env())
    result = scanner.scan(_image_data_url(Path(image_path)))
    if result.warning:
        print(f"warning: {result.warning}", file=sys.stderr)
    print(result.generated_code)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.scan_image:
        return _scan(args.scan_image)

    if not args.file or not args.language:
        parser.error("a snippet file and --language are required")

    response = handle_execute(
        {"code": _read_source(args.file), "language": args.language}
    )
    if response.status != 200:
        print(response.body["error"], file=sys.stderr)
        return 2 if response.status == 400 else 1

    if args.json:
        print(json.dumps(response.body, indent=2))
    else:
        print(response.body["output"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
