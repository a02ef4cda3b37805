"""
Command-line front end.

Usage:
    jwk-pem jwks.json
    curl -s https://example.com/.well-known/jwks.json | jwk-pem -o key.pem
"""

import argparse
import logging
import sys

from jwkpem import config
from jwkpem.converter import convert

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jwk-pem",
        description="Convert a JWK (or the first key of a JWKS) to a PEM public key.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("rb"),
        help="JWK/JWKS JSON file (default: stdin)",
    )
    parser.add_argument("-o", "--output", help="write the PEM to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL)

    # Bytes go straight to convert(), which reports bad UTF-8 as InvalidJsonError
    if args.input is None:
        data = sys.stdin.buffer.read()
    else:
        with args.input:
            data = args.input.read()

    result = convert(data)
    if not result.ok:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(result.pem + "\n")
        logger.info("Wrote %s key to %s", result.key_type, args.output)
    else:
        print(result.pem)
    return 0


if __name__ == "__main__":
    sys.exit(main())
