"""Main CLI entry point for fdbtuple."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import TypeAdapter

from .. import __version__
from .explain import explain_key
from ..config import CodecConfig
from ..exceptions import TupleLayerError
from ..keys import decode_key
from ..models.elements import Element
from ..native import pack

_ELEMENTS = TypeAdapter(tuple[Element, ...])


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fdbtuple CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="fdbtuple: Order-Preserving Tuple Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fdbtuple --encode '["users", 42, null]'     Encode a JSON array as a key
  fdbtuple --decode 0215010000                Decode a hex key to JSON elements
  fdbtuple --explain 05150100                 Show a per-element breakdown
  fdbtuple --version                          Show version
        """,
    )

    parser.add_argument(
        "--encode",
        metavar="JSON",
        type=str,
        help="Encode a JSON array of values and print the key as hex",
    )
    parser.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a hex key and print its elements as JSON",
    )
    parser.add_argument(
        "--explain",
        metavar="HEX",
        type=str,
        help="Decode a hex key and print a per-element breakdown",
    )
    parser.add_argument(
        "--prefix",
        metavar="HEX",
        type=str,
        default="",
        help="Key prefix (hex) prepended when encoding and stripped when decoding",
    )
    parser.add_argument(
        "--float32",
        action="store_true",
        help="Encode JSON numbers with a fractional part as 32-bit floats",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=CodecConfig.max_depth,
        help="Maximum nested tuple depth accepted when decoding",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fdbtuple {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = CodecConfig(
            max_depth=args.max_depth,
            native_float="float" if args.float32 else "double",
        )
        prefix = bytes.fromhex(args.prefix)

        if args.encode is not None:
            values = json.loads(args.encode)
            if not isinstance(values, list):
                print("Error: --encode expects a JSON array", file=sys.stderr)
                return 1
            print((prefix + pack(values, config)).hex())
            return 0

        if args.decode is not None:
            elements = decode_key(prefix, bytes.fromhex(args.decode), config)
            print(_ELEMENTS.dump_json(elements, indent=2).decode())
            return 0

        if args.explain is not None:
            explain_key(bytes.fromhex(args.explain), prefix, config)
            return 0
    except (TupleLayerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
