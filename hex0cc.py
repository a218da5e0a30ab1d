#!/usr/bin/env python3
"""
hex0cc — hex0 (boot0) compiler CLI

Usage:
    python hex0cc.py [input.hex0] [output.bin] [--lenient-eof] [-v] [-q]
                     [--log-file PATH]
    python hex0cc.py --encode [input.bin] [output.hex0] [--per-line N]

Input defaults to stdin and output to stdout; "-" selects them explicitly.

Examples:
    python hex0cc.py hex0_x86.hex0 hex0-seed
    cat stage0.hex0 | python hex0cc.py > stage0.bin
    python hex0cc.py --encode stage0.bin stage0.hex0
"""

import argparse
import logging
import sys
import os

# Allow running from project root or as module
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hex0_compiler import __version__, compile_file, encode_bytes
from hex0_compiler.errors import Hex0Error, Hex0FileError
from hex0_compiler.log_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hex0cc",
        description="Compile hex0 (boot0) source to raw binary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default=None,
                        help="Input file (default: stdin)")
    parser.add_argument("output", nargs="?", default=None,
                        help="Output file (default: stdout)")
    parser.add_argument("--encode", action="store_true",
                        help="Reverse direction: binary in, canonical hex0 out")
    parser.add_argument("--per-line", type=_non_negative_int, default=16,
                        help="Bytes per line with --encode (0 = one line, default: 16)")
    parser.add_argument("--lenient-eof", action="store_true",
                        help="Accept a final comment that has no line break")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase verbosity (-v info, -vv debug)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only report errors")
    parser.add_argument("--log-file", default=None,
                        help="Write a DEBUG log to this file")
    parser.add_argument("--version", action="version",
                        version=f"hex0cc {__version__}")
    return parser


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _console_level(args) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    return logging.WARNING


def _encode(args, log: logging.Logger) -> None:
    """Binary -> hex0 text."""
    if args.input in (None, "-"):
        data = sys.stdin.buffer.read()
    else:
        try:
            with open(args.input, "rb") as f:
                data = f.read()
        except OSError as e:
            raise Hex0FileError(f"failed to open input file {args.input}: {e}",
                                args.input) from e

    text = encode_bytes(data, per_line=args.per_line)
    if args.output in (None, "-"):
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        try:
            with open(args.output, "w", encoding="ascii", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise Hex0FileError(f"failed to create output file {args.output}: {e}",
                                args.output) from e
    log.info("Encoded %d bytes to %s", len(data), args.output or "<stdout>")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("hex0_compiler", _console_level(args), args.log_file)
    log = logging.getLogger("hex0_compiler.cli")

    try:
        if args.encode:
            _encode(args, log)
        else:
            compile_file(args.input, args.output, lenient_eof=args.lenient_eof)
    except Hex0Error as e:
        log.error("ERROR: %s", e)
        return 1
    except OSError as e:
        log.error("ERROR: I/O failure: %s", e)
        return 1
    except KeyboardInterrupt:
        log.warning("Interrupted by user")
        return 130
    except Exception as e:
        log.error("Internal error: %s", e, exc_info=args.verbose > 1)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
