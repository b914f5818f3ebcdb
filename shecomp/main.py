"""
shecomp - command line entry point

Compresses a hex-encoded message with the AUTOSAR SHE compression
function and prints the result as lower-case hex.

Usage:
  shecomp [-i FILE] [-p | -n] [-v] [HEX]

Input source (exactly one):
  HEX              hex string given as an argument
  -i, --input FILE read the hex string from FILE
  (neither)        read the hex string from stdin

Output mode:
  (default)        padded compression
  -p, --padding    print only the padding
  -n, --no-padding compress caller-padded, block-aligned input

Exit codes: 0=OK, 1=input/compression error, 2=usage error.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .core_crypto import (
    SheCompError,
    compress,
    compress_without_padding,
    compute_padding,
    decode_blocks,
    decode_message,
    encode_hex,
)
from .integration.event_logger import EventLogger


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="shecomp",
        description="AUTOSAR SHE compression function (AES-128 Miyaguchi-Preneel)",
    )
    ap.add_argument("hex", nargs="?", default=None,
                    help="Hex-encoded message (default: read stdin)")
    ap.add_argument("-i", "--input", default=None, metavar="FILE",
                    help="Read the hex-encoded message from FILE")

    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-p", "--padding", action="store_true",
                      help="Print only the padding")
    mode.add_argument("-n", "--no-padding", dest="no_padding", action="store_true",
                      help="Input is already padded; compress without adding padding")

    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Print events to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _read_input(args, ap: argparse.ArgumentParser) -> str:
    """Pick the input source: positional argument, file, or stdin."""
    if args.input is not None and args.hex is not None:
        ap.error("both an input file and a hex string were given")

    if args.hex is not None:
        return args.hex
    if args.input is not None:
        with open(args.input, "r", encoding="ascii", errors="surrogateescape", newline="") as f:
            return f.read()
    return sys.stdin.read()


def _run(args, text: str, logger: EventLogger) -> bytes:
    if args.no_padding:
        return compress_without_padding(decode_blocks(text), event_logger=logger)

    message = decode_message(text)
    logger.log_decoded(message.to_bytes(), len(message.blocks), len(message.remainder))

    if args.padding:
        pad = compute_padding(message)
        logger.log_padding(message.bit_length, len(pad))
        return pad
    return compress(message, event_logger=logger)


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    logger = EventLogger()
    if args.verbose:
        logger.add_callback(lambda event: print(event, file=sys.stderr))

    try:
        text = _read_input(args, ap)
        out = _run(args, text, logger)
    except OSError as e:
        print(f"shecomp: cannot read input: {e}", file=sys.stderr)
        return 1
    except SheCompError as e:
        logger.log_failure(e)
        print(f"shecomp: {e.kind}: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(encode_hex(out))
    # newline only for humans; piped output stays the bare digest
    if sys.stdout.isatty():
        sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
