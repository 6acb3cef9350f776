#!/usr/bin/env python3
"""
hc16dis — Motorola CPU16 (68HC16) disassembler CLI

Usage:
    python hc16dis.py [-d] [--compact] [--recover] [--log-file PATH] <INFILE> [INFILE ...]

Each input file is loaded whole and disassembled from offset 0 to stdout.
Log output (-d for INFO, -dd for DEBUG) goes to stderr.

Exit status:
    0  success (also -h / --help / -? / --usage)
    1  invalid invocation
    2  could not open an input file
    3  could not stat an input file
    4  could not allocate memory for an input file
    5  could not read an input file completely
    6  decoding ran past the end of at least one file

Examples:
    python hc16dis.py ecu.bin
    python hc16dis.py -dd --compact boot.bin main.bin
    python hc16dis.py --recover --log-file logs/hc16dis.log dump.bin
"""

import argparse
import logging
import os
import sys

# Allow running from project root or as module
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hc16_disasm import Decoder, OutOfBoundsError, __version__, default_table, render
from hc16_disasm.config import (
    EXIT_ALLOC, EXIT_DECODE, EXIT_OK, EXIT_OPEN, EXIT_READ, EXIT_STAT, EXIT_USAGE,
    OUTPUT_PROFILES,
)
from hc16_disasm.log import level_for_debug, setup_logging

log = logging.getLogger("hc16_disasm.cli")


class InputFileError(Exception):
    """Input file could not be loaded. Carries the process exit code."""
    def __init__(self, message: str, exit_code: int):
        self.exit_code = exit_code
        super().__init__(message)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse with exit status 1 (not 2) for a bad command line."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="hc16dis",
        description="Disassemble Motorola CPU16 (68HC16) program images",
        add_help=False,
    )
    parser.add_argument("files", nargs="+", metavar="INFILE",
                        help="Raw program image(s) to disassemble")
    parser.add_argument("-h", "--help", "-?", "--usage", action="help",
                        help="Show this help and exit")
    parser.add_argument("-d", "--debug", action="count", default=0,
                        help="Increase log verbosity (-d INFO, -dd DEBUG)")
    parser.add_argument("--compact", action="store_true",
                        help="No blank line between instructions")
    parser.add_argument("--recover", action="store_true",
                        help="Skip one byte and keep going after an out-of-bounds decode")
    parser.add_argument("--log-file", default=None,
                        help="Also write a DEBUG log to this file")
    parser.add_argument("--version", action="version",
                        version=f"hc16dis {__version__}")
    return parser


def load_image(path: str) -> bytearray:
    """Read a whole file into memory: open, stat, allocate, read."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise InputFileError(f'Could not open "{path}": {e.strerror}', EXIT_OPEN) from e

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise InputFileError(f'Could not stat "{path}": {e.strerror}', EXIT_STAT) from e

        try:
            buf = bytearray(size)
        except MemoryError as e:
            raise InputFileError(
                f'Could not allocate {size} bytes for "{path}"', EXIT_ALLOC) from e

        try:
            got = f.readinto(buf)
        except OSError as e:
            raise InputFileError(f'Could not read "{path}": {e.strerror}', EXIT_READ) from e
        if not got or got != size:
            raise InputFileError(
                f'Could not read "{path}": got {got or 0} of {size} bytes', EXIT_READ)

    return buf


def disassemble_file(path: str, data, line_end: str, recover: bool, out) -> bool:
    """Write the listing for one image. Returns False if decoding hit the end."""
    decoder = Decoder(data, recover=recover)
    count = 0
    try:
        for inst in decoder:
            out.write(render(inst) + line_end)
            count += 1
    except OutOfBoundsError as e:
        log.error("%s: %s", path, e)
        return False
    finally:
        out.flush()

    log.info("%s: %d instruction(s), %d of %d byte(s) decoded",
             path, count, decoder.cursor, len(data))
    if decoder.errors:
        log.warning("%s: skipped %d undecodable byte(s)", path, len(decoder.errors))
    return True


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level_for_debug(args.debug), args.log_file)

    stats = default_table().get_stats()
    log.info("hc16dis %s: %d opcodes (%s)", __version__, stats["total"],
             ", ".join(f"{k}={v}" for k, v in stats.items() if k != "total"))

    profile = "compact" if args.compact else "hc16dis"
    line_end = OUTPUT_PROFILES[profile]["line_end"]
    out = sys.stdout
    status = EXIT_OK

    for path in args.files:
        try:
            data = load_image(path)
        except InputFileError as e:
            log.error("%s", e)
            sys.exit(e.exit_code)

        log.debug("%s: loaded %d byte(s)", path, len(data))
        if len(args.files) > 1:
            out.write(f"; {path}\n")
        if not disassemble_file(path, data, line_end, args.recover, out):
            status = EXIT_DECODE

    return status


if __name__ == "__main__":
    sys.exit(main())
