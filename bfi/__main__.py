#!/usr/bin/env python3
"""
Command-line entry point: bfi [options] <filename>

Exit status is 0 when the program runs to completion and 1 for any load
or execution failure; the failure is described on stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .brainfuck import BrainfuckInterpreter, EofPolicy
from .brainfuck_debugger import BrainfuckDebugger
from .config import ConfigError, load_config
from .errors import BrainfuckError
from .loader import OpenFileError, ReadFileError, load_program

logger = logging.getLogger("bfi")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfi", description="Run a Brainfuck program")
    ap.add_argument("filename", help="Path to the Brainfuck source file")
    ap.add_argument("--config", help="YAML file with interpreter settings")
    ap.add_argument("--tape-size", type=int, help="Number of tape cells (default 30000)")
    ap.add_argument("--eof", choices=[p.value for p in EofPolicy],
                    help="What ',' stores once input is exhausted (default: unchanged)")
    ap.add_argument("--max-source-bytes", type=int, help="Refuse sources of this size or larger")
    ap.add_argument("--trace", action="store_true", help="Log every executed step to stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or args.trace) else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = load_config(args.config).updated(
            tape_size=args.tape_size,
            eof_policy=args.eof,
            max_source_bytes=args.max_source_bytes,
        )
    except (ConfigError, OSError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FAILURE

    try:
        program = load_program(args.filename, max_len=cfg.max_source_bytes)
    except OpenFileError as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except ReadFileError as e:
        logger.error(f"{e.status.label}: {e}")
        return EXIT_FAILURE

    interpreter_cls = BrainfuckDebugger if args.trace else BrainfuckInterpreter
    itp = interpreter_cls(tape_size=cfg.tape_size, eof_policy=cfg.eof_policy)

    try:
        itp.run(program)
    except BrainfuckError as e:
        logger.error(f"{e.status.label}: {e} (pc={e.pc}, pointer={e.pointer})")
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
