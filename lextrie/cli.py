"""Command-line driver: ``lextrie INPUT OUTPUT``."""

from __future__ import annotations

import argparse
import logging
import os

from lextrie.dictionary import Dictionary, read_tokens
from lextrie.errors import TrieError

log = logging.getLogger("lextrie")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lextrie",
        description="Insert counted strings into a trie, then answer membership queries",
    )
    parser.add_argument("input", help="Input file: count N, N strings, then queries")
    parser.add_argument("output", help="Output file (replaced if it exists)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run(input_path: str, output_path: str) -> int:
    """Process one input file into one output file; returns the exit code."""
    if not (os.path.isfile(input_path) and os.access(input_path, os.R_OK)):
        log.error("File %s could not be found, or cannot be read!", input_path)
        return 1

    if os.path.exists(output_path):
        try:
            os.remove(output_path)
        except OSError:
            log.error("File %s could not be deleted!", output_path)
            return 1

    try:
        tokens = read_tokens(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("File %s could not be read: %s", input_path, exc)
        return 1

    try:
        out = open(output_path, "w", encoding="utf-8")
    except OSError:
        log.error("File %s could not be created!", output_path)
        return 1

    with out:
        session = Dictionary(lambda line: out.write(line + "\n"))
        try:
            session.run(tokens)
        except TrieError as exc:
            log.error("%s", exc)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return run(args.input, args.output)
