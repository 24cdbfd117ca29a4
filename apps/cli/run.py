# apps/cli/run.py
"""
CLI entry point for solving a spelling bee puzzle.

This script:
  1) Optionally summarizes the dictionary (counts + SHA) on stderr.
  2) Loads the dictionary and finds every answer for the given letters.
  3) Prints the answers (pangrams first, by descending score), or just the
     accepted words with --plain, and optionally writes them to CSV.

Usage:
    python -m apps.cli.run t elom
    python -m apps.cli.run -d words.txt --plain t elom
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from spellingbee.datasets import (
    DEFAULT_DICT_PATH,
    DictionaryLoadError,
    load_dictionary,
    pretty_summary,
    summarize_dictionary,
)
from spellingbee.engine import Puzzle, find_words
from spellingbee.harness import format_answer, run_puzzle, sort_answers, write_csv

APP_SHORT_NAME = "spellingbee"

logger = logging.getLogger(APP_SHORT_NAME)


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=APP_SHORT_NAME,
        description="Finds answers to the spelling bee game.",
    )
    ap.add_argument("required", type=_single_char,
                    help="character required to be in every answer")
    ap.add_argument("extra", help="extra characters allowed to be in an answer")
    ap.add_argument("-d", dest="dict_path", default=DEFAULT_DICT_PATH,
                    help=f"path to a dictionary file, one word per line (default: {DEFAULT_DICT_PATH})")
    output = ap.add_mutually_exclusive_group()
    output.add_argument("--plain", action="store_true",
                        help="print accepted words only, in dictionary order, without scores")
    ap.add_argument("-i", "--ignore-case", action="store_true",
                    help="match letters case-insensitively (default: literal match)")
    ap.add_argument("-j", "--workers", type=_positive_int, default=1,
                    help="scan the dictionary on this many threads")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="show a progress bar while scanning (auto=bar if stderr is a terminal)",
    )
    output.add_argument("--csv", dest="csv_path",
                        help="also write the scored answers to this CSV file")
    ap.add_argument("--stats", action="store_true",
                    help="print a one-line dictionary summary to stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, solve the puzzle, print the answers.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    puzzle = Puzzle(args.required, args.extra, case_sensitive=not args.ignore_case)

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    try:
        # 1) Dictionary summary on stderr so stdout stays answers only
        if args.stats:
            print(pretty_summary(summarize_dictionary(args.dict_path)), file=sys.stderr)

        # 2) The simple variant: accepted words, no scores, no sorting
        if args.plain:
            words = load_dictionary(args.dict_path)
            for w in find_words(words, puzzle.required, puzzle.extra,
                                case_sensitive=puzzle.case_sensitive):
                print(w)
            return 0

        # 3) Score, sort and print
        answers = run_puzzle(puzzle, args.dict_path, workers=args.workers, progress=progress)
    except DictionaryLoadError as e:
        print(f"{APP_SHORT_NAME} error: Failed to load dictionary ({e})", file=sys.stderr)
        return 1

    for ans in sort_answers(answers):
        print(format_answer(ans))

    if args.csv_path:
        out = write_csv(answers, args.csv_path)
        logger.debug("wrote %d answers to %s", len(answers), out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
