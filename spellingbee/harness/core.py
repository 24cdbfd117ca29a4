"""
Puzzle run primitives.

- run_puzzle: load a dictionary and find every answer for one puzzle.

The function is UI-agnostic so it can be reused by the CLI app, a notebook
or a test without changes. Printing and sorting belong to harness.io.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from spellingbee.datasets import DEFAULT_DICT_PATH, load_dictionary
from spellingbee.engine import Answer, Puzzle, find_all_for, find_all_parallel

logger = logging.getLogger(__name__)


def run_puzzle(
        puzzle: Puzzle,
        path: Path | str = DEFAULT_DICT_PATH,
        *,
        workers: int = 1,
        progress: bool = False,
) -> List[Answer]:
    """
    Find all answers to `puzzle` in the dictionary file at `path`.

    Args:
        puzzle:   required + extra letters
        path:     dictionary file, one word per line
        workers:  >1 scans the words on that many threads
        progress: show a tqdm bar on stderr while scanning

    Returns:
        List[Answer] in dictionary order.

    Raises:
        DictionaryLoadError if the dictionary cannot be read; no answers are
        produced in that case.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")

    words = load_dictionary(path)

    t0 = time.perf_counter()
    if workers > 1:
        # Chunks are read up front, so the bar advances as scanned chunks come back.
        bar = tqdm(total=len(words), ncols=80, desc="Scanning", unit="word") if progress else None
        try:
            answers = find_all_parallel(words, puzzle.required, puzzle.extra,
                                        workers=workers, case_sensitive=puzzle.case_sensitive,
                                        on_chunk=bar.update if bar is not None else None)
        finally:
            if bar is not None:
                bar.close()
    else:
        candidates = tqdm(words, ncols=80, desc="Scanning", unit="word") if progress else words
        answers = find_all_for(candidates, puzzle)
    dt = (time.perf_counter() - t0) * 1000.0

    logger.info("letters %s: scanned %d words, found %d answers (%d pangrams) in %.1f ms",
                "".join(sorted(puzzle.letters)), len(words), len(answers),
                sum(a.is_pangram for a in answers), dt)
    return answers
