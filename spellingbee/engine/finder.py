"""
Answer search over a word list.

Given:
  - a pool of words (usually one dictionary line each)
  - the required letter and the extra letters

Return:
  - every word that is a valid answer, scored, in the order it appeared.

Words that fail validation are dropped silently; no word content is an error.
The parallel variant splits the pool into chunks and maps them on a thread
pool. Executor.map yields results in submission order, so its output is the
same list find_all would build.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Callable, Iterable, Iterator, List, Optional

from .puzzle import Answer, Puzzle
from .scoring import score
from .validation import is_valid

# Words per task handed to a worker thread.
DEFAULT_CHUNK_SIZE = 4096


def find_words(words: Iterable[str], required: str, extra: str, *,
               case_sensitive: bool = True) -> List[str]:
    """
    Keep only the words that are valid answers (no scoring).

    Returns:
      List[str] of accepted words (order preserved as in `words`).
    """
    return [w for w in words if is_valid(w, required, extra, case_sensitive=case_sensitive)]


def find_all(words: Iterable[str], required: str, extra: str, *,
             case_sensitive: bool = True) -> List[Answer]:
    """
    Validate every word and score the ones that pass.

    Args:
      words          : iterable of candidate words (may be empty)
      required       : letter every answer must contain
      extra          : other allowed letters
      case_sensitive : see engine.validation.is_valid

    Returns:
      List[Answer], one per accepted word, in input order.
    """
    out: List[Answer] = []

    for w in words:
        if not is_valid(w, required, extra, case_sensitive=case_sensitive):
            continue
        points, pangram = score(w, required, extra, case_sensitive=case_sensitive)
        out.append(Answer(word=w, score=points, is_pangram=pangram))

    return out


def find_all_for(words: Iterable[str], puzzle: Puzzle) -> List[Answer]:
    """find_all with the parameters taken from a Puzzle."""
    return find_all(words, puzzle.required, puzzle.extra, case_sensitive=puzzle.case_sensitive)


def _chunks(words: Iterable[str], size: int) -> Iterator[List[str]]:
    it = iter(words)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


def find_all_parallel(words: Iterable[str], required: str, extra: str, *,
                      workers: int, chunk_size: int = DEFAULT_CHUNK_SIZE,
                      case_sensitive: bool = True,
                      on_chunk: Optional[Callable[[int], None]] = None) -> List[Answer]:
    """
    Same result as find_all, computed on `workers` threads.

    The pool is cut into `chunk_size` slices; each slice runs find_all on its
    own and the slices are concatenated back in submission order.
    `on_chunk(n)` is called once a slice of n words has been scanned.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1; got {chunk_size}")

    def _run(chunk: List[str]) -> List[Answer]:
        return find_all(chunk, required, extra, case_sensitive=case_sensitive)

    out: List[Answer] = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        chunks = list(_chunks(words, chunk_size))
        for chunk, part in zip(chunks, pool.map(_run, chunks)):
            out.extend(part)
            if on_chunk is not None:
                on_chunk(len(chunk))
    return out
