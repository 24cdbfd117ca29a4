"""
Puzzle parameters and answer records.

A spelling bee puzzle is one required letter plus a handful of extra letters.
Every answer must contain the required letter and may only use the required
or extra letters.

Both types are frozen dataclasses: a Puzzle is built once from user input and
an Answer is built once per accepted word, neither is mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


def fold(word: str, required: str, extra: str, case_sensitive: bool) -> Tuple[str, str, str]:
    """
    Return (word, required, extra) ready for comparison.

    Letters are compared literally unless `case_sensitive` is False, in which
    case all three are lower-cased.
    """
    if case_sensitive:
        return word, required, extra
    return word.lower(), required.lower(), extra.lower()


def letter_set(required: str, extra: str) -> FrozenSet[str]:
    """Distinct letters an answer may use: the required letter plus the extras."""
    return frozenset(extra) | {required}


@dataclass(frozen=True)
class Puzzle:
    """One required letter and the extra letters allowed alongside it."""
    required: str
    extra: str = ""
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        # Guardrail for user input; the engine functions themselves never raise.
        if not isinstance(self.required, str) or len(self.required) != 1:
            raise ValueError(f"required must be a single character; got {self.required!r}")
        if not isinstance(self.extra, str):
            raise ValueError(f"extra must be a string; got {type(self.extra).__name__}")

    @property
    def letters(self) -> FrozenSet[str]:
        """Every letter an answer may use (required included, extras de-duplicated)."""
        _, required, extra = fold("", self.required, self.extra, self.case_sensitive)
        return letter_set(required, extra)


@dataclass(frozen=True)
class Answer:
    """An accepted word with its points."""
    word: str            # candidate exactly as supplied
    score: int           # >= 1
    is_pangram: bool     # uses every letter of the puzzle
