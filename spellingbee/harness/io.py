"""
Presentation and export of puzzle answers.

Responsibilities:
- sort_answers:  pangrams first, then everything else, each by descending score.
- format_answer: one console line per answer ("* 12 motel").
- write_csv:     dump answers to a tidy CSV (one row per answer).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List
import csv

from spellingbee.engine import Answer

CSV_FIELDS = ["word", "score", "is_pangram"]


def sort_answers(answers: Iterable[Answer]) -> List[Answer]:
    """
    Order answers for display. Python's sort is stable, so equal-scoring
    answers keep their dictionary order.
    """
    return sorted(answers, key=lambda a: (not a.is_pangram, -a.score))


def format_answer(answer: Answer) -> str:
    """
    Pangrams are starred, the score is left-aligned in two columns.
    Example: "* 12 motel", "  5  motee"
    """
    marker = "*" if answer.is_pangram else " "
    return f"{marker} {answer.score:<2} {answer.word}"


def write_csv(answers: Iterable[Answer], path: Path | str) -> str:
    """
    Serialize answers to CSV with columns word, score, is_pangram.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for a in answers:
            w.writerow({"word": a.word, "score": a.score, "is_pangram": a.is_pangram})

    return str(p)
