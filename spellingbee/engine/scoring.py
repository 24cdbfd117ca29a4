"""
Spelling bee scoring for a single accepted word.

Conventions:
  - a word of MIN_WORD_LENGTH letters is worth SHORT_WORD_POINTS
  - a longer word is worth one point per letter
  - a pangram (uses every puzzle letter at least once) earns PANGRAM_BONUS
    on top of that

The pangram check works on distinct letters: repeated extras, or an extra that
duplicates the required letter, never change how many letters a pangram needs.

Callers validate first; scoring an invalid word does not raise but the result
has no meaning.
"""

from typing import Tuple

from .puzzle import Answer, Puzzle, fold, letter_set
from .validation import MIN_WORD_LENGTH

SHORT_WORD_POINTS = 1
PANGRAM_BONUS = 7


def score(word: str, required: str, extra: str, *, case_sensitive: bool = True) -> Tuple[int, bool]:
    """
    Compute (points, is_pangram) for `word`.

    Examples:
      score("tome", "t", "elom")   -> (1, False)
      score("motee", "t", "elom")  -> (5, False)
      score("motel", "t", "elom")  -> (12, True)
    """
    # Points count the word as supplied; folding may change its length.
    n = len(word)
    word, required, extra = fold(word, required, extra, case_sensitive)

    letters = letter_set(required, extra)
    used = letters.intersection(word)
    is_pangram = len(used) == len(letters)

    points = SHORT_WORD_POINTS if n <= MIN_WORD_LENGTH else n
    if is_pangram:
        points += PANGRAM_BONUS
    return points, is_pangram


def score_answer(word: str, puzzle: Puzzle) -> Answer:
    """Score `word` against `puzzle` and wrap the result in an Answer."""
    points, is_pangram = score(word, puzzle.required, puzzle.extra,
                               case_sensitive=puzzle.case_sensitive)
    return Answer(word=word, score=points, is_pangram=is_pangram)
