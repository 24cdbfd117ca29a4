"""
Answer validation.

This module answers the question: "Is this word a legal answer?"
A word is valid iff:
  - it has at least MIN_WORD_LENGTH characters
  - it contains the required letter at least once
  - every character is either the required letter or one of the extras

Repeated letters are fine. Letters are compared literally (no case folding)
unless the caller passes case_sensitive=False.
"""

from .puzzle import fold, letter_set

# Shortest word the puzzle accepts.
MIN_WORD_LENGTH = 4


def is_valid(word: str, required: str, extra: str, *, case_sensitive: bool = True) -> bool:
    """
    Return True if `word` is an answer for the puzzle (`required`, `extra`).

    Args:
      word           : candidate word, any string
      required       : the letter every answer must contain
      extra          : other letters allowed in an answer (may be empty,
                       may repeat letters or include `required`)
      case_sensitive : compare letters literally (default) or lower-cased

    Examples:
      is_valid("tote", "t", "elom") -> True
      is_valid("dote", "t", "elom") -> False  ('d' is not allowed)
    """
    if len(word) < MIN_WORD_LENGTH:
        return False

    word, required, extra = fold(word, required, extra, case_sensitive)

    if required not in word:
        return False

    allowed = letter_set(required, extra)
    return all(ch in allowed for ch in word)
