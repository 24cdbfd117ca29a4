from .puzzle import Puzzle, Answer, letter_set
from .validation import is_valid, MIN_WORD_LENGTH
from .scoring import score, score_answer, PANGRAM_BONUS, SHORT_WORD_POINTS
from .finder import find_all, find_all_for, find_all_parallel, find_words

__all__ = [
    "Puzzle", "Answer", "letter_set",
    "is_valid", "score", "score_answer",
    "find_all", "find_all_for", "find_all_parallel", "find_words",
    "MIN_WORD_LENGTH", "PANGRAM_BONUS", "SHORT_WORD_POINTS",
]
