from .core import run_puzzle
from .io import sort_answers, format_answer, write_csv

__all__ = ["run_puzzle", "sort_answers", "format_answer", "write_csv"]
