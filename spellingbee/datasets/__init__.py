from .io import DEFAULT_DICT_PATH, DictionaryLoadError, iter_words, load_dictionary
from .validator import summarize_dictionary, pretty_summary

__all__ = [
    "DEFAULT_DICT_PATH", "DictionaryLoadError", "iter_words", "load_dictionary",
    "summarize_dictionary", "pretty_summary",
]
