from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

logger = logging.getLogger(__name__)

# Word list shipped with most Unix systems.
DEFAULT_DICT_PATH = "/usr/share/dict/words"


class DictionaryLoadError(OSError):
    """The dictionary file could not be opened, read or decoded."""

    def __init__(self, path: Path | str, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


def iter_words(p: Path | str) -> Iterator[str]:
    """
    Yield one candidate word per line of a UTF-8 text file, stripping trailing
    CR/LF and skipping blank lines.
    Raises OSError / UnicodeDecodeError straight from the file.
    """
    p = Path(p)
    with p.open("r", encoding="utf-8", newline="") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if w:
                yield w


def load_dictionary(p: Path | str = DEFAULT_DICT_PATH) -> List[str]:
    """
    Read the whole dictionary into a list (one word per line).

    Any failure to open, read or decode the file is raised as
    DictionaryLoadError; nothing is returned for a partially read file.
    """
    try:
        words = list(iter_words(p))
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(p, e) from e

    logger.debug("loaded %d words from %s", len(words), p)
    return words
