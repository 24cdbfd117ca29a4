"""
Dictionary diagnostics for spellingbee.

What this module does:
- Summarize a dictionary file: how many lines it has, how many of them could
  ever be an answer (alphabetic, at least MIN_WORD_LENGTH letters), duplicates.
- Compute SHA-256 of the raw file so runs can be tied to an exact word list.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from spellingbee.datasets import summarize_dictionary, pretty_summary
    rep = summarize_dictionary("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict
import hashlib

from spellingbee.engine import MIN_WORD_LENGTH

from .io import DictionaryLoadError, iter_words


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # non-blank lines read
    usable: int          # lines that could be an answer
    unique_usable: int   # usable words after dedupe
    other_lines: int     # lines that can never be an answer
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_usable(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH and word.isalpha()


def summarize_dictionary(path: Path | str) -> Dict:
    """
    Summarize the dictionary at `path`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema). A missing
        file yields exists=False and zero counts.

    Raises
    ------
    DictionaryLoadError
        The file exists but cannot be read or decoded.
    """
    p = Path(path)
    if not p.is_file():
        return asdict(DictionaryReport(str(path), False, 0, 0, 0, 0, ""))

    lines = usable = 0
    seen = set()
    try:
        for w in iter_words(p):
            lines += 1
            if _is_usable(w):
                usable += 1
                seen.add(w)
        digest = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(p, e) from e

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        lines=lines,
        usable=usable,
        unique_usable=len(seen),
        other_lines=lines - usable,
        sha256=digest,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console output.

    Example:
        dict=/usr/share/dict/words | lines=235976 | usable=210687 (uniq=210687) | other=25289 | sha=abc123...
    """
    if not report["exists"]:
        return f"dict={report['path']} | MISSING"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"dict={report['path']} | lines={report['lines']} "
        f"| usable={report['usable']} (uniq={report['unique_usable']}) "
        f"| other={report['other_lines']} | sha={sha}"
    )
