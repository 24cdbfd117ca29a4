import hashlib
from pathlib import Path
from spellingbee.datasets import summarize_dictionary, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_summarize_dictionary_counts(tmp_path: Path):
    d = tmp_path / "words"
    # 'cat' too short, "o'clock" not alphabetic, 'motel' repeated
    _write(d, ["motel", "tote", "cat", "o'clock", "motel", "", "Aaron"])

    rep = summarize_dictionary(d)
    assert rep["exists"] is True
    assert rep["lines"] == 6
    assert rep["usable"] == 4
    assert rep["unique_usable"] == 3
    assert rep["other_lines"] == 2
    assert rep["sha256"] == hashlib.sha256(d.read_bytes()).hexdigest()

    s = pretty_summary(rep)
    assert "lines=6" in s and "usable=4 (uniq=3)" in s and rep["sha256"][:12] in s


def test_summarize_dictionary_missing_file(tmp_path: Path):
    rep = summarize_dictionary(tmp_path / "nope")
    assert rep["exists"] is False
    assert rep["lines"] == 0
    assert pretty_summary(rep).endswith("MISSING")
