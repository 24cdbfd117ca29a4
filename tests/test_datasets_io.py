from pathlib import Path

import pytest
from spellingbee.datasets import DictionaryLoadError, iter_words, load_dictionary


def test_load_dictionary_strips_line_endings(tmp_path: Path):
    d = tmp_path / "words"
    d.write_bytes(b"tote\r\nmote\n\nmotel\n")
    assert load_dictionary(d) == ["tote", "mote", "motel"]
    assert list(iter_words(str(d))) == ["tote", "mote", "motel"]


def test_load_dictionary_keeps_word_content(tmp_path: Path):
    d = tmp_path / "words"
    d.write_text("Motel\n tote \n", encoding="utf-8")
    assert load_dictionary(d) == ["Motel", " tote "]


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryLoadError) as ei:
        load_dictionary(tmp_path / "missing.txt")
    assert isinstance(ei.value.cause, FileNotFoundError)
    assert "missing.txt" in str(ei.value)


def test_load_dictionary_directory(tmp_path: Path):
    with pytest.raises(DictionaryLoadError):
        load_dictionary(tmp_path)


def test_load_dictionary_undecodable(tmp_path: Path):
    d = tmp_path / "words"
    d.write_bytes(b"tote\n\xff\xfe\xfa\n")
    with pytest.raises(DictionaryLoadError) as ei:
        load_dictionary(d)
    assert isinstance(ei.value.cause, UnicodeDecodeError)
    assert isinstance(ei.value, OSError)
