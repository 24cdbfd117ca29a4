import pytest
from spellingbee.engine import (
    Answer, Puzzle, find_all, find_all_for, find_all_parallel, find_words,
)

WORDS = ["tote", "vote", "mote", "soapy", "motel", "tom", "emotel", "motee"]


def test_find_all_keeps_input_order():
    answers = find_all(["tote", "vote", "mote", "soapy"], "t", "elom")
    assert [a.word for a in answers] == ["tote", "mote"]
    assert answers[0] == Answer("tote", 1, False)


def test_find_all_empty_input():
    assert find_all([], "t", "elom") == []
    assert find_words(iter(()), "t", "elom") == []


def test_find_all_never_raises_on_odd_words():
    weird = ["", " ", "t\tt\tt", "tötë", "\x00ttt", "TTTT", "t" * 1000]
    answers = find_all(weird, "t", "elom")
    assert [a.word for a in answers] == ["t" * 1000]
    assert answers[0].score == 1000


def test_find_all_accepts_generator():
    answers = find_all((w for w in WORDS), "t", "elom")
    assert [a.word for a in answers] == ["tote", "mote", "motel", "emotel", "motee"]


def test_find_words_matches_find_all():
    assert find_words(WORDS, "t", "elom") == [a.word for a in find_all(WORDS, "t", "elom")]


def test_find_all_for_puzzle_ignore_case():
    answers = find_all_for(["TOTE", "Motel", "vote"], Puzzle("t", "elom", case_sensitive=False))
    assert answers == [Answer("TOTE", 1, False), Answer("Motel", 12, True)]


@pytest.mark.parametrize("workers,chunk_size", [(1, 1), (2, 1), (3, 2), (4, 100)])
def test_find_all_parallel_matches_serial(workers, chunk_size):
    words = WORDS * 25
    expected = find_all(words, "t", "elom")
    got = find_all_parallel(words, "t", "elom", workers=workers, chunk_size=chunk_size)
    assert got == expected


def test_find_all_parallel_empty_and_bad_args():
    assert find_all_parallel([], "t", "elom", workers=2) == []
    with pytest.raises(ValueError):
        find_all_parallel(WORDS, "t", "elom", workers=0)
    with pytest.raises(ValueError):
        find_all_parallel(WORDS, "t", "elom", workers=2, chunk_size=0)


def test_find_all_parallel_reports_scanned_chunks():
    seen = []
    words = WORDS * 3  # 24 words
    find_all_parallel(words, "t", "elom", workers=2, chunk_size=10, on_chunk=seen.append)
    assert seen == [10, 10, 4]
