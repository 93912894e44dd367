from constraints import OPEN, PositionConstraint, flatten, initial_vector, update
from data_loader import CandidatePool, load_words

from conftest import LATIN, M, U, feedback


def test_load_words_keeps_only_exact_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("abcde\nabc\n  xbcde \nabcdefg\n\nسلامت\n", encoding="utf-8")
    assert load_words(str(path), 5) == ["abcde", "xbcde", "سلامت"]


def test_pool_starts_all_active_in_load_order():
    pool = CandidatePool(["abcde", "abcdf", "xbcde"])
    assert len(pool) == 3
    assert pool.active_count() == 3
    assert pool.active_words() == ["abcde", "abcdf", "xbcde"]


def test_pool_drops_duplicate_words():
    pool = CandidatePool(["abcde", "abcdf", "abcde"])
    assert pool.active_words() == ["abcde", "abcdf"]
    assert [e.index for e in pool.entries] == [0, 1]


def test_filter_eliminates_words_contradicting_a_fixed_position():
    pool = CandidatePool(["abcde", "abcdf", "xbcde"])
    pattern = flatten(update(initial_vector(5), "abcde", feedback(M, M, M, M, U)), LATIN)
    assert pool.filter(pattern) == 1
    assert pool.active_words() == ["abcde", "abcdf"]
    assert pool.entries[2].eliminated


def test_filter_is_idempotent():
    pool = CandidatePool(["abcde", "abcdf", "xbcde", "axcde"])
    pattern = flatten((PositionConstraint.fixed("a"), OPEN, OPEN, OPEN, OPEN), LATIN)
    pool.filter(pattern)
    once = pool.active_words()
    assert pool.filter(pattern) == 0
    assert pool.active_words() == once


def test_active_count_never_increases():
    pool = CandidatePool(["abcde", "abcdf", "xbcde", "xbcdf"])
    narrow = flatten((PositionConstraint.fixed("a"),) + (OPEN,) * 4, LATIN)
    wide = flatten(initial_vector(5), LATIN)
    counts = [pool.active_count()]
    for pattern in (narrow, wide, narrow):
        pool.filter(pattern)
        counts.append(pool.active_count())
    assert counts == [4, 2, 2, 2]
    # A wider pattern never brings eliminated words back.
    assert pool.active_words() == ["abcde", "abcdf"]


def test_next_active_skips_eliminated_entries():
    pool = CandidatePool(["abcde", "xbcde", "abcdf"])
    pool.entries[1].eliminated = True
    first = pool.next_active()
    assert first.word == "abcde"
    assert pool.next_active(first.index).word == "abcdf"
    assert pool.next_active(2) is None


def test_next_active_on_empty_pool():
    assert CandidatePool([]).next_active() is None


def test_load_words_drops_byte_order_mark(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\ufeffسلامت\nسرباز\n", encoding="utf-8")
    assert load_words(str(path), 5) == ["سلامت", "سرباز"]
