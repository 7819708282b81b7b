import pytest

from algoritma.boyer_moore import Pattern, is_prefix


def test_source_example_and():
    text = "and here and there"
    indices = Pattern("and").search(text)
    assert indices == [0, 9]
    assert is_prefix(text[indices[0]:], "and")


def test_every_found_index_is_an_occurrence():
    text = "abracadabra abracadabra"
    pattern = "abra"
    indices = Pattern(pattern).search(text)
    assert indices
    assert all(text[i:i + len(pattern)] == pattern for i in indices)
    assert indices == sorted(indices)


def test_overlapping_single_character():
    assert Pattern("a").search("aaa") == [0, 1, 2]


def test_no_occurrence():
    assert Pattern("xyz").search("and here and there") == []


def test_pattern_longer_than_text():
    assert Pattern("longer").search("short") == []


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        Pattern("")


def test_is_prefix_true_and_false():
    assert is_prefix("and there", "and") is True
    assert is_prefix("here", "and") is False
    assert is_prefix("an", "and") is False