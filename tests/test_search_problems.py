import pytest

from algoritma.search_problems import minimax, subarray_sum_count, wildcard_match


def test_minimax_source_scores():
    assert minimax([90, 23, 6, 33, 21, 65, 123, 34423]) == 65


def test_minimax_single_leaf():
    assert minimax([7]) == 7


def test_minimax_two_leaves_maximises():
    assert minimax([3, 9]) == 9


def test_minimax_result_is_a_leaf():
    scores = [4, 8, 1, 6, 2, 9, 3, 5, 7, 0, 11, 12, 13, 14, 15, 16]
    result = minimax(scores)
    assert result in scores
    assert min(scores) <= result <= max(scores)


@pytest.mark.parametrize("scores", [[], [1, 2, 3]])
def test_minimax_rejects_bad_sizes(scores):
    with pytest.raises(ValueError):
        minimax(scores)


def test_subarray_sum_source_case():
    assert subarray_sum_count(0, [-7, -3, -2, 5, 8]) == 1


def test_subarray_sum_empty():
    assert subarray_sum_count(5, []) == 0


def test_subarray_sum_whole_array():
    values = [1, 2, 3]
    assert subarray_sum_count(sum(values) + 100, values) == 0
    assert subarray_sum_count(sum(values), values) >= 1


def test_subarray_sum_single_elements_each_counted():
    values = [4, -1, 4, -1, 4]
    assert subarray_sum_count(4, values) >= values.count(4)


@pytest.mark.parametrize(
    "pattern",
    ["*****ba*****ab", "ba*****ab", "ba*ab"],
)
def test_wildcard_source_matches(pattern):
    assert wildcard_match("baaabab", pattern) is True


def test_wildcard_wrong_first_character():
    assert wildcard_match("baaabab", "a*ab") is False


def test_wildcard_question_mark_needs_a_character():
    assert wildcard_match("ab", "a?") is True
    assert wildcard_match("a", "a?") is False


def test_wildcard_empty_text():
    assert wildcard_match("", "***") is True
    assert wildcard_match("", "*a") is False
    assert wildcard_match("", "") is True


def test_wildcard_leftover_text():
    assert wildcard_match("abc", "ab") is False
    assert wildcard_match("abc", "abc") is True