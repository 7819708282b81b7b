import pytest

from algoritma.hash_table import HashTable


@pytest.fixture
def table():
    t = HashTable(5)
    for value in (21, 32, 19):
        t.insert(value)
    return t


def test_search_before_and_after_removal(table):
    table.insert(37)
    assert 37 in table
    table.remove(37)
    assert 37 not in table
    assert 32 in table


def test_collision_shares_bucket(table):
    table.insert(37)
    lines = table.render().splitlines()
    assert lines[2] == "2 --> 32 37"


def test_render_has_one_line_per_bucket(table):
    lines = table.render().splitlines()
    assert len(lines) == 5
    assert [line.split(" -->")[0] for line in lines] == ["0", "1", "2", "3", "4"]
    assert lines[1] == "1 --> 21"
    assert lines[4] == "4 --> 19"
    assert lines[0] == "0 -->"


def test_remove_all_duplicates():
    t = HashTable(3)
    t.insert(4)
    t.insert(4)
    t.insert(7)
    t.remove(4)
    assert 4 not in t
    assert 7 in t


def test_remove_missing_is_harmless(table):
    before = table.render()
    table.remove(99)
    assert table.render() == before


def test_missing_value_not_contained(table):
    assert 26 not in table
    assert "21" not in table


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(0)