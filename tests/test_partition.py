"""Tests for Partition."""
import pytest

from grouptools.group.partition import Partition, partition_from_colors
from grouptools.group.permutation import Permutation


def test_string_round_trip():
    p = Partition.from_string("[0,1|2|3,4]")
    assert str(p) == "[0,1|2|3,4]"
    assert p.cell_count() == 3
    assert p.size() == 5
    assert p.get_cell(2) == (3, 4)


def test_cells_are_sorted():
    p = Partition([[2, 0], [1]])
    assert p.cells == ((0, 2), (1,))


def test_order():
    p = Partition([[3, 4], [2], [0, 1]])
    p.order()
    assert str(p) == "[0,1|2|3,4]"


def test_is_discrete():
    assert Partition.from_string("[2|0|1]").is_discrete()
    assert not Partition.from_string("[0,2|1]").is_discrete()
    assert Partition.unit(0).is_discrete()
    assert Partition.unit(1).is_discrete()


def test_copy_is_independent():
    p = Partition([[0, 1]])
    q = p.copy()
    q.add_cell([2])
    assert p.size() == 2
    assert q.size() == 3
    assert p != q


def test_add_cell_rejects_empty():
    with pytest.raises(ValueError):
        Partition().add_cell([])


def test_split_before():
    p = Partition.from_string("[0,1,2|3]")
    q = p.split_before(0, 1)
    assert str(q) == "[1|0,2|3]"
    # the original is untouched
    assert str(p) == "[0,1,2|3]"
    with pytest.raises(ValueError):
        p.split_before(1, 0)


def test_split_before_pair():
    q = Partition.from_string("[4|2,3]").split_before(1, 3)
    assert str(q) == "[4|3|2]"
    assert q.is_discrete()


def test_first_non_discrete_cell():
    assert Partition.from_string("[0|1,2|3]").index_of_first_non_discrete_cell() == 1
    assert Partition.from_string("[0|1]").index_of_first_non_discrete_cell() == -1
    assert Partition.from_string("[0|3|1,2]").prefix() == [0, 3]


def test_to_permutation():
    assert Partition.from_string("[2|0|1]").to_permutation() == Permutation([2, 0, 1])
    with pytest.raises(ValueError):
        Partition.from_string("[0,1|2]").to_permutation()


def test_in_same_cell():
    p = Partition.from_string("[0,2|1]")
    assert p.in_same_cell(0, 2)
    assert not p.in_same_cell(0, 1)


def test_check():
    Partition.from_string("[1|0,2]").check(3)
    with pytest.raises(ValueError):
        Partition.from_string("[0,1|1,2]").check(3)
    with pytest.raises(ValueError):
        Partition.from_string("[0|2]").check(3)
    with pytest.raises(ValueError):
        Partition.from_string("[0,1|3]").check(3)


def test_empty_string():
    assert Partition.from_string("[]").cell_count() == 0


def test_partition_from_colors():
    p = partition_from_colors(["b", "a", "b", "c"])
    assert str(p) == "[1|0,2|3]"
