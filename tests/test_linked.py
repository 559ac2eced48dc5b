import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslib.linked import (
    CircularLinkedList,
    DoublyLinkedList,
    HeadedLinkedList,
    SinglyLinkedList,
)


@given(values=st.lists(st.integers(), max_size=20))
def test_round_trip(values):
    lists = [
        SinglyLinkedList(values),
        HeadedLinkedList(values),
        CircularLinkedList(values),
        DoublyLinkedList(values),
    ]
    for lst in lists:
        assert list(lst) == values
        assert len(lst) == len(values)


@given(values=st.lists(st.integers(), max_size=20), x=st.integers(), data=st.data())
def test_insert_matches_list_model(values, x, data):
    i = data.draw(st.integers(min_value=0, max_value=len(values)))
    lists = [
        SinglyLinkedList(values),
        HeadedLinkedList(values),
        CircularLinkedList(values),
        DoublyLinkedList(values),
    ]
    for lst in lists:
        lst.insert(x, i)
        assert list(lst) == values[:i] + [x] + values[i:]
        assert len(lst) == len(values) + 1


@given(values=st.lists(st.integers(0, 5), min_size=1, max_size=20), data=st.data())
def test_delete_matches_list_model(values, data):
    x = data.draw(st.sampled_from(values))
    expected = list(values)
    expected.remove(x)
    lists = [
        SinglyLinkedList(values),
        HeadedLinkedList(values),
        CircularLinkedList(values),
        DoublyLinkedList(values),
    ]
    for lst in lists:
        lst.delete(x)
        assert list(lst) == expected
        assert len(lst) == len(expected)


def test_insert_beyond_end_raises():
    lists = [
        SinglyLinkedList([1, 2]),
        HeadedLinkedList([1, 2]),
        CircularLinkedList([1, 2]),
        DoublyLinkedList([1, 2]),
    ]
    for lst in lists:
        with pytest.raises(IndexError):
            lst.insert(7, 3)
        assert list(lst) == [1, 2]


def test_display_formats_columns():
    assert SinglyLinkedList([1, 22]).display() == "    1   22"
    assert HeadedLinkedList([1, 22]).display() == "    1   22"
    assert CircularLinkedList([1, 22]).display() == "    1   22"
    assert DoublyLinkedList([1, 22]).display() == "    1   22"


def test_display_empty():
    assert "empty" in SinglyLinkedList().display()
    assert "empty" in HeadedLinkedList().display()
    assert "empty" in CircularLinkedList().display()
    assert "empty" in DoublyLinkedList().display()


@pytest.mark.parametrize("cls", [SinglyLinkedList, HeadedLinkedList, DoublyLinkedList])
def test_find_by_position(cls):
    values = [4, 8, 15]
    lst = cls(values)
    assert [lst.find(pos) for pos in range(1, len(values) + 1)] == values


@pytest.mark.parametrize("cls", [SinglyLinkedList, HeadedLinkedList, DoublyLinkedList])
@pytest.mark.parametrize("position", [-1, 0, 4])
def test_find_missing_position_raises(cls, position):
    with pytest.raises(IndexError):
        cls([4, 8, 15]).find(position)


def test_singly_delete_missing_returns_false():
    lst = SinglyLinkedList([1, 2])
    assert lst.delete(9) is False
    assert list(lst) == [1, 2]


def test_singly_delete_empty_raises():
    with pytest.raises(ValueError):
        SinglyLinkedList().delete(1)


def test_singly_insert_negative_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList([1]).insert(2, -1)


def test_headed_delete_on_empty_returns_false():
    lst = HeadedLinkedList()
    assert lst.delete(1) is False
    assert len(lst) == 0


def test_headed_insert_negative_raises():
    with pytest.raises(IndexError):
        HeadedLinkedList([1]).insert(2, -1)


def test_circular_rear():
    assert CircularLinkedList([3, 5, 9]).rear() == 9
    assert CircularLinkedList().rear() is None


def test_circular_rear_follows_front_insert():
    lst = CircularLinkedList([3])
    lst.insert(5, 0)
    assert lst.rear() == 3
    assert list(lst) == [5, 3]


def test_circular_find_position():
    lst = CircularLinkedList([3, 5, 9, 5])
    assert lst.find(5) == 2
    assert lst.find(3) == 1
    assert lst.find(42) is None


def test_circular_find_empty_raises():
    with pytest.raises(ValueError):
        CircularLinkedList().find(1)


def test_circular_insert_errors():
    with pytest.raises(IndexError):
        CircularLinkedList().insert(1, 1)
    with pytest.raises(IndexError):
        CircularLinkedList([1]).insert(2, -1)


def test_circular_delete_errors():
    with pytest.raises(ValueError):
        CircularLinkedList().delete(1)
    with pytest.raises(ValueError):
        CircularLinkedList([1, 2]).delete(3)


def test_circular_delete_head_until_empty():
    values = [1, 2, 3]
    lst = CircularLinkedList(values)
    for value in values:
        lst.delete(value)
        assert lst.rear() == (values[-1] if len(lst) else None)
    assert list(lst) == []
    assert len(lst) == 0


def test_doubly_reversed_after_edits():
    lst = DoublyLinkedList([1, 2, 3])
    lst.insert(4, 3)
    lst.insert(0, 0)
    lst.delete(2)
    assert list(reversed(lst)) == list(lst)[::-1]
    assert list(lst) == [0, 1, 3, 4]


@given(values=st.lists(st.integers(0, 5), min_size=1, max_size=20), data=st.data())
def test_doubly_reversed_after_delete(values, data):
    x = data.draw(st.sampled_from(values))
    lst = DoublyLinkedList(values)
    lst.delete(x)
    assert list(reversed(lst)) == list(lst)[::-1]


def test_doubly_delete_errors():
    with pytest.raises(ValueError):
        DoublyLinkedList().delete(1)
    with pytest.raises(ValueError):
        DoublyLinkedList([1]).delete(2)