import copy

import pytest

from slist.cursor import ConstCursor, Cursor
from slist.linked_list import SingleLinkedList


def test_default_cursor_is_end():
    lst = SingleLinkedList([1])
    assert ConstCursor() == lst.end()
    assert Cursor() == lst.cend()
    assert ConstCursor().is_end()
    assert not lst.begin().is_end()


def test_equality_across_flavors():
    lst = SingleLinkedList([1, 2])
    assert lst.begin() == lst.cbegin()
    assert lst.cbegin() == lst.begin()
    assert lst.before_begin() == lst.cbefore_begin()
    assert lst.begin() != lst.cend()
    assert hash(lst.begin()) == hash(lst.cbegin())


def test_cursors_into_different_lists_with_equal_values_differ():
    a = SingleLinkedList([1])
    b = SingleLinkedList([1])
    assert a.begin() != b.begin()
    assert a.end() == b.end()


def test_cursor_not_equal_to_other_types():
    assert SingleLinkedList([1]).begin() != 1


def test_advance_returns_self():
    lst = SingleLinkedList([1, 2, 3])
    it = lst.begin()
    assert it.advance() is it
    assert it.value == 2


def test_post_advance_returns_previous_position():
    lst = SingleLinkedList(["a", "b"])
    it = lst.begin()
    previous = it.post_advance()
    assert previous.value == "a"
    assert it.value == "b"
    assert type(previous) is Cursor
    assert previous == lst.begin()


def test_advance_past_end_asserts():
    it = SingleLinkedList([1]).begin()
    it.advance()
    assert it.is_end()
    with pytest.raises(AssertionError):
        it.advance()


def test_dereference_end_and_before_begin_assert():
    lst = SingleLinkedList([1])
    with pytest.raises(AssertionError):
        lst.end().value
    with pytest.raises(AssertionError):
        lst.before_begin().value
    with pytest.raises(AssertionError):
        lst.cbefore_begin().value
    with pytest.raises(AssertionError):
        lst.before_begin().value = 5


def test_mutable_cursor_writes_through():
    lst = SingleLinkedList([1, 2, 3])
    it = lst.begin().advance()
    it.value = 20
    assert list(lst) == [1, 20, 3]


def test_const_cursor_is_read_only():
    lst = SingleLinkedList([1])
    with pytest.raises(AttributeError):
        lst.cbegin().value = 5
    assert list(lst) == [1]


def test_member_access_through_cursor():
    lst = SingleLinkedList([{"name": "x"}])
    assert lst.cbegin().value["name"] == "x"
    lst.begin().value["name"] = "y"
    assert list(lst) == [{"name": "y"}]


def test_as_const_is_lossless():
    lst = SingleLinkedList([1, 2])
    it = lst.begin()
    const_it = it.as_const()
    assert type(const_it) is ConstCursor
    assert const_it == it
    assert isinstance(it, ConstCursor)
    assert not isinstance(const_it, Cursor)


def test_copies_advance_independently():
    lst = SingleLinkedList([1, 2])
    it = lst.cbegin()
    dup = copy.copy(it)
    dup.advance()
    assert it.value == 1
    assert dup.value == 2
    assert type(dup) is ConstCursor


def test_mutable_cursor_shares_read_path():
    assert Cursor.value.fget is ConstCursor.value.fget
    with pytest.raises(AssertionError, match="cannot dereference"):
        Cursor().value = 1
