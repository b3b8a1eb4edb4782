"""Relational operations over SingleLinkedList, built on its public iteration interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slist.linked_list import SingleLinkedList


def equal(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    """Same size and pairwise-equal elements in order."""
    if lhs.get_size() != rhs.get_size():
        return False
    for left, right in zip(lhs, rhs):
        if not left == right:
            return False
    return True


def not_equal(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    return not equal(lhs, rhs)


def lexicographical_less(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    """
    Lexicographic ordering using only the elements' `<`.

    Stops at the first pair that differs. If one sequence runs out first, the
    shorter one is less; the empty list is less than any non-empty list.
    """
    right_iter = iter(rhs)
    for left in lhs:
        try:
            right = next(right_iter)
        except StopIteration:
            return False
        if left < right:
            return True
        if right < left:
            return False
    for _ in right_iter:
        return True
    return False


def less_equal(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    return not lexicographical_less(rhs, lhs)


def greater(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    return lexicographical_less(rhs, lhs)


def greater_equal(lhs: SingleLinkedList, rhs: SingleLinkedList) -> bool:
    return not lexicographical_less(lhs, rhs)
