import copy
import logging
import reprlib
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from slist import comparison
from slist.cursor import ConstCursor, Cursor
from slist.node import HeadNode, ListNode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SingleLinkedList(Generic[T]):
    """
    Singly linked list with an embedded sentinel head.

    The sentinel is the "before-begin" position: inserting or erasing after it
    works on the first element through the same positional API used for every
    other position. The list owns every node reachable from the sentinel and
    keeps its size in step with the chain length.
    """

    __hash__ = None

    def __init__(self, values: Iterable[T] | None = None):
        """
        Args:
            values: Optional iterable whose items become the initial elements,
                in order. Passing another SingleLinkedList makes a copy.
        """
        self._head = HeadNode()
        self._size = 0

        if values is not None:
            self._build_from(values)

    def _build_from(self, values: Iterable[T]) -> None:
        # Build the chain in a throwaway list and adopt it only once complete
        staging = SingleLinkedList()
        insert_pos = staging.before_begin()
        for value in values:
            insert_pos = staging.insert_after(insert_pos, value)
        self.swap(staging)

    def assign(self, other: Iterable[T]) -> None:
        """Replace the contents with the items of `other`, or leave them untouched on failure."""
        if other is self:
            return
        try:
            replacement = SingleLinkedList(other)
        except Exception:
            logger.debug("Assignment aborted, keeping %d existing elements", self._size)
            raise
        self.swap(replacement)

    def copy(self) -> "SingleLinkedList[T]":
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        result = type(self)()
        memo[id(self)] = result
        result.swap(SingleLinkedList(copy.deepcopy(value, memo) for value in self))
        return result

    def swap(self, other: "SingleLinkedList[T]") -> None:
        """Exchange chains and sizes. Cursors to elements follow their chain."""
        self._head.next, other._head.next = other._head.next, self._head.next
        self._size, other._size = other._size, self._size

    def push_front(self, value: T) -> None:
        self._head.next = ListNode(value, self._head.next)
        self._size += 1

    def pop_front(self) -> T:
        """Remove the first element and return its value."""
        assert self._size != 0 and self._head.next is not None, "pop_front on empty list"
        first = self._head.next
        self._head.next = first.next
        first.next = None
        self._size -= 1
        return first.value

    def insert_after(self, pos: ConstCursor[T], value: T) -> Cursor[T]:
        """Insert `value` after `pos` and return a cursor to the new element."""
        node = pos._node
        assert node is not None, "insert_after through end cursor"
        node.next = ListNode(value, node.next)
        self._size += 1
        return Cursor(node.next)

    def erase_after(self, pos: ConstCursor[T]) -> Cursor[T]:
        """Remove the element following `pos` and return a cursor to its successor."""
        node = pos._node
        assert node is not None, "erase_after through end cursor"
        assert self._size != 0 and node.next is not None, "erase_after with nothing to erase"
        erased = node.next
        node.next = erased.next
        erased.next = None
        self._size -= 1
        return Cursor(node.next)

    def clear(self) -> None:
        released = 0
        while self._head.next is not None:
            node = self._head.next
            self._head.next = node.next
            node.next = None
            released += 1
        self._size = 0
        logger.debug("Cleared list, released %d nodes", released)

    def get_size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def begin(self) -> Cursor[T]:
        return Cursor(self._head.next)

    def end(self) -> Cursor[T]:
        return Cursor()

    def cbegin(self) -> ConstCursor[T]:
        return ConstCursor(self._head.next)

    def cend(self) -> ConstCursor[T]:
        return ConstCursor()

    def before_begin(self) -> Cursor[T]:
        return Cursor(self._head)

    def cbefore_begin(self) -> ConstCursor[T]:
        return ConstCursor(self._head)

    def __iter__(self) -> Iterator[T]:
        current = self._head.next
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size != 0

    @reprlib.recursive_repr()
    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.equal(self, other)

    def __ne__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.not_equal(self, other)

    def __lt__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.lexicographical_less(self, other)

    def __le__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.less_equal(self, other)

    def __gt__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.greater(self, other)

    def __ge__(self, other):
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return comparison.greater_equal(self, other)


def swap(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> None:
    lhs.swap(rhs)
