"""
Forward cursors over the nodes of a SingleLinkedList.

A cursor is a non-owning handle to a position in a list: the before-begin
sentinel, a real node, or end (no node at all). Cursors come in two flavors:

    ConstCursor  - dereferences to a read-only view of the element
    Cursor       - also allows the element to be replaced through it

Cursor subclasses ConstCursor, so a mutable cursor is accepted anywhere a
read-only one is expected. There is no way back from ConstCursor to Cursor.
"""

from typing import Generic, TypeVar

from slist.node import HeadNode, ListNode

T = TypeVar("T")


class ConstCursor(Generic[T]):
    """Read-only forward cursor."""

    def __init__(self, node: HeadNode | None = None):
        self._node = node

    def __repr__(self):
        if self._node is None:
            return f"{type(self).__name__}(end)"
        return f"{type(self).__name__}({self._node!r})"

    def __eq__(self, other):
        if not isinstance(other, ConstCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return hash(id(self._node))

    def __copy__(self):
        return type(self)(self._node)

    def copy(self):
        return self.__copy__()

    def is_end(self) -> bool:
        return self._node is None

    def advance(self):
        """Move to the successor of the current node and return self."""
        assert self._node is not None, "cannot advance past end"
        self._node = self._node.next
        return self

    def post_advance(self):
        """Advance, returning a cursor at the position held before the move."""
        previous = self.copy()
        self.advance()
        return previous

    def _element_node(self) -> ListNode[T]:
        assert isinstance(self._node, ListNode), "cannot dereference end or before-begin position"
        return self._node

    @property
    def value(self) -> T:
        return self._element_node().value


class Cursor(ConstCursor[T]):
    """Forward cursor through which the referenced element can be replaced."""

    @ConstCursor.value.setter
    def value(self, new_value: T) -> None:
        self._element_node().value = new_value

    def as_const(self) -> ConstCursor[T]:
        return ConstCursor(self._node)
