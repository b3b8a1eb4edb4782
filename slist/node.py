from typing import Generic, TypeVar

T = TypeVar("T")


class HeadNode:
    """Sentinel link embedded in every list. Carries no value."""

    def __init__(self, next_node: "ListNode | None" = None):
        self.next: ListNode | None = next_node

    def __repr__(self):
        return "HeadNode()"

    def __eq__(self, other):
        if not isinstance(other, HeadNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


class ListNode(HeadNode, Generic[T]):
    """Node for singly linked list: one value and one forward link."""

    def __init__(self, value: T, next_node: "ListNode[T] | None" = None):
        super().__init__(next_node)
        self.value = value

    def __repr__(self):
        return f"Node({self.value!r})"
