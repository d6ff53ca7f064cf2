"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the next node."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Hand node's content to delete and detach the node."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front; return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end; return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, handing each content to delete if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete_node(node, delete)
            node = following
        self.head = None

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of f(content) for every content.

        If f returns None for any content, the contents already produced are
        handed to delete and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function produced no content")
            result.push_back(mapped)
        return result