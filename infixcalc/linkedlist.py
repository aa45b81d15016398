"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Callable[[Any], None]


@dataclass
class Node:
    """One link of a list: a value and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Node, delete: Deleter | None = None) -> None:
    """Release one node: hand its content to ``delete`` and unlink it."""
    if delete is not None:
        delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list that iterates over its contents from the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` before the first node and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter | None = None) -> None:
        """Empty the list, handing each content to ``delete`` from the back
        of the list to the front."""
        nodes = list(self._nodes())
        self.head = None
        for node in reversed(nodes):
            delete_node(node, delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter | None = None
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents already produced are handed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result