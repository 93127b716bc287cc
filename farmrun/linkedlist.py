"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a head node and hands out contents."""

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
        """Put a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the end and return it."""
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

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete`` in order and empty the list."""
        if delete is None:
            raise TypeError("delete must be callable")
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            delete(node.content)
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        if func is None:
            raise TypeError("func must be callable")
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        if func is None or delete is None:
            raise TypeError("func and delete must be callable")
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"