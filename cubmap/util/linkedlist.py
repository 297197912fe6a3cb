"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with head insertion, tail insertion and mapping."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the tail and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def pop_front(self, deleter: Optional[Deleter] = None) -> Any:
        """Remove the head node and return its content.

        ``deleter`` is called on the content before it is returned.
        Raises IndexError on an empty list.
        """
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if deleter is not None:
            deleter(node.content)
        return node.content

    def clear(self, deleter: Optional[Deleter] = None) -> None:
        """Remove every node, calling ``deleter`` on each content in order."""
        while self.head is not None:
            self.pop_front(deleter)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], deleter: Optional[Deleter] = None) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, ``deleter`` is called on every content already
        produced and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(deleter)
            raise
        return result