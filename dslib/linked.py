"""Singly, headed, circular and doubly linked lists built from explicit nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


def _format(values: Iterable[Any]) -> str:
    return "".join(f"{value:>5}" for value in values)


@dataclass(eq=False)
class _Node:
    info: Any
    next: Optional["_Node"] = None


@dataclass(eq=False)
class _DNode:
    info: Any
    llink: Optional["_DNode"] = None
    rlink: Optional["_DNode"] = None


def _walk(node: Any, link: str = "next") -> Iterator[Any]:
    """Yield nodes from ``node`` onwards, following the ``link`` attribute."""
    while node is not None:
        yield node
        node = getattr(node, link)


class _Chain:
    """Shared helpers for containers whose subclasses yield nodes from ``_nodes``."""

    _empty_message = "the collection is empty"
    _size = 0

    def _values(self) -> Iterator[Any]:
        return (node.info for node in self._nodes())

    def _display(self) -> str:
        return _format(self._values()) or self._empty_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def _nth(self, i: int) -> Optional[Any]:
        """Return the i-th node counting from 1, or None if there is none."""
        if i >= 1:
            for position, node in enumerate(self._nodes(), 1):
                if position == i:
                    return node
        return None


class SinglyLinkedList(_Chain):
    """A singly linked list without a header node; positions count from 1."""

    _empty_message = "the list is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        return _walk(self._head)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def display(self) -> str:
        """Return the values in order, in columns of width five."""
        return self._display()

    def find(self, i: int) -> Any:
        """Return the value of the i-th node."""
        node = self._nth(i)
        if node is None:
            raise IndexError(f"node {i} does not exist")
        return node.info

    def insert(self, x: Any, i: int) -> None:
        """Insert x after the i-th node; i == 0 inserts at the front."""
        if i == 0:
            self._head = _Node(x, self._head)
        else:
            target = self._nth(i)
            if target is None:
                raise IndexError(f"cannot find node {i}, cannot insert {x!r}")
            target.next = _Node(x, target.next)
        self._size += 1

    def delete(self, x: Any) -> bool:
        """Remove the first node holding x; return whether one was removed."""
        if self._head is None:
            raise ValueError("the list is empty")
        previous: Optional[_Node] = None
        current = self._head
        while current is not None and current.info != x:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1
        return True


class HeadedLinkedList(_Chain):
    """A singly linked list with a header node; node 0 is the header."""

    _empty_message = "the headed list is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._header = _Node(None)
        self._size = 0
        tail = self._header
        for value in values:
            tail.next = _Node(value)
            tail = tail.next
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        return _walk(self._header.next)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def display(self) -> str:
        """Return the values in order, in columns of width five."""
        return self._display()

    def _node_at(self, i: int) -> Optional[_Node]:
        if i < 0:
            raise IndexError(f"node {i} does not exist")
        if i == 0:
            return self._header
        return self._nth(i)

    def find(self, i: int) -> Any:
        """Return the value of the i-th data node (the header holds none)."""
        if i == 0:
            raise IndexError("the header node holds no value")
        node = self._node_at(i)
        if node is None:
            raise IndexError(f"node {i} does not exist")
        return node.info

    def insert(self, x: Any, i: int) -> None:
        """Insert x after the i-th node; i == 0 inserts after the header."""
        target = self._node_at(i)
        if target is None:
            raise IndexError(f"node {i} does not exist, cannot insert {x!r}")
        target.next = _Node(x, target.next)
        self._size += 1

    def delete(self, x: Any) -> bool:
        """Remove the first node holding x; return whether one was removed."""
        previous = self._header
        current = previous.next
        while current is not None and current.info != x:
            previous, current = current, current.next
        if current is None:
            return False
        previous.next = current.next
        self._size -= 1
        return True


class CircularLinkedList(_Chain):
    """A circular singly linked list whose last node points back to the first."""

    _empty_message = "the circular list is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value, self._size)

    def _nodes(self) -> Iterator[_Node]:
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node
            node = node.next
            if node is head:
                return

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def display(self) -> str:
        """Return the values in order, in columns of width five."""
        return self._display()

    def _rear_node(self) -> Optional[_Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def rear(self) -> Any:
        """Return the value of the last node, or None for an empty list."""
        node = self._rear_node()
        return None if node is None else node.info

    def find(self, x: Any) -> Optional[int]:
        """Return the 1-based position of the first node holding x, or None."""
        if self._head is None:
            raise ValueError("the circular list is empty, cannot find a node")
        for position, value in enumerate(self._values(), 1):
            if value == x:
                return position
        return None

    def insert(self, x: Any, i: int) -> None:
        """Insert x after the i-th node; i == 0 makes x the first node."""
        if i < 0:
            raise IndexError("cannot find the insertion position")
        if i == 0:
            node = _Node(x)
            if self._head is None:
                node.next = node
            else:
                rear = self._rear_node()
                node.next = self._head
                rear.next = node
            self._head = node
            self._size += 1
            return
        if self._head is None:
            raise IndexError("cannot find the insertion position")
        target = self._nth(i)
        if target is None:
            raise IndexError(f"node {i} does not exist, cannot insert")
        target.next = _Node(x, target.next)
        self._size += 1

    def delete(self, x: Any) -> None:
        """Remove the first node holding x."""
        if self._head is None:
            raise ValueError("the circular list is empty, cannot delete")
        previous: Optional[_Node] = None
        for node in self._nodes():
            if node.info == x:
                break
            previous = node
        else:
            raise ValueError(f"no node with value {x!r}")
        if node is not self._head:
            previous.next = node.next
        elif node.next is node:
            self._head = None
        else:
            rear = self._rear_node()
            self._head = node.next
            rear.next = self._head
        self._size -= 1


class DoublyLinkedList(_Chain):
    """A doubly linked list; positions count from 1."""

    _empty_message = "the doubly linked list is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._tail: Optional[_DNode] = None
        self._size = 0
        for value in values:
            node = _DNode(value, llink=self._tail)
            if self._tail is None:
                self._head = node
            else:
                self._tail.rlink = node
            self._tail = node
            self._size += 1

    def _nodes(self) -> Iterator[_DNode]:
        return _walk(self._head, "rlink")

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def display(self) -> str:
        """Return the values in order, in columns of width five."""
        return self._display()

    def _node_at(self, i: int) -> _DNode:
        node = self._nth(i)
        if node is None:
            raise IndexError(f"node {i} does not exist")
        return node

    def __reversed__(self) -> Iterator[Any]:
        return (node.info for node in _walk(self._tail, "llink"))

    def find(self, i: int) -> Any:
        """Return the value of the i-th node."""
        return self._node_at(i).info

    def insert(self, x: Any, i: int) -> None:
        """Insert x after the i-th node; i == 0 inserts at the front."""
        if i == 0:
            node = _DNode(x, rlink=self._head)
            if self._head is None:
                self._tail = node
            else:
                self._head.llink = node
            self._head = node
        else:
            target = self._node_at(i)
            node = _DNode(x, llink=target, rlink=target.rlink)
            if target.rlink is None:
                self._tail = node
            else:
                target.rlink.llink = node
            target.rlink = node
        self._size += 1

    def delete(self, x: Any) -> None:
        """Remove the first node holding x."""
        if self._head is None:
            raise ValueError("the doubly linked list is empty, cannot delete")
        for node in self._nodes():
            if node.info == x:
                break
        else:
            raise ValueError(f"no node with value {x!r}")
        if node.llink is None:
            self._head = node.rlink
        else:
            node.llink.rlink = node.rlink
        if node.rlink is None:
            self._tail = node.llink
        else:
            node.rlink.llink = node.llink
        self._size -= 1