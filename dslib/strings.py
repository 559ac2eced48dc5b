"""Bounded sequential strings, linked strings and pattern matching."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Union

MAXSIZE = 100


def _text_of(value: Union[str, "SeqString", "LinkString"]) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (SeqString, LinkString)):
        return str(value)
    raise TypeError(f"expected a string, got {type(value).__name__}")


class SeqString:
    """A string stored in a fixed array; it holds at most capacity - 1 characters.

    Positions count from 1.
    """

    def __init__(self, text: str = "", capacity: int = MAXSIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._text = _text_of(text)
        if len(self._text) > capacity - 1:
            raise OverflowError("the text does not fit")

    @property
    def capacity(self) -> int:
        return self._capacity

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r}, capacity={self._capacity})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeqString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def insert(self, i: int, other: Union[str, "SeqString"]) -> None:
        """Insert other so that it starts at the i-th character."""
        addition = _text_of(other)
        if not 1 <= i <= len(self._text) + 1:
            raise IndexError(f"position {i} is out of range")
        if len(self._text) + len(addition) > self._capacity - 1:
            raise OverflowError("the result does not fit")
        self._text = self._text[: i - 1] + addition + self._text[i - 1:]

    def _check_span(self, i: int, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        if i < 1 or i > len(self._text) or i + length - 1 > len(self._text):
            raise IndexError(f"span of {length} at position {i} is out of range")

    def delete(self, i: int, length: int) -> None:
        """Remove length characters starting at the i-th."""
        self._check_span(i, length)
        self._text = self._text[: i - 1] + self._text[i - 1 + length:]

    def concat(self, other: Union[str, "SeqString"]) -> "SeqString":
        """Return a new string made of this one followed by other."""
        addition = _text_of(other)
        if len(self._text) + len(addition) > self._capacity - 1:
            raise OverflowError("the result does not fit")
        return SeqString(self._text + addition, self._capacity)

    def substring(self, i: int, length: int) -> "SeqString":
        """Return the length characters starting at the i-th."""
        self._check_span(i, length)
        return SeqString(self._text[i - 1: i - 1 + length], self._capacity)

    def index(self, pattern: Union[str, "SeqString"]) -> int:
        """Return where pattern first occurs (from 0), or -1."""
        return naive_index(pattern, self)


@dataclass(eq=False)
class _CharNode:
    data: str
    next: Optional["_CharNode"] = None


def _chain(text: str) -> tuple[Optional[_CharNode], Optional[_CharNode]]:
    first: Optional[_CharNode] = None
    last: Optional[_CharNode] = None
    for char in text:
        node = _CharNode(char)
        if last is None:
            first = node
        else:
            last.next = node
        last = node
    return first, last


class LinkString:
    """A string stored as a chain of one-character nodes; positions count from 1."""

    def __init__(self, text: str = "") -> None:
        chars = _text_of(text)
        self._head, _ = _chain(chars)
        self._size = len(chars)

    def _walk(self, start: Optional[_CharNode]) -> Iterator[_CharNode]:
        node = start
        while node is not None:
            yield node
            node = node.next

    def _locate(self, i: int) -> tuple[Optional[_CharNode], _CharNode]:
        if i < 1:
            raise IndexError(f"character {i} does not exist")
        previous: Optional[_CharNode] = None
        for position, node in enumerate(self._walk(self._head), 1):
            if position == i:
                return previous, node
            previous = node
        raise IndexError(f"character {i} does not exist")

    def __str__(self) -> str:
        return "".join(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._walk(self._head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def insert(self, i: int, other: Union[str, "LinkString"]) -> None:
        """Insert other after the i-th character."""
        _, target = self._locate(i)
        addition = _text_of(other)
        first, last = _chain(addition)
        if first is None or last is None:
            return
        last.next = target.next
        target.next = first
        self._size += len(addition)

    def delete(self, i: int, length: int) -> None:
        """Remove length characters starting at the i-th."""
        if length < 1:
            raise ValueError("length must be at least 1")
        previous, start = self._locate(i)
        span = list(islice(self._walk(start), length))
        if len(span) < length:
            raise IndexError(f"fewer than {length} characters from position {i}")
        after = span[-1].next
        if previous is None:
            self._head = after
        else:
            previous.next = after
        self._size -= length

    def substring(self, i: int, length: int) -> "LinkString":
        """Return the length characters starting at the i-th."""
        if length < 1:
            raise ValueError("length must be at least 1")
        _, start = self._locate(i)
        span = [node.data for node in islice(self._walk(start), length)]
        if len(span) < length:
            raise IndexError(f"fewer than {length} characters from position {i}")
        return LinkString("".join(span))


def naive_index(pattern: Union[str, SeqString], text: Union[str, SeqString]) -> int:
    """Find pattern in text by brute force; return its 0-based start or -1."""
    wanted = _text_of(pattern)
    body = _text_of(text)
    size = len(wanted)
    for start in range(len(body) - size + 1):
        if body[start: start + size] == wanted:
            return start
    return -1


def kmp_next(pattern: Union[str, SeqString]) -> list[int]:
    """Return the failure table of the fast pattern matching algorithm."""
    text = _text_of(pattern)
    if not text:
        return []
    table = [-1]
    i, j = 0, -1
    while i < len(text) - 1:
        if j == -1 or text[i] == text[j]:
            i += 1
            j += 1
            table.append(j)
        else:
            j = table[j]
    return table