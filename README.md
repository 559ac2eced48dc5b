# dslib

Textbook data structures in plain Python, built from explicit nodes:

- `dslib.linked`: `SinglyLinkedList`, `HeadedLinkedList` (with a header node),
  `CircularLinkedList` and `DoublyLinkedList`.
- `dslib.strings`: `SeqString` (a string with a fixed capacity), `LinkString`
  (a chain of one-character nodes), and the pattern matching helpers
  `naive_index` and `kmp_next`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

Each list takes an optional iterable of starting values, can be iterated, has
a length and a `display()` method that returns the values right-aligned in
columns of width five (or a short message when the list is empty).
Positions count from 1.

```python
from dslib.linked import SinglyLinkedList, CircularLinkedList, DoublyLinkedList

lst = SinglyLinkedList([1, 2, 3])
lst.insert(9, 1)          # insert 9 after the first node
lst.insert(0, 0)          # position 0 inserts at the front
print(list(lst))          # [0, 1, 9, 2, 3]
print(lst.find(3))        # 9
print(lst.delete(2))      # True

ring = CircularLinkedList([4, 5, 6])
print(ring.rear())        # 6
print(ring.find(5))       # 2, or None when the value is absent

dl = DoublyLinkedList([1, 2, 3])
print(list(reversed(dl))) # [3, 2, 1]
```

- `find(i)` on the singly, headed and doubly linked lists returns the value of
  the i-th node and raises `IndexError` when there is none. On
  `CircularLinkedList`, `find(x)` returns the position of the first node
  holding `x`.
- `insert(x, i)` puts `x` after the i-th node; `i == 0` puts it first (after
  the header for `HeadedLinkedList`). An impossible position raises
  `IndexError`.
- `delete(x)` removes the first node holding `x`. `SinglyLinkedList` and
  `HeadedLinkedList` return whether a node was removed;
  `CircularLinkedList` and `DoublyLinkedList` raise `ValueError` when no node
  holds `x`. Deleting from an empty singly, circular or doubly linked list
  raises `ValueError`.

## Strings

```python
from dslib.strings import SeqString, LinkString, naive_index, kmp_next

s = SeqString("hello")
s.insert(1, SeqString(">>"))
print(str(s))                   # >>hello
print(str(s.substring(3, 5)))   # hello
print(s.index("lo"))            # 5

t = LinkString("abcdef")
t.insert(2, "XY")               # insert after the second character
print(str(t))                   # abXYcdef
t.delete(1, 2)
print(str(t))                   # XYcdef

print(naive_index("lo", "hello"))  # 3
print(kmp_next("abab"))            # [-1, 0, 0, 1]
```

Character positions in `SeqString` and `LinkString` count from 1, while
`naive_index` and `SeqString.index` return a start counted from 0, or -1 when
the pattern does not occur. A `SeqString` holds at most `capacity - 1`
characters (the default capacity is 100); going past that raises
`OverflowError`. Spans that fall outside the string raise `IndexError`.

## What it does not do

The package offers linked lists and strings only. It has no stack, queue or
array-backed list types, no command-line tool and no storage: every structure
lives in memory for as long as the Python object does.