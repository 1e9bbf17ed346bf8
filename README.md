# linkedlists

Small container types for Python:

- `linkedlists.dlist.DList`: a doubly linked list that can be walked in both directions.
- `linkedlists.slist.SList`: a singly linked list.
- `linkedlists.bitvec.BitVector`: a fixed-size vector of bits.

Each list is created with an element `size`, which must not be negative.
The list keeps that size for its whole life. It is checked in only one
place: two lists can be joined only when their sizes match. The values
you store can be any Python objects.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Doubly linked list

```python
from linkedlists.dlist import DList

items = DList(4)
items.append(1)
items.append(2)
items.prepend(0)
items.insert(3, 3)          # position may be 0 .. len(items)

assert list(items) == [0, 1, 2, 3]
assert list(reversed(items)) == [3, 2, 1, 0]
assert items.first() == 0 and items.last() == 3
assert items.get(1) == 1
assert items.size() == 4 and len(items) == 4

items.set(1, 10)            # returns the new value
items.swap(0, 3)            # [3, 10, 2, 0]
head = items.pop()          # removes and returns the first element: 3
items.remove(0)             # [2, 0]

tail = items.split(1)       # items keeps [2], tail takes [0]
items.join(tail)            # items is [2, 0] again, tail is left empty
duplicate = items.copy()
items.reverse()             # [0, 2]
assert items.verify()       # True when the internal links are consistent
items.purge()               # empties the list and keeps its size
```

`first()` and `last()` return `None` on an empty list. Every operation
on a position accepts only `0 <= pos < len(list)`, or up to `len(list)`
for `insert`. Negative positions are not supported. The operations
raise:

- `IndexError` for a position out of range, and for `pop()` on an empty list.
- `ValueError` when `set` is given `None`, when you join lists whose
  element sizes differ, and when you join a list with itself.

## Singly linked list

`SList` has the same operations as `DList`, except for `reversed()` and
`reverse()`. It also has `compare(other, cmp)`. This method compares two
lists element by element:

- `cmp(a, b)` must return `0` when the two elements are equal, `-1` when
  `a > b` and `1` when `a < b`.
- Pass `None` to use the natural ordering.
- The first element that differs decides the result.
- If all shared elements are equal, the shorter list counts as smaller.
  In that case the result is `1` when `self` is shorter, `-1` when it is
  longer, and `0` when the lists have the same length.

```python
from linkedlists.slist import SList

a = SList(4)
b = SList(4)
for value in (1, 2, 3):
    a.append(value)
    b.append(value)

assert a.compare(b, None) == 0
b.append(4)
assert a.compare(b, None) == 1
```

## Bit vector

```python
from linkedlists.bitvec import BitVector

bits = BitVector(16, False)
bits.set(3, True)
bits.flip(5)
assert bits.get(3) and bits.get(5)
assert bits.count() == 2
assert len(bits) == 16

bits.set_all(True)
assert bits.count() == 16
assert all(bits)            # iterating yields each bit as a bool
```

A `BitVector` has a fixed size. There is no way to append, insert or
remove bits. A position outside `0 <= pos < len(bits)` raises
`IndexError`. Two bit vectors are equal when they have the same size and
the same bits.

## Running the tests

```
pytest
```