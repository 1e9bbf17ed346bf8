"""Singly linked list holding elements of a fixed declared size."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

ElementComparer = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[_Node] = None


def _default_compare(a: Any, b: Any) -> int:
    """Compare two elements: 0 if equal, -1 if a > b, 1 if a < b."""
    if a == b:
        return 0
    return -1 if a > b else 1


class SList:
    """A singly linked list.

    ``size`` is the declared size of each element. It stays fixed for the
    lifetime of the list, and only lists of equal size can be joined.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("element size must not be negative")
        self._size = size
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0

    def __repr__(self) -> str:
        return f"SList(size={self._size}, items={list(self)!r})"

    # basic data access

    def size(self) -> int:
        """Return the declared size of each element."""
        return self._size

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def first(self) -> Any:
        """Return the first element, or None if the list is empty."""
        return self._head.data if self._head is not None else None

    def last(self) -> Any:
        """Return the last element, or None if the list is empty."""
        return self._tail.data if self._tail is not None else None

    # creation / destruction

    def purge(self) -> SList:
        """Remove every element, keeping the element size."""
        self._head = None
        self._tail = None
        self._length = 0
        return self

    # insertion / removal

    def append(self, data: Any = None) -> None:
        """Add an element at the end of the list."""
        node = _Node(data)
        if self._tail is not None:
            self._tail.next = node
            self._tail = node
        else:
            self._head = self._tail = node
        self._length += 1

    def prepend(self, data: Any = None) -> None:
        """Add an element at the start of the list."""
        node = _Node(data)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def insert(self, pos: int, data: Any = None) -> None:
        """Insert an element so that it ends up at position ``pos``.

        ``pos`` may be anything from 0 to the length of the list.
        """
        self._check_position(pos, allow_end=True)
        if pos == 0:
            self.prepend(data)
            return
        if pos == self._length:
            self.append(data)
            return
        before = self._node_at(pos - 1)
        node = _Node(data)
        node.next = before.next
        before.next = node
        self._length += 1

    def remove(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        self._check_position(pos)
        if pos == 0:
            self.pop()
            return
        before = self._node_at(pos - 1)
        node = before.next
        assert node is not None
        before.next = node.next
        if node is self._tail:
            self._tail = before
        self._length -= 1

    def pop(self) -> Any:
        """Remove the first element and return it."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    # access / modification

    def set(self, pos: int, data: Any) -> Any:
        """Replace the element at ``pos`` and return the new value."""
        self._check_position(pos)
        if data is None:
            raise ValueError("no data given to set")
        node = self._node_at(pos)
        node.data = data
        return node.data

    def get(self, pos: int) -> Any:
        """Return the element at ``pos``."""
        self._check_position(pos)
        return self._node_at(pos).data

    def swap(self, a: int, b: int) -> None:
        """Exchange the elements at two positions."""
        self._check_position(a)
        self._check_position(b)
        if a == b:
            return
        node_a = self._node_at(a)
        node_b = self._node_at(b)
        node_a.data, node_b.data = node_b.data, node_a.data

    # modification of lists

    def split(self, pos: int) -> SList:
        """Cut the list at ``pos`` and return the tail part as a new list.

        The element at ``pos`` becomes the first element of the new list;
        this list keeps the elements before it.
        """
        self._check_position(pos)
        new = SList(self._size)
        if pos == 0:
            new._head, new._tail, new._length = self._head, self._tail, self._length
            self.purge()
            return new
        node = self._node_at(pos - 1)
        new._head = node.next
        new._tail = self._tail
        new._length = self._length - pos
        node.next = None
        self._tail = node
        self._length = pos
        return new

    def join(self, src: SList) -> SList:
        """Move every element of ``src`` to the end of this list.

        ``src`` is left empty. Both lists must have the same element size.
        """
        if src is self:
            raise ValueError("cannot join a list with itself")
        if src._size != self._size:
            raise ValueError(
                f"element sizes differ: {self._size} and {src._size}"
            )
        if src._length == 0:
            return self
        if self._length == 0:
            self._head, self._tail, self._length = src._head, src._tail, src._length
        else:
            assert self._tail is not None
            self._tail.next = src._head
            self._tail = src._tail
            self._length += src._length
        src.purge()
        return self

    def copy(self) -> SList:
        """Return a new list holding the same elements."""
        duplicate = SList(self._size)
        for item in self:
            duplicate.append(item)
        return duplicate

    def compare(self, other: SList, cmp: Optional[ElementComparer] = None) -> int:
        """Compare two lists element by element.

        ``cmp(a, b)`` returns 0 if the elements are equal, -1 if ``a > b``
        and 1 if ``a < b``; natural ordering is used when it is omitted.
        The result follows the same convention: the first differing element
        decides, and otherwise the shorter list counts as the smaller one.
        """
        compare_elements = cmp if cmp is not None else _default_compare
        for mine, theirs in zip(self, other):
            result = compare_elements(mine, theirs)
            if result != 0:
                return result
        if self._length == other._length:
            return 0
        return 1 if self._length < other._length else -1

    def verify(self) -> bool:
        """Check the links of the list and return whether they are consistent."""
        seen_ids: set[int] = set()
        last: Optional[_Node] = None
        count = 0
        node = self._head
        while node is not None:
            if id(node) in seen_ids or count >= self._length:
                return False
            seen_ids.add(id(node))
            count += 1
            last = node
            node = node.next
        if count != self._length:
            return False
        if self._length == 0:
            return self._head is None and self._tail is None
        return self._tail is last

    # internals

    def _check_position(self, pos: int, allow_end: bool = False) -> None:
        limit = self._length + 1 if allow_end else self._length
        if not 0 <= pos < limit:
            raise IndexError(f"position {pos} out of range for length {self._length}")

    def _node_at(self, pos: int) -> _Node:
        if pos == self._length - 1:
            assert self._tail is not None
            return self._tail
        node = self._head
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node