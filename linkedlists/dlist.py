"""Doubly linked list holding elements of a fixed declared size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DList:
    """A doubly linked list.

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
        return f"DList(size={self._size}, items={list(self)!r})"

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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def first(self) -> Any:
        """Return the first element, or None if the list is empty."""
        return self._head.data if self._head is not None else None

    def last(self) -> Any:
        """Return the last element, or None if the list is empty."""
        return self._tail.data if self._tail is not None else None

    # creation / destruction

    def purge(self) -> DList:
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
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        else:
            self._head = self._tail = node
        self._length += 1

    def prepend(self, data: Any = None) -> None:
        """Add an element at the start of the list."""
        node = _Node(data)
        if self._head is not None:
            node.next = self._head
            self._head.prev = node
            self._head = node
        else:
            self._head = self._tail = node
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
        after = before.next
        assert after is not None
        node = _Node(data)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        self._length += 1

    def remove(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        self._check_position(pos)
        node = self._node_at(pos)
        self._unlink(node)

    def pop(self) -> Any:
        """Remove the first element and return it."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._unlink(node)
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

    def swap(self, pos_a: int, pos_b: int) -> None:
        """Exchange the elements at two positions."""
        self._check_position(pos_a)
        self._check_position(pos_b)
        if pos_a == pos_b:
            return
        node_a = self._node_at(pos_a)
        node_b = self._node_at(pos_b)
        node_a.data, node_b.data = node_b.data, node_a.data

    # modification of lists

    def split(self, pos: int) -> DList:
        """Cut the list at ``pos`` and return the tail part as a new list.

        The element at ``pos`` becomes the first element of the new list;
        this list keeps the elements before it.
        """
        self._check_position(pos)
        new = DList(self._size)
        if pos == 0:
            new._head, new._tail, new._length = self._head, self._tail, self._length
            self.purge()
            return new
        node = self._node_at(pos - 1)
        rest = node.next
        assert rest is not None
        new._head = rest
        new._tail = self._tail
        new._length = self._length - pos
        rest.prev = None
        node.next = None
        self._tail = node
        self._length = pos
        return new

    def join(self, src: DList) -> DList:
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
            assert self._tail is not None and src._head is not None
            self._tail.next = src._head
            src._head.prev = self._tail
            self._tail = src._tail
            self._length += src._length
        src.purge()
        return self

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        node = self._head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def copy(self) -> DList:
        """Return a new list holding the same elements."""
        duplicate = DList(self._size)
        for item in self:
            duplicate.append(item)
        return duplicate

    def verify(self) -> bool:
        """Check the links of the list and return whether they are consistent."""
        seen: list[_Node] = []
        seen_ids: set[int] = set()
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            if id(node) in seen_ids or len(seen) >= self._length:
                return False
            if node.prev is not prev:
                return False
            seen.append(node)
            seen_ids.add(id(node))
            prev = node
            node = node.next
        if len(seen) != self._length:
            return False
        if self._length == 0:
            return self._head is None and self._tail is None
        if self._tail is not seen[-1]:
            return False
        backwards = self._tail
        for expected in reversed(seen):
            if backwards is not expected:
                return False
            backwards = backwards.prev
        return backwards is None

    # internals

    def _check_position(self, pos: int, allow_end: bool = False) -> None:
        limit = self._length + 1 if allow_end else self._length
        if not 0 <= pos < limit:
            raise IndexError(f"position {pos} out of range for length {self._length}")

    def _node_at(self, pos: int) -> _Node:
        if pos < self._length // 2:
            node = self._head
            for _ in range(pos):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._length - pos - 1):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def _unlink(self, node: _Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._length -= 1