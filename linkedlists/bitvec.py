"""Fixed-size vector of bits."""

from __future__ import annotations

from collections.abc import Iterator


class BitVector:
    """A vector of ``size`` bits, each initialised to ``value``."""

    __slots__ = ("_size", "_bits")

    def __init__(self, size: int, value: bool = False) -> None:
        if size < 0:
            raise ValueError("bit vector size must not be negative")
        self._size = size
        self._bits = self._full_mask() if value else 0

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"BitVector(size={self._size}, bits={bits!r})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        bits = self._bits
        for _ in range(self._size):
            yield bool(bits & 1)
            bits >>= 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._size, self._bits))

    def count(self) -> int:
        """Return how many bits are set."""
        return bin(self._bits).count("1")

    def set(self, pos: int, value: bool) -> None:
        """Set the bit at ``pos`` to ``value``."""
        mask = self._mask(pos)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask

    def set_all(self, value: bool) -> None:
        """Set every bit to ``value``."""
        self._bits = self._full_mask() if value else 0

    def flip(self, pos: int) -> None:
        """Invert the bit at ``pos``."""
        self._bits ^= self._mask(pos)

    def get(self, pos: int) -> bool:
        """Return the bit at ``pos``."""
        return bool(self._bits & self._mask(pos))

    def _full_mask(self) -> int:
        return (1 << self._size) - 1

    def _mask(self, pos: int) -> int:
        if not 0 <= pos < self._size:
            raise IndexError(f"bit position {pos} out of range for size {self._size}")
        return 1 << pos