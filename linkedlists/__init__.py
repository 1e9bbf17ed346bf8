"""Singly and doubly linked lists and a fixed-size bit vector."""

__version__ = "0.1.0"
__all__ = ["bitvec", "dlist", "slist"]