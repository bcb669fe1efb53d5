# circbuf/core/errors.py
"""
Error signals raised by `RingBuffer`.

Both are recoverable: the buffer is left exactly as it was before the
failing call and stays usable.
"""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["RingBufferError", "EmptyBuffer", "FullBuffer"]

T = TypeVar("T")


class RingBufferError(Exception):
    """Base class for all ring buffer errors."""


class EmptyBuffer(RingBufferError):
    """`read()` was called with no element available."""

    def __init__(self, message: str = "ring buffer is empty") -> None:
        super().__init__(message)


class FullBuffer(RingBufferError, Generic[T]):
    """
    `write()` was called with every slot occupied.

    The rejected input is handed back on `element`; the buffer never took
    ownership of it.
    """

    def __init__(self, element: T, message: str = "ring buffer is full") -> None:
        super().__init__(message)
        self.element: T = element
