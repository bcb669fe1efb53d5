# circbuf/core/buffer.py
"""
A **fixed-capacity, in-process FIFO ring buffer**.

* Storage is one NumPy object array of exactly `capacity` slots, allocated
  once in `__init__` and never resized.
* Two cursors (write / read) advance modulo ``2 * capacity``. Full and
  empty both land on the same slot index, but never on the same cursor
  pair, so no separate counter or flag is needed.
* Single owner only. There is no lock; share it across threads only under
  external synchronisation.
"""

from __future__ import annotations

import logging
import operator
from typing import Generic, TypeVar

import numpy as np

from circbuf.core.errors import EmptyBuffer, FullBuffer

__all__ = ["RingBuffer"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Vacant:
    """Marker stored in slots that hold no live element."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<vacant>"


VACANT = _Vacant()


class RingBuffer(Generic[T]):
    """Bounded FIFO with exactly-once reads and overwrite-oldest eviction.

    A capacity of 0 is legal: the buffer is permanently empty *and* full,
    so every `write` raises `FullBuffer` and every `read` raises
    `EmptyBuffer`.
    """

    __slots__ = ("_capacity", "_span", "_slots", "_write_cur", "_read_cur")

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool):
            raise TypeError("capacity must be an int (got bool)")
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be ≥ 0 (got {capacity})")

        self._capacity = capacity
        self._span     = 2 * capacity or 1   # cursor modulus; 1 keeps cap 0 sane
        self._slots: np.ndarray | None = np.full(capacity, VACANT, dtype=object)
        self._write_cur = 0
        self._read_cur  = 0

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    @property
    def capacity(self) -> int:
        """Fixed slot count; never changes."""
        return self._capacity

    def __len__(self) -> int:
        """Number of live elements, ``0..capacity``."""
        return (self._write_cur - self._read_cur) % self._span

    def full(self) -> bool:
        """`True` when every slot holds a live element."""
        return len(self) == self._capacity

    def is_empty(self) -> bool:
        """`True` when there is nothing to read."""
        return self._write_cur == self._read_cur

    @property
    def closed(self) -> bool:
        """`True` once `close()` has released the storage."""
        return self._slots is None

    # ------------------------------------------------------------------ #
    # producer API
    # ------------------------------------------------------------------ #

    def write(self, element: T) -> None:
        """Append *element* as the newest entry.

        Raises `FullBuffer` (with *element* on ``exc.element``) when no slot
        is free; nothing is stored in that case.
        """
        slots = self._live_slots()
        if self.full():
            raise FullBuffer(element)

        slots[self._write_cur % self._capacity] = element
        self._write_cur = (self._write_cur + 1) % self._span

    def overwrite(self, element: T) -> None:
        """Write *element*, evicting the oldest entry first if full.

        Never raises for buffer state. With capacity 0 there is nowhere to
        put *element* and it is dropped.
        """
        self._live_slots()
        if self.full():
            try:
                evicted = self.read()
            except EmptyBuffer:
                logger.debug("overwrite on zero-capacity buffer, dropping %r", element)
                return
            logger.debug("overwrite evicted %r", evicted)

        self.write(element)

    # ------------------------------------------------------------------ #
    # consumer API
    # ------------------------------------------------------------------ #

    def read(self) -> T:
        """Remove and return the **oldest** element.

        The vacated slot is reset to `VACANT` so the buffer keeps no
        reference to the returned object.
        """
        slots = self._live_slots()
        if self.is_empty():
            raise EmptyBuffer()

        idx = self._read_cur % self._capacity
        element = slots[idx]
        slots[idx] = VACANT
        self._read_cur = (self._read_cur + 1) % self._span
        return element

    def clear(self) -> int:
        """Drop every live element, oldest first. Returns how many.

        A closed buffer holds nothing, so clearing it returns 0.
        """
        if self._slots is None:
            return 0
        dropped = 0
        while True:
            try:
                self.read()
            except EmptyBuffer:
                return dropped
            dropped += 1

    # ------------------------------------------------------------------ #
    # house-keeping
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """
        Idempotent. Releases every live element, then the slot array.
        """
        if self._slots is None:
            return
        dropped = self.clear()
        self._slots = None
        logger.debug("closed ring buffer (capacity=%d, dropped=%d)",
                     self._capacity, dropped)

    def __enter__(self) -> "RingBuffer[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"len={len(self)}"
        return f"{type(self).__name__}(capacity={self._capacity}, {state})"

    # ------------------------------------------------------------------ #
    # private
    # ------------------------------------------------------------------ #

    def _live_slots(self) -> np.ndarray:
        if self._slots is None:
            raise ValueError("operation on closed RingBuffer")
        return self._slots
