"""circbuf – fixed-capacity FIFO ring buffer."""

__version__ = "0.1.0"

from circbuf.core.buffer import RingBuffer
from circbuf.core.errors import EmptyBuffer, FullBuffer, RingBufferError

__all__ = ["RingBuffer", "RingBufferError", "EmptyBuffer", "FullBuffer"]
