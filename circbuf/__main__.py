"""CLI entry-point:  python -m circbuf --capacity 3 w:a w:b r o:c c"""

import argparse
import logging
import sys
from typing import Sequence

import colorlogging

from circbuf.core.buffer import RingBuffer
from circbuf.core.errors import RingBufferError

logger = logging.getLogger(__name__)


def parse_op(text: str) -> tuple[str, str | None]:
    """Split ``w:<value>`` / ``o:<value>`` / ``r`` / ``c`` into (op, value)."""
    op, sep, value = text.partition(":")
    if op in ("w", "o") and sep:
        return op, value
    if op in ("r", "c") and not sep:
        return op, None
    raise argparse.ArgumentTypeError(
        f"bad operation {text!r}; expected w:<value>, o:<value>, r or c"
    )


def replay(rb: RingBuffer[str], ops: Sequence[tuple[str, str | None]]) -> None:
    """Apply *ops* in order, printing one line per operation."""
    for op, value in ops:
        try:
            if op == "w":
                rb.write(value)
                print(f"write {value!r}: ok")
            elif op == "o":
                rb.overwrite(value)
                print(f"overwrite {value!r}: ok")
            elif op == "r":
                print(f"read: {rb.read()!r}")
            else:
                print(f"clear: dropped {rb.clear()}")
        except RingBufferError as err:
            logger.debug("%s failed: %s", op, err)
            print(f"{op}: {type(err).__name__}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay operations on a ring buffer")
    parser.add_argument("--capacity", type=int, default=4, help="slot count (default 4)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("ops", nargs="*", type=parse_op,
                        help="w:<value> write, o:<value> overwrite, r read, c clear")
    args = parser.parse_args(argv)

    colorlogging.configure()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.capacity < 0:
        parser.error(f"--capacity must be ≥ 0 (got {args.capacity})")

    with RingBuffer(args.capacity) as rb:
        logger.debug("created %r", rb)
        replay(rb, args.ops)
        print(f"len={len(rb)} full={rb.full()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
