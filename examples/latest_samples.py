"""Example script that keeps the most recent sensor samples in a ring buffer.

A fake sensor produces one 3-axis reading per tick. `overwrite` keeps only
the newest `WINDOW` readings, which are drained with `read` and averaged.
"""

import logging

import colorlogging
import numpy as np

from circbuf import EmptyBuffer, RingBuffer

logger = logging.getLogger(__name__)

WINDOW = 8
TICKS = 50


def run_latest_samples() -> np.ndarray:
    """Feed `TICKS` readings through the buffer and return the window mean."""
    rng = np.random.default_rng(0)

    with RingBuffer(WINDOW) as samples:
        for tick in range(TICKS):
            samples.overwrite(rng.normal(loc=tick, scale=0.1, size=3))
        logger.info("Buffered %d of %d readings", len(samples), TICKS)

        window = []
        while True:
            try:
                window.append(samples.read())
            except EmptyBuffer:
                break

    mean = np.mean(window, axis=0)
    logger.info("Mean of last %d readings: %s", len(window), np.round(mean, 3))
    return mean


if __name__ == "__main__":
    # python -m examples.latest_samples
    colorlogging.configure()
    run_latest_samples()
