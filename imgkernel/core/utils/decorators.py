"""
Timing helpers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, int]]:
    """
    Measure wall-clock time of a block.

    The yielded dict gets an "ms" entry once the block exits (also on error).

    Example:
        >>> with timer() as t:
        ...     convolve_image(im, kernel, True)
        >>> t["ms"]
    """
    timing: Dict[str, int] = {"ms": 0}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing["ms"] = int((time.perf_counter() - start) * 1000)
