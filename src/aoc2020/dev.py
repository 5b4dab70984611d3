"""
Development helpers for timing puzzle runs.
"""
from __future__ import annotations

import functools
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass
class Elapsed:
    seconds: float = 0.0

    @property
    def milliseconds(self) -> float:
        return self.seconds * 1000.0

    def __str__(self) -> str:
        if self.seconds < 1.0:
            return f"{self.milliseconds:.1f} ms"
        return f"{self.seconds:.3f} s"


@contextmanager
def stopwatch() -> Iterator[Elapsed]:
    """
    Measure the wall time of a block.

    The yielded ``Elapsed`` is filled in when the block exits, also when it
    exits with an exception.
    """
    elapsed = Elapsed()
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed.seconds = time.perf_counter() - start


def timer(func: Callable[..., R]) -> Callable[..., R]:
    """Decorator logging how long each call to ``func`` took."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        with stopwatch() as elapsed:
            result = func(*args, **kwargs)
        logger.info(f"{func.__qualname__} finished in {elapsed}")
        return result

    return wrapper
