"""Measure the processor time spent in a single call."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Timed(Generic[T]):
    """The value a call returned and the processor time it took, in seconds."""

    value: T
    seconds: float

    def milliseconds(self) -> float:
        """Return the measured time in milliseconds."""
        return self.seconds * 1000


def timed(func: Callable[..., T], *args: Any, **kwargs: Any) -> Timed[T]:
    """Call ``func`` with the given arguments and time it.

    Exceptions raised by ``func`` propagate unchanged.
    """
    start = time.process_time()
    value = func(*args, **kwargs)
    end = time.process_time()
    return Timed(value=value, seconds=end - start)