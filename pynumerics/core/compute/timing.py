"""
Wall-clock timing for backend solves.

Every backend wraps its solve in a Timer and reports ``timer.result()`` as
``Result.timing``: the total under 'total_seconds' plus one entry per
named section.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Section timer for one backend solve.

    Entering the timer starts the total clock and leaving it stops the
    clock. A section entered more than once accumulates, so a loop body
    timed under one name reports the time summed over all passes.

    Usage:
        with Timer() as timer:
            with timer.section('inverse'):
                AtA_inv = AtA.inverse()
            for _ in range(iterations):
                with timer.section('sampling'):
                    ...

        timer.result()
        # {'total_seconds': 0.05, 'inverse': 0.01, 'sampling': 0.04}
    """

    def __init__(self):
        self._seconds: dict[str, float] = {}
        self._started: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self._started = time.perf_counter()
        self._total = None
        return self

    def __exit__(self, *exc_info) -> None:
        self._total = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under ``name``."""
        if self._started is None:
            raise RuntimeError(f"Section {name!r} timed outside a running Timer")

        began = time.perf_counter()
        try:
            yield
        finally:
            self._seconds[name] = self._seconds.get(name, 0.0) + time.perf_counter() - began

    def result(self) -> dict[str, float]:
        """
        Seconds spent overall and per section.

        Raises:
            RuntimeError: If the timer has not finished
        """
        if self._total is None:
            raise RuntimeError("Timer.result() needs a finished Timer block")

        return {'total_seconds': self._total, **self._seconds}
