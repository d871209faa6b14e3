"""
Wall-clock timing for test invocations.

The CPU backend wraps each test in a named section so Result.timing shows
the total run time next to the time spent inside the test itself.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total timer with named, accumulating sections.

        timer = Timer()
        timer.start()
        with timer.section('welch'):
            params, info, warnings_list = welch_test(design)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'welch': ...}

    Sections are not exclusive; re-entering a name adds to its total.
    """

    def __init__(self):
        self._t0: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """Return {'total_seconds': ..., <section>: ...}. Requires stop()."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}

