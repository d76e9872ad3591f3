import time
from datetime import timedelta


class stopwatch:
    """
    Context manager measuring wall time of the solver runs.

    `elapsed_time` can be read both inside the block (time so far) and after it
    (total time). Formatted with `str`, the stopwatch shows seconds, as used in the
    log messages.

    Examples
    --------
    >>> with stopwatch() as s:
    ...     pass
    >>> s.elapsed_time
    datetime.timedelta(...)
    """

    def __init__(self):
        self._start = None
        self._stop = None

    def __enter__(self):
        self._start = time.monotonic()
        self._stop = None
        return self

    def __exit__(self, *exc_info):
        self._stop = time.monotonic()

    @property
    def elapsed_time(self) -> timedelta:
        if self._start is None:
            raise RuntimeError("Stopwatch was never started")
        end = time.monotonic() if self._stop is None else self._stop
        return timedelta(seconds=end - self._start)

    def __str__(self):
        return f"{self.elapsed_time.total_seconds():.3f}s"
