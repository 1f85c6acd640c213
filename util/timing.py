# util/timing.py
import time
from contextlib import contextmanager
from typing import Iterator, Any
import logging


class Stopwatch:
    """Elapsed wall time in seconds; frozen once the timed block exits."""

    def __init__(self) -> None:
        self._t0 = time.perf_counter()
        self._t1: float | None = None

    def stop(self) -> float:
        if self._t1 is None:
            self._t1 = time.perf_counter()
        return self.seconds

    @property
    def seconds(self) -> float:
        end = self._t1 if self._t1 is not None else time.perf_counter()
        return end - self._t0


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[Stopwatch]:
    """
    Usage:
      with timed(logger, "store.fetch", key=key) as sw:
          ...
      sw.seconds  # duration of the block
    Emits one INFO on exit: "<name>.done ms=<int> key=val ..."
    """
    sw = Stopwatch()
    try:
        yield sw
    finally:
        dt_ms = int(sw.stop() * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        logger.info("%s.done ms=%d%s", name, dt_ms, suffix)
