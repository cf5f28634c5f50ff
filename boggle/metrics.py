import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class StageTimer:
    """Wall-clock timings for the stages of one solve.

    Stages keep the order they first ran in. Running a stage name again adds
    to its time rather than replacing it.
    """

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._started = clock()
        self._seconds: dict[str, float] = {}

    @contextmanager
    def stage(self, name: str):
        began = self._clock()
        try:
            yield
        finally:
            spent = self._clock() - began
            self._seconds[name] = self._seconds.get(name, 0.0) + spent
            logger.debug("stage=%s elapsed=%.1fms", name, spent * 1000)

    @property
    def stages(self) -> list[str]:
        return list(self._seconds)

    @property
    def elapsed(self) -> float:
        """Seconds since the timer was created."""
        return self._clock() - self._started

    @property
    def timings(self) -> dict[str, float]:
        """Stage name -> milliseconds, rounded to 0.1."""
        return {name: round(secs * 1000, 1) for name, secs in self._seconds.items()}

    @property
    def total_ms(self) -> float:
        return round(self.elapsed * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
