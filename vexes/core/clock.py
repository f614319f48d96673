import time


class Clock:
    """Monotonic stopwatch used to pace render ticks."""

    def __init__(self):
        self._start = time.monotonic()

    def get_elapsed_time(self, reset: bool = False) -> float:
        """Seconds since creation or the last reset.

        Args:
            reset: Restart the measurement from now after reading it
        """
        now = time.monotonic()
        elapsed = now - self._start
        if reset:
            self._start = now
        return elapsed
