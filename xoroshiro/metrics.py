"""Metrics tracking for generator runs."""

import time


class RunMetrics:
    """Counts values drawn and how long drawing took."""

    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.draws = 0
        self.jumps = 0

    def start(self):
        self.start_time = time.perf_counter()

    def stop(self):
        self.end_time = time.perf_counter()

    @property
    def elapsed(self):
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time else time.perf_counter()
        return end - self.start_time

    @property
    def rate(self):
        """Draws per second, 0.0 before anything was timed."""
        elapsed = self.elapsed
        return self.draws / elapsed if elapsed > 0 else 0.0
