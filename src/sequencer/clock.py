import time


class MonotonicClock:
    """Millisecond clock and blocking wait backed by the `time` module."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)

    def wait_ms(self, ms: int):
        if ms > 0:
            time.sleep(ms / 1000.0)
