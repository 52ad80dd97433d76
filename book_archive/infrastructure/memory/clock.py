"""In-process logical clock."""

import threading


class CounterClock:
    """Strictly increasing counter. Each call to now() advances by one."""

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = start

    async def now(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
