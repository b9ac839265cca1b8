"""Fixed-capacity history of the most recent samples."""

from __future__ import annotations

from span.core.errors import NoDataError


class HistoryBuffer:
    """Circular buffer that overwrites its oldest value once full.

    Only chronological views are exposed; the slot layout stays private.
    """

    def __init__(self, capacity: int):
        self._capacity = max(1, capacity)
        self._slots: list[float] = [0.0] * self._capacity
        self._read = 0   # oldest held value
        self._write = 0  # next slot to fill
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def append(self, value: float) -> None:
        self._slots[self._write] = value
        self._write = (self._write + 1) % self._capacity
        if self._count == self._capacity:
            self._read = (self._read + 1) % self._capacity
        else:
            self._count += 1

    def snapshot(self) -> list[float]:
        """Held values, oldest first."""
        return [self._slots[(self._read + i) % self._capacity]
                for i in range(self._count)]

    def bounds(self) -> tuple[float, float]:
        if not self._count:
            raise NoDataError("history buffer is empty")
        values = self.snapshot()
        return min(values), max(values)
