from __future__ import annotations


class RingBuffer:
    """Fixed-capacity window addressed by absolute stream position.

    Slot ``pos % capacity`` holds the symbol last written at any position
    congruent to ``pos``, so reading ``pos`` before writing it returns the
    symbol seen ``capacity`` positions earlier.
    """

    __slots__ = ("capacity", "_slots")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[str] = [""] * capacity

    def write(self, pos: int, symbol: str) -> None:
        self._slots[pos % self.capacity] = symbol

    def read(self, pos: int) -> str:
        return self._slots[pos % self.capacity]

    def rotated(self, offset: int) -> str:
        return "".join(self.read(offset + j) for j in range(self.capacity))

    @property
    def slots(self) -> tuple[str, ...]:
        return tuple(self._slots)
