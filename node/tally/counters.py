from typing import List
from .errors import CounterUnderflow


class AggregateCounters:
    """
    Fixed-length array of non-negative counts, one slot per category.
    """

    def __init__(self, size: int):
        self._counts: List[int] = [0] * size

    def increment(self, index: int) -> int:
        self._check(index)
        self._counts[index] += 1
        return self._counts[index]

    def decrement(self, index: int) -> int:
        self._check(index)
        if self._counts[index] == 0:
            raise CounterUnderflow(f"counter {index} is already zero")
        self._counts[index] -= 1
        return self._counts[index]

    def total(self) -> int:
        return sum(self._counts)

    def as_list(self) -> List[int]:
        return list(self._counts)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._counts):
            raise IndexError(f"counter index {index} out of range")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._counts[index]

    def __len__(self) -> int:
        return len(self._counts)
