"""
Core data structures for the batch scheduler.
Includes the process record and the fixed-capacity process sequence.
"""

from dataclasses import dataclass, asdict
from typing import List, Iterator, Dict, Any

from .errors import CapacityError, InvalidRecordError


def _require_int(field_name: str, value) -> None:
    # bool is an int subclass but never a valid count or time
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(f"{field_name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ProcessRecord:
    """One process as entered by the user.

    ``pid`` doubles as the arrival order. Lower ``priority`` values run first.
    ``size_kb`` is carried for display only.
    """
    pid: int
    name: str
    size_kb: int
    burst_time: int
    priority: int

    def __post_init__(self):
        """Validate field ranges."""
        for field_name in ("pid", "size_kb", "burst_time", "priority"):
            _require_int(field_name, getattr(self, field_name))
        if self.pid <= 0:
            raise InvalidRecordError(f"pid must be positive, got {self.pid}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidRecordError("name must be a non-empty string")
        if self.size_kb < 0:
            raise InvalidRecordError(f"size_kb must be non-negative, got {self.size_kb}")
        if self.burst_time < 0:
            raise InvalidRecordError(f"burst_time must be non-negative, got {self.burst_time}")

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ProcessSequence:
    """Fixed-capacity, index-addressed sequence of process records.

    The capacity is declared up front and the sequence is filled by
    appending. After that the engine only permutes the values held by the
    slots; the number of slots never changes.
    """

    def __init__(self, capacity: int):
        self._capacity = capacity
        self._slots: List[ProcessRecord] = []

    def append(self, record: ProcessRecord) -> None:
        """Store ``record`` in the next free slot."""
        if len(self._slots) >= self._capacity:
            raise CapacityError(
                f"sequence already holds {self._capacity} records; cannot append pid {record.pid}"
            )
        self._slots.append(record)

    def for_each_in_order(self) -> Iterator[ProcessRecord]:
        """Yield the current slot values from first to last."""
        for record in self._slots:
            yield record

    def slot_count(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._slots) == self._capacity

    def swap(self, i: int, j: int) -> None:
        """Exchange the values held by slots ``i`` and ``j``."""
        self._slots[i], self._slots[j] = self._slots[j], self._slots[i]

    def __getitem__(self, index: int) -> ProcessRecord:
        return self._slots[index]

    def __iter__(self) -> Iterator[ProcessRecord]:
        return self.for_each_in_order()

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        pids = [r.pid for r in self._slots]
        return f"ProcessSequence(capacity={self._capacity}, pids={pids})"
