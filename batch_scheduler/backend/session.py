from __future__ import annotations

from typing import List, Tuple
from dataclasses import dataclass

from .core import ProcessRecord, ProcessSequence
from .errors import (
    SchedulerError,
    DegenerateInputError,
    IncompleteSessionError,
)
from .schedulers import OrderingPolicy, PolicyRegistry, SortReport, sort_by
from .utils import EventLogger


@dataclass
class SessionConfig:
    early_exit: bool = False
    record_events: bool = True
    listing_width: int = 40
    name_width: int = 20
    # extra disciplines available to sessions built with this config
    policies: Tuple[OrderingPolicy, ...] = ()


class SchedulingSession:
    """One batch of processes and the policies applied to it.

    Front-ends create a session with the number of processes, insert exactly
    that many, then apply policies and read back :meth:`snapshot`. Every call
    works on whatever order the previous call left behind.
    """

    def __init__(self, capacity: int, config: SessionConfig | None = None, logger: EventLogger | None = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise DegenerateInputError(f"process count must be a positive integer, got {capacity!r}")
        self.config = config or SessionConfig()
        self.logger = logger or EventLogger()
        self._sequence = ProcessSequence(capacity)
        self.policies = PolicyRegistry(self.config.policies)

    @property
    def capacity(self) -> int:
        return self._sequence.slot_count()

    @property
    def is_populated(self) -> bool:
        return self._sequence.is_full()

    def __len__(self) -> int:
        return len(self._sequence)

    def insert(self, pid: int, name: str, size_kb: int, burst_time: int, priority: int) -> ProcessRecord:
        """Append one process. Must be called exactly ``capacity`` times."""
        try:
            record = ProcessRecord(pid=pid, name=name, size_kb=size_kb, burst_time=burst_time, priority=priority)
            self._sequence.append(record)
        except SchedulerError as e:
            self._reject(e)
            raise
        if self.config.record_events:
            self.logger.log_insertion(record)
        return record

    def add(self, name: str, size_kb: int, burst_time: int, priority: int) -> ProcessRecord:
        """Insert with the next arrival id."""
        return self.insert(len(self._sequence) + 1, name, size_kb, burst_time, priority)

    def register_policy(self, policy: OrderingPolicy) -> None:
        """Make ``policy`` available to this session's :meth:`apply_policy`."""
        self.policies.register(policy)

    def apply_policy(self, policy_name: str) -> SortReport:
        """Reorder the whole sequence with the named policy."""
        try:
            policy = self.policies.get(policy_name)
            if not self._sequence.is_full():
                raise IncompleteSessionError(
                    f"{len(self._sequence)} of {self.capacity} processes inserted; "
                    "insert all of them before scheduling"
                )
        except SchedulerError as e:
            self._reject(e)
            raise

        report = sort_by(self._sequence, policy, self.capacity, early_exit=self.config.early_exit)
        if self.config.record_events:
            self.logger.log_policy_application(
                policy.name, report.passes, report.comparisons, report.swaps,
                [r.pid for r in self._sequence],
            )
        return report

    def snapshot(self) -> List[ProcessRecord]:
        """Current records in current order."""
        return list(self._sequence.for_each_in_order())

    def _reject(self, error: SchedulerError) -> None:
        if self.config.record_events:
            self.logger.log_rejection(type(error).__name__, str(error))


def create_session(n: int, config: SessionConfig | None = None, logger: EventLogger | None = None) -> SchedulingSession:
    return SchedulingSession(n, config=config, logger=logger)
