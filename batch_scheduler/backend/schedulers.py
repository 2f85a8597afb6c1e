"""
Ordering policies and the in-place exchange sort that applies them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from .core import ProcessRecord, ProcessSequence
from .errors import InvalidPolicyError

Predicate = Callable[[ProcessRecord, ProcessRecord], bool]


@dataclass
class SortReport:
    """Work done by one call to :func:`sort_by`."""
    passes: int = 0
    comparisons: int = 0
    swaps: int = 0


class OrderingPolicy(ABC):
    """Abstract base class for all ordering policies.

    A policy answers one question: should ``a`` move after ``b``? It must be
    total and must not modify either record.
    """

    name: str = ""
    label: str = ""

    @abstractmethod
    def should_follow(self, a: ProcessRecord, b: ProcessRecord) -> bool:
        """Return True when ``a`` belongs after ``b``."""
        pass

    def __call__(self, a: ProcessRecord, b: ProcessRecord) -> bool:
        return self.should_follow(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PriorityPolicy(OrderingPolicy):
    """Priority scheduling (lower number = higher priority)."""
    name = "priority"
    label = "PRIORITY"

    def should_follow(self, a: ProcessRecord, b: ProcessRecord) -> bool:
        return a.priority > b.priority


class SJFPolicy(OrderingPolicy):
    """Shortest Job First: ascending burst time."""
    name = "sjf"
    label = "SJF"

    def should_follow(self, a: ProcessRecord, b: ProcessRecord) -> bool:
        return a.burst_time > b.burst_time


class FCFSPolicy(OrderingPolicy):
    """First Come First Serve: ascending arrival id."""
    name = "fcfs"
    label = "FCFS"

    def should_follow(self, a: ProcessRecord, b: ProcessRecord) -> bool:
        return a.pid > b.pid


priority_order = PriorityPolicy()
shortest_job_first = SJFPolicy()
first_come_first_serve = FCFSPolicy()

BUILTIN_POLICIES: Mapping[str, OrderingPolicy] = MappingProxyType({
    p.name: p for p in (priority_order, shortest_job_first, first_come_first_serve)
})


def _policy_key(name) -> Optional[str]:
    if not isinstance(name, str):
        return None
    return name.strip().lower()


def _lookup(policies: Mapping[str, OrderingPolicy], name) -> OrderingPolicy:
    key = _policy_key(name)
    policy = policies.get(key) if key is not None else None
    if policy is None:
        raise InvalidPolicyError(name, list(policies.keys()))
    return policy


class PolicyRegistry:
    """Policies one session can apply by name.

    Starts with the built-ins; :meth:`register` adds new disciplines to this
    registry only. Built-in names cannot be replaced.
    """

    def __init__(self, extra: Iterable[OrderingPolicy] = ()):
        self._policies: Dict[str, OrderingPolicy] = dict(BUILTIN_POLICIES)
        for policy in extra:
            self.register(policy)

    def register(self, policy: OrderingPolicy) -> None:
        key = _policy_key(policy.name)
        if not key:
            raise ValueError("policy must define a name")
        if key in BUILTIN_POLICIES:
            raise ValueError(f"cannot replace built-in policy {key!r}")
        self._policies[key] = policy

    def get(self, name: str) -> OrderingPolicy:
        """Look up a policy by (case-insensitive) name."""
        return _lookup(self._policies, name)

    def names(self) -> List[str]:
        return list(self._policies.keys())

    def __contains__(self, name) -> bool:
        key = _policy_key(name)
        return key is not None and key in self._policies


def available_policies() -> List[str]:
    return list(BUILTIN_POLICIES.keys())


def get_policy(name: str) -> OrderingPolicy:
    """Look up a built-in policy by (case-insensitive) name."""
    return _lookup(BUILTIN_POLICIES, name)


def sort_by(
    sequence: ProcessSequence,
    predicate: Predicate,
    n: Optional[int] = None,
    early_exit: bool = False,
) -> SortReport:
    """Reorder the first ``n`` slots of ``sequence`` under ``predicate``.

    Bubble sort over adjacent pairs: whenever ``predicate(current, next)``
    holds, the two slot values are exchanged. Pairs that compare equal are
    never exchanged, so records with equal keys keep the relative order they
    had before this call.

    ``early_exit`` stops once a full pass makes no swap; the resulting order
    is the same either way.
    """
    if n is None:
        n = len(sequence)
    if n > len(sequence):
        raise ValueError(f"cannot sort {n} slots; only {len(sequence)} records stored")

    report = SortReport()
    if n <= 1:
        return report

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            report.comparisons += 1
            if predicate(sequence[j], sequence[j + 1]):
                sequence.swap(j, j + 1)
                report.swaps += 1
                swapped = True
        report.passes += 1
        if early_exit and not swapped:
            break
    return report
