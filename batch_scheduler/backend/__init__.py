"""
Backend for the batch scheduler: process store, ordering policies and sessions.
"""

from .core import ProcessRecord, ProcessSequence
from .errors import (
    SchedulerError,
    CapacityError,
    InvalidPolicyError,
    DegenerateInputError,
    InvalidRecordError,
    IncompleteSessionError,
)
from .schedulers import (
    OrderingPolicy,
    SortReport,
    sort_by,
    priority_order,
    shortest_job_first,
    first_come_first_serve,
    get_policy,
    PolicyRegistry,
    BUILTIN_POLICIES,
    available_policies,
)
from .session import SchedulingSession, SessionConfig, create_session

__all__ = [
    'ProcessRecord', 'ProcessSequence',
    'SchedulerError', 'CapacityError', 'InvalidPolicyError', 'DegenerateInputError',
    'InvalidRecordError', 'IncompleteSessionError',
    'OrderingPolicy', 'SortReport', 'sort_by',
    'priority_order', 'shortest_job_first', 'first_come_first_serve',
    'get_policy', 'available_policies', 'PolicyRegistry', 'BUILTIN_POLICIES',
    'SchedulingSession', 'SessionConfig', 'create_session',
]
