"""
Exceptions raised by the scheduling core.
"""


class SchedulerError(Exception):
    """Base class for every error the scheduling core reports."""


class CapacityError(SchedulerError):
    """More records were appended than the sequence was declared to hold."""


class InvalidPolicyError(SchedulerError):
    """A policy name did not match any registered ordering policy."""

    def __init__(self, name: str, available=None):
        self.name = name
        self.available = list(available or [])
        message = f"Unknown scheduling policy: {name!r}"
        if self.available:
            message += f" (expected one of: {', '.join(self.available)})"
        super().__init__(message)


class DegenerateInputError(SchedulerError, ValueError):
    """A session was requested with a non-positive process count."""


class InvalidRecordError(SchedulerError, ValueError):
    """A process record field is out of range."""


class IncompleteSessionError(SchedulerError):
    """A policy was applied before every declared slot was filled."""
