"""
Tests for the process record and the fixed-capacity sequence.
"""

import pytest

from ..backend.core import ProcessRecord, ProcessSequence
from ..backend.errors import CapacityError, InvalidRecordError, SchedulerError


def make_record(pid=1, name="P1", size_kb=10, burst_time=5, priority=1):
    return ProcessRecord(pid=pid, name=name, size_kb=size_kb, burst_time=burst_time, priority=priority)


class TestProcessRecord:
    """Field validation and basic behaviour."""

    def test_fields(self):
        record = make_record(pid=7, name="shell", size_kb=256, burst_time=30, priority=2)
        assert record.pid == 7
        assert record.name == "shell"
        assert record.size_kb == 256
        assert record.burst_time == 30
        assert record.priority == 2

    def test_as_dict(self):
        record = make_record()
        assert record.as_dict() == {"pid": 1, "name": "P1", "size_kb": 10, "burst_time": 5, "priority": 1}

    def test_records_are_immutable(self):
        record = make_record()
        with pytest.raises(AttributeError):
            record.priority = 9

    def test_zero_burst_and_size_allowed(self):
        record = make_record(size_kb=0, burst_time=0)
        assert record.burst_time == 0

    def test_negative_priority_allowed(self):
        assert make_record(priority=-3).priority == -3

    @pytest.mark.parametrize("kwargs", [
        {"pid": 0},
        {"pid": -1},
        {"name": ""},
        {"name": "   "},
        {"size_kb": -1},
        {"burst_time": -5},
        {"burst_time": 2.5},
        {"priority": "high"},
        {"pid": True},
    ])
    def test_invalid_fields_rejected(self, kwargs):
        with pytest.raises(InvalidRecordError):
            make_record(**kwargs)

    def test_invalid_record_is_value_error(self):
        with pytest.raises(ValueError):
            make_record(pid=-1)


class TestProcessSequence:
    """Append, iteration and slot exchange."""

    def test_append_in_order(self):
        seq = ProcessSequence(3)
        for pid in (1, 2, 3):
            seq.append(make_record(pid=pid, name=f"P{pid}"))
        assert [r.pid for r in seq] == [1, 2, 3]
        assert len(seq) == 3
        assert seq.is_full()

    def test_slot_count_is_declared_capacity(self):
        seq = ProcessSequence(4)
        assert seq.slot_count() == 4
        seq.append(make_record())
        assert seq.slot_count() == 4
        assert len(seq) == 1
        assert not seq.is_full()

    def test_append_beyond_capacity_fails_fast(self):
        seq = ProcessSequence(1)
        seq.append(make_record(pid=1))
        with pytest.raises(CapacityError):
            seq.append(make_record(pid=2))
        # Nothing was truncated or replaced
        assert [r.pid for r in seq] == [1]

    def test_capacity_error_is_scheduler_error(self):
        seq = ProcessSequence(0)
        with pytest.raises(SchedulerError):
            seq.append(make_record())

    def test_no_duplicate_pid_check(self):
        seq = ProcessSequence(2)
        seq.append(make_record(pid=1))
        seq.append(make_record(pid=1, name="again"))
        assert [r.name for r in seq] == ["P1", "again"]

    def test_iteration_is_lazy_and_restartable(self):
        seq = ProcessSequence(2)
        seq.append(make_record(pid=1))
        seq.append(make_record(pid=2))
        first = seq.for_each_in_order()
        assert next(first).pid == 1
        assert [r.pid for r in seq.for_each_in_order()] == [1, 2]
        assert [r.pid for r in seq.for_each_in_order()] == [1, 2]

    def test_swap_exchanges_values_not_slots(self):
        seq = ProcessSequence(3)
        for pid in (1, 2, 3):
            seq.append(make_record(pid=pid))
        seq.swap(0, 2)
        assert [r.pid for r in seq] == [3, 2, 1]
        assert seq.slot_count() == 3
        assert seq[0].pid == 3
