"""
Tests for the interactive console front-end.
"""

import pytest

from ..backend.manual_terminal import ManualTerminal


def scripted_input(answers):
    """Feed canned answers to the terminal; EOF once they run out."""
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


PROCESS_ANSWERS = [
    "3",
    "editor", "120", "50", "3",
    "compiler", "400", "20", "1",
    "backup", "900", "80", "2",
]


def test_full_menu_session(capsys):
    terminal = ManualTerminal(input_fn=scripted_input(PROCESS_ANSWERS + ["1", "2", "3", "4"]))
    terminal.prompt()
    out = capsys.readouterr().out

    assert "Enter details for 3 processes" in out
    assert "ORDER OF PROCESSES" in out
    assert "After PRIORITY Scheduling:" in out
    assert "After SJF Scheduling:" in out
    assert "After FCFS Scheduling:" in out
    assert "Exiting..." in out
    assert [p.pid for p in terminal.session.snapshot()] == [1, 2, 3]


def test_priority_listing_order(capsys):
    terminal = ManualTerminal(input_fn=scripted_input(PROCESS_ANSWERS + ["1", "4"]))
    terminal.prompt()
    out = capsys.readouterr().out
    after = out.split("After PRIORITY Scheduling:")[1]
    assert after.index("compiler") < after.index("backup") < after.index("editor")
    assert "1. compiler             | ID: 2 | Priority: 1 | Burst: 20 ms" in after


def test_invalid_choice_keeps_looping(capsys):
    terminal = ManualTerminal(input_fn=scripted_input(PROCESS_ANSWERS + ["9", "abc", "2", "4"]))
    terminal.prompt()
    out = capsys.readouterr().out
    assert out.count("Invalid choice! Please try again.") == 2
    assert [p.pid for p in terminal.session.snapshot()] == [2, 1, 3]


def test_bad_numbers_are_reprompted(capsys):
    answers = [
        "zero", "0", "1",
        "", "solo", "-4", "64", "x", "10", "1",
        "4",
    ]
    terminal = ManualTerminal(input_fn=scripted_input(answers))
    terminal.prompt()
    out = capsys.readouterr().out
    assert "Invalid numeric value" in out
    assert "Value must be at least 1" in out
    assert "Value must be at least 0" in out
    assert "Name cannot be empty" in out
    record = terminal.session.snapshot()[0]
    assert (record.name, record.size_kb, record.burst_time, record.priority) == ("solo", 64, 10, 1)


def test_eof_exits_cleanly(capsys):
    terminal = ManualTerminal(input_fn=scripted_input(PROCESS_ANSWERS + ["1"]))
    terminal.prompt()
    assert [p.pid for p in terminal.session.snapshot()] == [2, 3, 1]


def test_handle_choice_without_session(capsys):
    terminal = ManualTerminal(input_fn=scripted_input([]))
    assert terminal.session is None
    assert terminal.handle_choice("1") is True
    assert "No processes entered yet." in capsys.readouterr().out
    assert terminal.handle_choice("4") is False
    assert terminal.handle_choice("7") is True


@pytest.mark.parametrize("choice,expected", [("1", [2, 3, 1]), ("2", [2, 1, 3]), ("3", [1, 2, 3])])
def test_each_menu_entry(choice, expected, capsys):
    terminal = ManualTerminal(input_fn=scripted_input(PROCESS_ANSWERS + [choice, "4"]))
    terminal.prompt()
    assert [p.pid for p in terminal.session.snapshot()] == expected
