# tests/test_commands.py

from __future__ import annotations

import pytest

from tkit.cli.commands import (
    CommandRegistry,
    CommandResult,
    Invalid,
    check_description,
    cmd_deadline,
    cmd_event,
    cmd_todo,
    parse_index,
    parse_indices,
)
from tkit.core.parser import Command, SplitCommand, parse_line
from tkit.tasks.task_list import TaskList


def test_parse_line_splits_keyword_and_remainder() -> None:
    assert parse_line("  deadline   return book /by 2/12/2019 ") == SplitCommand(
        Command.DEADLINE, "return book /by 2/12/2019"
    )
    assert parse_line("LIST") == SplitCommand(Command.LIST, "")
    assert parse_line("") == SplitCommand(Command.UNKNOWN, "")
    assert parse_line(None).command is Command.UNKNOWN
    assert parse_line("hello world").command is Command.UNKNOWN


def test_parse_index() -> None:
    assert parse_index(" 2 ", 3) == 1
    assert parse_index("0", 3) == Invalid("Invalid task number: 0. List has 3 task(s).")
    assert isinstance(parse_index("4", 3), Invalid)
    assert isinstance(parse_index("two", 3), Invalid)


def test_parse_indices() -> None:
    assert parse_indices("3, 1  2", 3) == [2, 0, 1]
    assert parse_indices("1,,2", 3) == [0, 1]
    bad = parse_indices("5, 1, 4", 3)
    assert isinstance(bad, Invalid)
    assert "4, 5" in bad.message
    assert isinstance(parse_indices(" , ", 3), Invalid)


def test_registry_routes_and_reports_unknown() -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def h(tasks: TaskList, arg: str) -> CommandResult:
        called.append(arg)
        return CommandResult("ok", mutated=True)

    reg.register(Command.TODO, h, usage="todo <X>")

    result = reg.handle(TaskList(), "todo  x y ")
    assert result == CommandResult("ok", mutated=True)
    assert called == ["x y"]

    unknown = reg.handle(TaskList(), "list")
    assert not unknown.mutated
    assert unknown.reply == 'Unknown command: "list".\nTry: todo <X>.'


@pytest.mark.parametrize("token", ["1_0", "١", "0x1", "1.0", "+ 1", "1e1"])
def test_task_numbers_must_be_plain_decimal(token: str) -> None:
    expected = Invalid(f'Task number must be of type int. Received: "{token.strip()}"')
    assert parse_index(token, 10) == expected
    assert isinstance(parse_indices(token, 10), Invalid)


def test_signed_numbers_are_range_checked() -> None:
    assert parse_index("+3", 10) == 2
    assert parse_index("-1", 10) == Invalid("Invalid task number: -1. List has 10 task(s).")
    assert isinstance(parse_indices("1, 1_0", 10), Invalid)


def test_check_description() -> None:
    assert check_description("read book") is None
    assert check_description("a\nb") == Invalid("Descriptions cannot contain line breaks.")
    assert check_description("a\rb") == Invalid("Descriptions cannot contain line breaks.")


@pytest.mark.parametrize(
    ("handler", "arg"),
    [
        (cmd_todo, "read\nbook"),
        (cmd_deadline, "return\rbook /by 2019-12-02"),
        (cmd_event, "meet /from 2019-12-02\nT | 1 | injected /to 2019-12-03"),
    ],
)
def test_add_commands_reject_line_breaks(handler, arg: str) -> None:
    tasks = TaskList()
    result = handler(tasks, arg)
    assert result == CommandResult("Descriptions cannot contain line breaks.")
    assert tasks.is_empty()
