# src/tkit/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.dates import pretty_date, try_parse_date, try_parse_input
from ..core.parser import Command, parse_line
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

_BY = re.compile(r"\s*/by\s*")
_FROM = re.compile(r"\s*/from\s*")
_TO = re.compile(r"\s*/to\s*")
_INDEX_SEP = re.compile(r"[,\s]+")
_INT_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)
_LINE_BREAK = re.compile(r"[\r\n]")

DATE_EXAMPLES = "Examples: 2019-12-02 1800  |  2019-12-02  |  2/12/2019 1800"


@dataclass(frozen=True, slots=True)
class CommandResult:
    reply: str
    mutated: bool = False


@dataclass(frozen=True, slots=True)
class Invalid:
    """A rejected argument; `message` is shown to the user as-is."""

    message: str


CommandHandler = Callable[[TaskList, str], CommandResult]


class CommandRegistry:
    """Maps command keywords to handlers (list, todo, deadline, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._usage: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, usage: str) -> None:
        self._handlers[command] = handler
        self._usage[command] = usage

    def handle(self, tasks: TaskList, line: str) -> CommandResult:
        """Parse `line` and run the matching handler against `tasks`."""
        parsed = parse_line(line)
        handler = self._handlers.get(parsed.command)
        if handler is None:
            return CommandResult(self.unknown_reply(line))
        logger.debug("Dispatching %s args=%r", parsed.command.value, parsed.remainder)
        return handler(tasks, parsed.remainder)

    def unknown_reply(self, line: str) -> str:
        return f'Unknown command: "{(line or "").strip()}".\nTry: {", ".join(self._usage.values())}.'


registry = CommandRegistry()


# ---- argument helpers ----


def _to_int(token: str) -> int | Invalid:
    """Plain ASCII decimal integers only ("1_0" and other int() extensions are rejected)."""
    if not _INT_TOKEN.fullmatch(token):
        return Invalid(f'Task number must be of type int. Received: "{token}"')
    return int(token)


def check_description(description: str) -> Invalid | None:
    # one task per line in the data file
    if _LINE_BREAK.search(description):
        return Invalid("Descriptions cannot contain line breaks.")
    return None


def parse_index(raw: str, size: int) -> int | Invalid:
    """1-based user number -> zero-based index, or Invalid."""
    token = raw.strip()
    one_based = _to_int(token)
    if isinstance(one_based, Invalid):
        return one_based
    if not 1 <= one_based <= size:
        return Invalid(f"Invalid task number: {one_based}. List has {size} task(s).")
    return one_based - 1


def parse_indices(raw: str, size: int) -> list[int] | Invalid:
    """
    One or more 1-based numbers separated by commas and/or whitespace.

    Returns zero-based indices in the order given, or Invalid naming every
    out-of-range number so the caller can refuse the whole request.
    """
    tokens = [t for t in _INDEX_SEP.split(raw.strip()) if t]
    if not tokens:
        return Invalid("Delete requires at least one index. Use: delete <N[, M, ...]>")

    numbers: list[int] = []
    for tok in tokens:
        value = _to_int(tok)
        if isinstance(value, Invalid):
            return value
        numbers.append(value)

    bad = sorted({n for n in numbers if not 1 <= n <= size})
    if bad:
        listed = ", ".join(str(n) for n in bad)
        return Invalid(f"These task number(s) do not exist: {listed}. No tasks were deleted.")
    return [n - 1 for n in numbers]


def _numbered(tasks: list[Task] | tuple[Task, ...]) -> str:
    return "\n".join(f"{i}. {t}" for i, t in enumerate(tasks, start=1))


def _added(task: Task, total: int) -> CommandResult:
    return CommandResult(
        f"Added:\n  {task}\nNow you have {total} task(s) in the list.", mutated=True
    )


# ---- handlers ----


def cmd_bye(tasks: TaskList, arg: str) -> CommandResult:
    return CommandResult("Goodbye!")


def cmd_list(tasks: TaskList, arg: str) -> CommandResult:
    if tasks.is_empty():
        return CommandResult("There are no entries yet.")
    return CommandResult("Here are the tasks in your list:\n" + _numbered(tasks.view()))


def cmd_todo(tasks: TaskList, arg: str) -> CommandResult:
    if bad := check_description(arg):
        return CommandResult(bad.message)
    description = arg.strip()
    if not description:
        return CommandResult("Todo requires a description.\nUse: todo <DESCRIPTION>")
    task = Task.todo(description)
    tasks.add(task)
    return _added(task, tasks.size())


def cmd_deadline(tasks: TaskList, arg: str) -> CommandResult:
    if bad := check_description(arg):
        return CommandResult(bad.message)
    parts = _BY.split(arg.strip(), maxsplit=1)
    if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
        return CommandResult(
            "Wrong deadline input format.\n"
            "Use: deadline <TASK> /by <DATE_OR_DATE_TIME>\n" + DATE_EXAMPLES
        )
    description, when = parts[0].strip(), parts[1].strip()
    due_at = try_parse_input(when)
    if due_at is None:
        return CommandResult(
            f'Unrecognized date/time: "{when}"\nUse: deadline <TASK> /by <DATE_OR_DATE_TIME>\n'
            + DATE_EXAMPLES
        )
    task = Task.deadline(description, due_at)
    tasks.add(task)
    return _added(task, tasks.size())


def cmd_event(tasks: TaskList, arg: str) -> CommandResult:
    if bad := check_description(arg):
        return CommandResult(bad.message)
    usage = "Wrong event input format.\nUse: event <EVENT> /from <START> /to <END>"
    first = _FROM.split(arg.strip(), maxsplit=1)
    if len(first) < 2 or not first[0].strip():
        return CommandResult(usage)
    second = _TO.split(first[1], maxsplit=1)
    if len(second) < 2 or not second[0].strip() or not second[1].strip():
        return CommandResult(usage)

    start = try_parse_input(second[0])
    end = try_parse_input(second[1])
    if start is None or end is None:
        return CommandResult(
            "Unrecognized date/time.\nUse: event <EVENT> /from <START> /to <END>\n" + DATE_EXAMPLES
        )
    task = Task.event(first[0].strip(), start, end)
    tasks.add(task)
    return _added(task, tasks.size())


def cmd_mark(tasks: TaskList, arg: str) -> CommandResult:
    if not arg.strip():
        return CommandResult("Mark requires a task number.\nUse: mark <TASK_NUMBER>")
    idx = parse_index(arg, tasks.size())
    if isinstance(idx, Invalid):
        return CommandResult(idx.message)
    task = tasks.mark(idx)
    return CommandResult(f"Marked as done:\n  {task}", mutated=True)


def cmd_unmark(tasks: TaskList, arg: str) -> CommandResult:
    if not arg.strip():
        return CommandResult("Unmark requires a task number.\nUse: unmark <TASK_NUMBER>")
    idx = parse_index(arg, tasks.size())
    if isinstance(idx, Invalid):
        return CommandResult(idx.message)
    task = tasks.unmark(idx)
    return CommandResult(f"Marked as not done:\n  {task}", mutated=True)


def cmd_delete(tasks: TaskList, arg: str) -> CommandResult:
    if not arg.strip():
        return CommandResult(
            "Delete requires an index.\nUse: delete <TASK_NUMBER> or delete N, M, ..."
        )
    indices = parse_indices(arg, tasks.size())
    if isinstance(indices, Invalid):
        return CommandResult(indices.message)

    removed = tasks.remove_many(indices)
    if len(removed) == 1:
        return CommandResult(
            f"Removed:\n  {removed[0]}\nNow you have {tasks.size()} task(s).", mutated=True
        )
    lines = [f"Removed {len(removed)} task(s):"]
    lines.extend(f"  {t}" for t in removed)
    lines.append(f"Now you have {tasks.size()} task(s).")
    return CommandResult("\n".join(lines), mutated=True)


def cmd_on(tasks: TaskList, arg: str) -> CommandResult:
    day = try_parse_date(arg)
    if day is None:
        return CommandResult(
            "Unrecognized date.\nUse: on <DATE or DATE TIME>\n"
            "Examples: on 2019-12-02 | on 2/12/2019"
        )
    hits = tasks.on_date(day)
    if not hits:
        return CommandResult(f"No deadlines/events on {pretty_date(day)}.")
    return CommandResult(f"Deadlines/events on {pretty_date(day)}:\n" + _numbered(hits))


def cmd_find(tasks: TaskList, arg: str) -> CommandResult:
    keyword = arg.strip()
    if not keyword:
        return CommandResult("Find requires a keyword.\nUse: find <KEYWORD>")
    hits = tasks.find(keyword)
    if not hits:
        return CommandResult("No matching tasks found.")
    return CommandResult("Matching tasks:\n" + _numbered(hits))


registry.register(Command.LIST, cmd_list, usage="list")
registry.register(Command.TODO, cmd_todo, usage="todo <DESCRIPTION>")
registry.register(Command.DEADLINE, cmd_deadline, usage="deadline <TASK> /by <DATE>")
registry.register(Command.EVENT, cmd_event, usage="event <EVENT> /from <START> /to <END>")
registry.register(Command.MARK, cmd_mark, usage="mark N")
registry.register(Command.UNMARK, cmd_unmark, usage="unmark N")
registry.register(Command.DELETE, cmd_delete, usage="delete N[, M, ...]")
registry.register(Command.ON, cmd_on, usage="on <DATE>")
registry.register(Command.FIND, cmd_find, usage="find <KEYWORD>")
registry.register(Command.BYE, cmd_bye, usage="bye")
