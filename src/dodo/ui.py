# src/dodo/ui.py

"""
Presentation: everything the user reads.

Receives already-validated data (tasks, outcomes, errors) and returns strings.
No I/O here; the console connector decides where the text goes.
"""

from __future__ import annotations

from collections.abc import Sequence

from .cli.commands import Action, CommandOutcome
from .errors import CorruptRecordError, DodoError, ErrorKind
from .tasks.task_models import Task, TaskKind

GREETING = "Hi there, I'm Dodo!\nHow may I help you today?"
FAREWELL = "Stop procrastinating. See you!"
LOADING_ERROR = "Loading error. Try again!"
INTERNAL_ERROR = "Oops, something went wrong on my side. Try again!"

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_DESCRIPTION: "Hmm, the description cannot be empty.",
    ErrorKind.UNRECOGNIZED_COMMAND: "Sorry, I don't know what that means. Type 'help' to see what I can do.",
    ErrorKind.MALFORMED_TASK_INPUT: (
        "That doesn't look right. Use 'deadline <desc> /by <YYYY-MM-DD>' "
        "or 'event <desc> /at <YYYY-MM-DD>', and keep '|' out of descriptions."
    ),
    ErrorKind.INVALID_DATE: "That date is not valid. Use the YYYY-MM-DD format, e.g. 2024-03-15.",
    ErrorKind.NOT_A_NUMBER: "Please give me the task number, e.g. 'done 2'.",
    ErrorKind.INDEX_OUT_OF_RANGE: "There is no task with that number. Check 'list' first.",
    ErrorKind.CORRUPT_RECORD: "Your task file looks damaged.",
    ErrorKind.IO_ERROR: "I couldn't read or write your task file.",
}


def format_task(task: Task) -> str:
    check = "X" if task.done else " "
    head = f"[{task.type_tag}][{check}] {task.description}"
    match task.kind:
        case TaskKind.DEADLINE:
            return f"{head} (by: {_human_date(task)})"
        case TaskKind.EVENT:
            return f"{head} (at: {_human_date(task)})"
        case _:
            return head


def _human_date(task: Task) -> str:
    assert task.date is not None
    return task.date.strftime("%b %d %Y")


def format_count(count: int) -> str:
    word = "task" if count <= 1 else "tasks"
    return f"Now you got {count} {word} in your list!"


def format_numbered(items: Sequence[tuple[int, Task]]) -> str:
    return "\n".join(f"{i}. {format_task(t)}" for i, t in items)


def added(task: Task, count: int) -> str:
    return "\n".join(["Gotcha. Added this to your list:", f"  {format_task(task)}", format_count(count)])


def removed(task: Task, count: int) -> str:
    return "\n".join(["Okay, I have removed this task for you:", f"  {format_task(task)}", format_count(count)])


def marked_done(task: Task) -> str:
    return "\n".join(["Good job! One off your chest!", f"  {format_task(task)}"])


def task_list(items: Sequence[tuple[int, Task]]) -> str:
    if not items:
        return "You currently don't have any task. Start listing now!"
    return "Stop procrastinating. Do it now!\n" + format_numbered(items)


def found(items: Sequence[tuple[int, Task]]) -> str:
    if not items:
        return "Sorry I can't find what you are looking for...."
    return "Here are the matching tasks in your list:\n" + format_numbered(items)


def error_message(error: DodoError) -> str:
    msg = ERROR_MESSAGES.get(error.kind, INTERNAL_ERROR)
    if isinstance(error, CorruptRecordError):
        return f"{msg} Line {error.line_number}: {error.line.strip()}"
    return msg


def render(outcome: CommandOutcome) -> str:
    match outcome.action:
        case Action.ADDED:
            assert outcome.task is not None
            return added(outcome.task, outcome.count)
        case Action.DELETED:
            assert outcome.task is not None
            return removed(outcome.task, outcome.count)
        case Action.DONE:
            assert outcome.task is not None
            return marked_done(outcome.task)
        case Action.LISTED:
            return task_list(outcome.items)
        case Action.FOUND:
            return found(outcome.items)
        case Action.HELP:
            return outcome.text
        case Action.EXIT:
            return FAREWELL
        case Action.FAILED:
            assert outcome.error is not None
            return error_message(outcome.error)
    return INTERNAL_ERROR
