# src/dodo/cli/commands.py

"""
Command keywords -> handlers.

Handlers validate with the task parser, write the task file first and only then
mutate the in-memory store, so a failed write leaves the store untouched.
Every DodoError becomes a failed CommandOutcome; nothing here prints.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import StrEnum

from ..core.state import AppState
from ..errors import DodoError, ErrorKind
from ..tasks.task_models import Task, TaskKind
from ..tasks.task_parser import parse_add, parse_index, split_command

logger = logging.getLogger(__name__)


class Action(StrEnum):
    ADDED = "added"
    LISTED = "listed"
    FOUND = "found"
    DONE = "done"
    DELETED = "deleted"
    HELP = "help"
    EXIT = "exit"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class CommandOutcome:
    """What a command did, for the presentation layer to render."""

    action: Action
    task: Task | None = None
    items: list[tuple[int, Task]] = field(default_factory=list)
    count: int = 0
    text: str = ""
    error: DodoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: DodoError) -> CommandOutcome:
        return cls(action=Action.FAILED, error=error)


CommandHandler = Callable[[AppState, str], CommandOutcome]


class CommandRegistry:
    """Keyword registry used by the console connector (todo, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> CommandOutcome | None:
        """
        Handle one input line such as "deadline report /by 2024-03-15".
        Returns None for a blank line.
        """
        keyword, args = split_command(line)
        if not keyword:
            return None

        handler = self._handlers.get(keyword)
        try:
            if handler is None:
                raise DodoError(ErrorKind.UNRECOGNIZED_COMMAND, keyword)
            return handler(state, args)
        except DodoError as e:
            logger.debug("Command %r failed: %s", keyword, e)
            return CommandOutcome.failure(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _add(state: AppState, kind: TaskKind, args: str) -> CommandOutcome:
    task = parse_add(kind, args)
    state.storage.append_task(task)
    state.store.add(task)
    logger.info("Added %s task (size=%d)", kind.name.lower(), state.store.size())
    return CommandOutcome(action=Action.ADDED, task=task, count=state.store.size())


def _required(args: str) -> str:
    if not args.strip():
        raise DodoError(ErrorKind.EMPTY_DESCRIPTION)
    return args


def cmd_todo(state: AppState, args: str) -> CommandOutcome:
    return _add(state, TaskKind.TODO, args)


def cmd_deadline(state: AppState, args: str) -> CommandOutcome:
    return _add(state, TaskKind.DEADLINE, args)


def cmd_event(state: AppState, args: str) -> CommandOutcome:
    return _add(state, TaskKind.EVENT, args)


def cmd_list(state: AppState, args: str) -> CommandOutcome:
    items = list(enumerate(state.store.all(), start=1))
    return CommandOutcome(action=Action.LISTED, items=items, count=len(items))


def cmd_find(state: AppState, args: str) -> CommandOutcome:
    items = state.store.find(_required(args))
    return CommandOutcome(action=Action.FOUND, items=items, count=len(items))


def cmd_done(state: AppState, args: str) -> CommandOutcome:
    index = parse_index(_required(args), state.store.size())

    pending = state.store.all()
    pending[index - 1] = replace(pending[index - 1], done=True)
    state.storage.rewrite_all(pending)

    task = state.store.mark_done_at(index)
    logger.info("Marked task %d as done", index)
    return CommandOutcome(action=Action.DONE, task=task, count=state.store.size())


def cmd_delete(state: AppState, args: str) -> CommandOutcome:
    index = parse_index(_required(args), state.store.size())

    pending = state.store.all()
    del pending[index - 1]
    state.storage.rewrite_all(pending)

    task = state.store.delete_at(index)
    logger.info("Deleted task %d (size=%d)", index, state.store.size())
    return CommandOutcome(action=Action.DELETED, task=task, count=state.store.size())


def cmd_help(state: AppState, args: str) -> CommandOutcome:
    return CommandOutcome(action=Action.HELP, text=registry.build_help())


def cmd_bye(state: AppState, args: str) -> CommandOutcome:
    return CommandOutcome(action=Action.EXIT)


registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <YYYY-MM-DD>."
)
registry.register("event", cmd_event, help_text="Add an event: event <description> /at <YYYY-MM-DD>.")
registry.register("list", cmd_list, help_text="Show all tasks with their numbers.", aliases=["ls"])
registry.register("find", cmd_find, help_text="Search descriptions: find <keyword>.")
registry.register("done", cmd_done, help_text="Mark a task as done: done <number>.")
registry.register("delete", cmd_delete, help_text="Remove a task: delete <number>.", aliases=["rm"])
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("bye", cmd_bye, help_text="Save and quit.", aliases=["exit", "quit"])
