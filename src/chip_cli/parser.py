"""Command parsing and dispatch for Chip CLI.

A command line is split on its first space into an action word and a
remainder. The action word picks a ``Command``; the matching handler
validates the remainder, updates the task list, persists it and reports back
through the ``Ui`` it was given.
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from fuzzywuzzy import fuzz, process

from .errors import (
    EmptyDescriptionError,
    InvalidTaskNumberError,
    MissingArgumentError,
    MissingDeadlineTimeError,
    MissingEventEndError,
    MissingEventStartError,
    MissingKeywordError,
    UnknownCommandError,
)
from .storage import Storage
from .task import Task
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)

DEADLINE_SEPARATOR = " /by "
EVENT_FROM_SEPARATOR = " /from "
EVENT_TO_SEPARATOR = " /to "

TASK_NUMBER_RE = re.compile(r"^[+-]?\d+$")
LINE_BREAK_RE = re.compile(r"[\r\n]+")

MESSAGE_TASK_MARKED = "Nice! I've marked this task as done:"
MESSAGE_TASK_UNMARKED = "OK, I've marked this task as not done yet:"
MESSAGE_TASK_DELETED = "Noted. I've removed this task:"
MESSAGE_TASK_ADDED = "Got it. I've added this task:"
MESSAGE_TASK_COUNT = "Now you have {count} tasks in the list."
MESSAGE_LIST_HEADER = "Here are the tasks in your list:"
MESSAGE_FIND_HEADER = "Here are the matching tasks in your list:"
MESSAGE_NO_MATCHES = "No matching tasks found."
MESSAGE_TASKS_SORTED = "Tasks have been sorted alphabetically by description."
MESSAGE_HELP_HEADER = "Here are the commands I understand:"

HELP_LINES = [
    "  todo <description>",
    "  deadline <description> /by <yyyy-MM-dd HHmm>",
    "  event <description> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>",
    "  list",
    "  mark <number>",
    "  unmark <number>",
    "  delete <number>",
    "  find <keyword>",
    "  sort",
    "  help",
    "  bye",
]


class Command(Enum):
    """The command vocabulary."""
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    SORT = "sort"
    HELP = "help"
    BYE = "bye"

    @classmethod
    def from_word(cls, word: str, suggest: bool = True) -> "Command":
        """Match an action word case-insensitively.

        Raises:
            UnknownCommandError: If the word is not in the vocabulary, with
                close matches attached when ``suggest`` is set
        """
        try:
            return cls(word.lower())
        except ValueError:
            suggestions = suggest_commands(word) if suggest else []
            raise UnknownCommandError(word, suggestions) from None


def suggest_commands(word: str, limit: int = 3) -> List[str]:
    """Return vocabulary words that look like a mistyped ``word``."""
    if not word.strip():
        return []
    vocabulary = [command.value for command in Command]
    matches = process.extractBests(
        word.lower(), vocabulary, scorer=fuzz.ratio, score_cutoff=70, limit=limit
    )
    return [match for match, _score in matches]


def split_command(full_command: str) -> Tuple[str, Optional[str]]:
    """Split a command line into ``(action word, remainder)``.

    Surrounding whitespace is dropped first. The remainder is None when there
    is no space or nothing but whitespace follows the action word.
    """
    parts = full_command.strip().split(" ", 1)
    action = parts[0]
    remainder = parts[1] if len(parts) > 1 else None
    if remainder is not None and not remainder.strip():
        remainder = None
    return action, remainder


def parse_task_number(text: str) -> int:
    """Convert a 1-based task number to a 0-based index.

    The result may be negative (for input ``0`` or below); range checking is
    left to the task list.

    Raises:
        InvalidTaskNumberError: If the text is not an integer
    """
    token = text.strip()
    if not TASK_NUMBER_RE.match(token):
        raise InvalidTaskNumberError(text)
    return int(token) - 1


class CommandDispatcher:
    """Executes command lines against a task list and its storage."""

    def __init__(self, tasks: TaskList, storage: Storage, suggest_commands: bool = True):
        self.tasks = tasks
        self.storage = storage
        self.suggest_commands = suggest_commands
        self._handlers: Dict[Command, Callable[[Optional[str], Ui], None]] = {
            Command.LIST: self._list,
            Command.MARK: self._mark,
            Command.UNMARK: self._unmark,
            Command.DELETE: self._delete,
            Command.TODO: self._add_todo,
            Command.DEADLINE: self._add_deadline,
            Command.EVENT: self._add_event,
            Command.FIND: self._find,
            Command.SORT: self._sort,
            Command.HELP: self._help,
            Command.BYE: self._bye,
        }
        missing = set(Command) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for commands: {sorted(c.value for c in missing)}")

    def execute(self, full_command: str, ui: Ui) -> Command:
        """Run one command line, writing its output to ``ui``.

        Returns:
            The command that ran, so callers can stop on ``Command.BYE``

        Raises:
            ChipError: For any invalid input or storage failure
        """
        action, remainder = split_command(full_command)
        command = Command.from_word(action, suggest=self.suggest_commands)
        logger.debug(f"Dispatching {command.value} with remainder {remainder!r}")
        self._handlers[command](remainder, ui)
        return command

    def _list(self, remainder: Optional[str], ui: Ui) -> None:
        ui.show_message(MESSAGE_LIST_HEADER)
        for number, task in enumerate(self.tasks, start=1):
            ui.show_message(TaskList.format_entry(number, task))

    def _mark(self, remainder: Optional[str], ui: Ui) -> None:
        task = self._resolve_task(remainder, Command.MARK)
        task.mark_as_done()
        self._show_task_result(ui, MESSAGE_TASK_MARKED, task)
        self._persist()

    def _unmark(self, remainder: Optional[str], ui: Ui) -> None:
        task = self._resolve_task(remainder, Command.UNMARK)
        task.mark_as_not_done()
        self._show_task_result(ui, MESSAGE_TASK_UNMARKED, task)
        self._persist()

    def _delete(self, remainder: Optional[str], ui: Ui) -> None:
        if remainder is None:
            raise MissingArgumentError(Command.DELETE.value)
        removed = self.tasks.delete(parse_task_number(remainder))
        self._show_task_result(ui, MESSAGE_TASK_DELETED, removed)
        ui.show_message(MESSAGE_TASK_COUNT.format(count=self.tasks.size()))
        self._persist()

    def _add_todo(self, remainder: Optional[str], ui: Ui) -> None:
        if remainder is None:
            raise EmptyDescriptionError(Command.TODO.value)
        self._add(Task.todo(self._description(remainder, Command.TODO)), ui)

    def _add_deadline(self, remainder: Optional[str], ui: Ui) -> None:
        if remainder is None or remainder.startswith(DEADLINE_SEPARATOR.lstrip()):
            raise EmptyDescriptionError(Command.DEADLINE.value)
        if DEADLINE_SEPARATOR not in remainder:
            raise MissingDeadlineTimeError()
        description, by = remainder.split(DEADLINE_SEPARATOR, 1)
        self._add(Task.deadline(self._description(description, Command.DEADLINE), by), ui)

    def _add_event(self, remainder: Optional[str], ui: Ui) -> None:
        if remainder is None or remainder.startswith(EVENT_FROM_SEPARATOR.lstrip()):
            raise EmptyDescriptionError(Command.EVENT.value)
        if EVENT_FROM_SEPARATOR not in remainder:
            raise MissingEventStartError()
        description, times = remainder.split(EVENT_FROM_SEPARATOR, 1)
        if EVENT_TO_SEPARATOR not in times:
            raise MissingEventEndError()
        start, end = times.split(EVENT_TO_SEPARATOR, 1)
        self._add(Task.event(self._description(description, Command.EVENT), start, end), ui)

    def _find(self, remainder: Optional[str], ui: Ui) -> None:
        if remainder is None:
            raise MissingKeywordError()
        matches = self.tasks.find_by_keyword(remainder)
        if not matches:
            ui.show_message(MESSAGE_NO_MATCHES)
            return
        ui.show_message(MESSAGE_FIND_HEADER)
        for number, task in enumerate(matches, start=1):
            ui.show_message(TaskList.format_entry(number, task))

    def _sort(self, remainder: Optional[str], ui: Ui) -> None:
        self.tasks.sort_by_description()
        ui.show_message(MESSAGE_TASKS_SORTED)
        self._persist()

    def _help(self, remainder: Optional[str], ui: Ui) -> None:
        ui.show_message(MESSAGE_HELP_HEADER)
        for line in HELP_LINES:
            ui.show_message(line)

    def _bye(self, remainder: Optional[str], ui: Ui) -> None:
        # Termination is the caller's job; nothing to persist
        pass

    def _resolve_task(self, remainder: Optional[str], command: Command) -> Task:
        if remainder is None:
            raise MissingArgumentError(command.value)
        return self.tasks.get(parse_task_number(remainder))

    @staticmethod
    def _description(text: str, command: Command) -> str:
        description = LINE_BREAK_RE.sub(" ", text).strip()
        if not description:
            raise EmptyDescriptionError(command.value)
        return description

    def _add(self, task: Task, ui: Ui) -> None:
        self.tasks.add(task)
        ui.show_message(MESSAGE_TASK_ADDED)
        ui.show_message(f"   {task}")
        ui.show_message(MESSAGE_TASK_COUNT.format(count=self.tasks.size()))
        self._persist()

    @staticmethod
    def _show_task_result(ui: Ui, message: str, task: Task) -> None:
        ui.show_message(message)
        ui.show_message(f"   {task}")

    def _persist(self) -> None:
        self.storage.save(self.tasks)
