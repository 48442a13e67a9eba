"""Task data model for the Chip CLI application."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .errors import EmptyDescriptionError, InvalidDateFormatError
from .utils.datetime import format_display, format_for_file, format_time, parse_task_datetime


FIELD_SEPARATOR = " | "


class TaskKind(Enum):
    """Closed set of task variants, valued by their one-letter type tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def command(self) -> str:
        """The command word that creates this kind of task."""
        return self.name.lower()


def _parse_date(value: str) -> datetime:
    try:
        return parse_task_datetime(value)
    except ValueError:
        raise InvalidDateFormatError(value) from None


@dataclass
class Task:
    """A tracked unit of work.

    ``kind`` selects the variant. Deadlines carry ``by``; events carry
    ``start`` and ``end`` (no ordering between them is enforced). The
    description cannot be reassigned once the task exists, and ``is_done``
    should only change through ``mark_as_done`` / ``mark_as_not_done``.
    """

    kind: TaskKind
    description: str
    is_done: bool = False
    by: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise EmptyDescriptionError(self.kind.command)
        if "\n" in self.description or "\r" in self.description:
            raise ValueError("A task description must fit on one line")
        if self.kind is TaskKind.DEADLINE and self.by is None:
            raise ValueError("A deadline needs a 'by' date-time")
        if self.kind is TaskKind.EVENT and (self.start is None or self.end is None):
            raise ValueError("An event needs both 'start' and 'end' date-times")

    def __setattr__(self, name, value):
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("Task description cannot be changed after construction")
        super().__setattr__(name, value)

    @classmethod
    def todo(cls, description: str) -> "Task":
        """Create a plain todo."""
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        """Create a deadline from a ``yyyy-MM-dd HHmm`` string.

        Raises:
            InvalidDateFormatError: If ``by`` does not match the pattern.
        """
        return cls(TaskKind.DEADLINE, description, by=_parse_date(by))

    @classmethod
    def event(cls, description: str, start: str, end: str) -> "Task":
        """Create an event from two ``yyyy-MM-dd HHmm`` strings.

        Raises:
            InvalidDateFormatError: If either date-time does not match the pattern.
        """
        return cls(TaskKind.EVENT, description, start=_parse_date(start), end=_parse_date(end))

    def mark_as_done(self):
        """Mark the task as completed."""
        self.is_done = True

    def mark_as_not_done(self):
        """Reopen the task."""
        self.is_done = False

    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def to_display_string(self) -> str:
        """Render the task for the user, e.g. ``[D][ ] Submit report (by: Dec 31 2024, 6:00PM)``.

        An event shows its end as a time only.
        """
        base = f"[{self.kind.value}][{self.status_icon()}] {self.description}"
        if self.kind is TaskKind.TODO:
            return base
        if self.kind is TaskKind.DEADLINE:
            return f"{base} (by: {format_display(self.by)})"
        if self.kind is TaskKind.EVENT:
            return f"{base} (from: {format_display(self.start)} to: {format_time(self.end)})"
        raise ValueError(f"Unhandled task kind: {self.kind}")

    def to_file_record(self) -> str:
        """Render the task as one line of the data file."""
        fields = [self.kind.value, "1" if self.is_done else "0", self.description]
        if self.kind is TaskKind.DEADLINE:
            fields.append(format_for_file(self.by))
        elif self.kind is TaskKind.EVENT:
            fields.extend([format_for_file(self.start), format_for_file(self.end)])
        elif self.kind is not TaskKind.TODO:
            raise ValueError(f"Unhandled task kind: {self.kind}")
        return FIELD_SEPARATOR.join(fields)

    def __str__(self) -> str:
        return self.to_display_string()
