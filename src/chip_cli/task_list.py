"""Ordered task container.

Insertion order is both the display order and the storage order. Users see
1-based task numbers; every method here takes 0-based indices.
"""

from typing import Iterable, Iterator, List, Optional

from .errors import IndexOutOfRangeError
from .task import Task


class TaskList:
    """Ordered, index-addressable list of tasks."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks is not None else []

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self._check_index(index)
        return self._tasks.pop(index)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def size(self) -> int:
        return len(self._tasks)

    def find_by_keyword(self, keyword: str) -> List[Task]:
        """Return tasks whose display string contains ``keyword``, ignoring case.

        The match runs against the whole display string (type tag, status and
        dates included), and the result keeps the list order. An empty keyword
        matches every task.
        """
        needle = keyword.lower()
        return [task for task in self._tasks if needle in task.to_display_string().lower()]

    def sort_by_description(self) -> None:
        """Stable, case-sensitive sort on the raw description, in place."""
        self._tasks.sort(key=lambda task: task.description)

    @staticmethod
    def format_entry(number: int, task: Task) -> str:
        """Format one numbered line of a listing, e.g. `` 1.[T][ ] Read a book``."""
        return f" {number}.{task.to_display_string()}"

    def _check_index(self, index: int) -> None:
        # Python's negative indexing must not leak through to users
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
