"""Storage layer for Chip CLI using a line-oriented text file.

Each task is stored on its own line as ``" | "``-separated fields::

    T | 0 | Read a book
    D | 1 | Submit report | 2024-12-31 1800
    E | 0 | Team meeting | 2024-12-25 1400 | 2024-12-25 1600
"""

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import ConfigModel
from .errors import ChipError, CorruptStorageError, StorageWriteError
from .task import FIELD_SEPARATOR, Task, TaskKind
from .task_list import TaskList

logger = logging.getLogger(__name__)


class TaskFileFormat:
    """Handles conversion between Task objects and data file lines."""

    @staticmethod
    def to_line(task: Task) -> str:
        return task.to_file_record()

    @staticmethod
    def from_line(line: str) -> Task:
        """Parse one data file line back into a Task.

        Type tag and status are split off the left and date fields off the
        right, so a description may itself contain ``" | "``. For the same
        reason a todo line never has too many fields: ``T | 0 | a | b`` is a
        todo described as ``a | b``.

        Raises:
            ValueError: If the line is malformed (unknown tag, bad status,
                missing fields or a bad date)
            ChipError: If the description is empty
        """
        parts = line.split(FIELD_SEPARATOR, 2)
        if len(parts) != 3:
            raise ValueError(f"expected at least 3 fields, found {len(parts)}")
        tag, status, rest = parts

        try:
            kind = TaskKind(tag)
        except ValueError:
            raise ValueError(f"unknown task type '{tag}'") from None

        if status not in ("0", "1"):
            raise ValueError(f"invalid status '{status}'")

        if kind is TaskKind.TODO:
            task = Task.todo(rest)
        elif kind is TaskKind.DEADLINE:
            fields = rest.rsplit(FIELD_SEPARATOR, 1)
            if len(fields) != 2:
                raise ValueError("deadline is missing its date-time")
            task = Task.deadline(fields[0], fields[1])
        elif kind is TaskKind.EVENT:
            fields = rest.rsplit(FIELD_SEPARATOR, 2)
            if len(fields) != 3:
                raise ValueError("event is missing its start or end date-time")
            task = Task.event(fields[0], fields[1], fields[2])
        else:
            raise ValueError(f"Unhandled task kind: {kind}")

        if status == "1":
            task.mark_as_done()
        return task


class Storage:
    """File-based storage for the task list."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path).expanduser()

    @classmethod
    def from_config(cls, config: ConfigModel) -> "Storage":
        return cls(config.data_file)

    def load(self) -> TaskList:
        """Load the task list from disk.

        A missing file yields an empty list. Any malformed line fails the
        whole load; earlier valid lines are not kept.

        Raises:
            CorruptStorageError: If the file exists but cannot be fully parsed
        """
        if not self.file_path.exists():
            logger.debug(f"No data file at {self.file_path}, starting empty")
            return TaskList()

        tasks = TaskList()
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for line_number, raw_line in enumerate(f, start=1):
                    line = raw_line.rstrip("\n")
                    if not line.strip():
                        continue
                    try:
                        tasks.add(TaskFileFormat.from_line(line))
                    except (ValueError, ChipError) as e:
                        logger.warning(f"Corrupt record in {self.file_path} line {line_number}: {e}")
                        raise CorruptStorageError(
                            "Error loading tasks from file. The file might be corrupted.",
                            line_number,
                        ) from e
        except UnicodeDecodeError as e:
            raise CorruptStorageError(
                "Error loading tasks from file. The file is not valid UTF-8."
            ) from e
        except OSError as e:
            raise CorruptStorageError(f"Error reading tasks from file: {e}") from e

        logger.debug(f"Loaded {tasks.size()} tasks from {self.file_path}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the whole data file, one line per task in list order.

        Raises:
            StorageWriteError: If the directory or file cannot be written
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8", newline="\n") as f:
                count = 0
                for task in tasks:
                    f.write(TaskFileFormat.to_line(task) + "\n")
                    count += 1
        except OSError as e:
            logger.error(f"Error saving tasks to {self.file_path}: {e}")
            raise StorageWriteError(str(self.file_path), e.strerror or str(e)) from e

        logger.debug(f"Saved {count} tasks to {self.file_path}")

    def backup(self, backup_path: Optional[Path] = None) -> Optional[Path]:
        """Copy the data file aside, e.g. before a corrupt file gets overwritten.

        Returns:
            The backup path, or None if there was nothing to back up or the
            copy failed
        """
        if not self.file_path.exists():
            return None

        if backup_path is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            backup_path = self.file_path.with_name(f"{self.file_path.name}.{timestamp}.bak")

        try:
            shutil.copy2(self.file_path, backup_path)
        except OSError as e:
            logger.warning(f"Error backing up {self.file_path}: {e}")
            return None

        logger.info(f"Backed up {self.file_path} to {backup_path}")
        return backup_path
