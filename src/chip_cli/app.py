"""Chip session: one task list, its storage and the two ways of driving it."""

import logging
from typing import Optional

from .config import ConfigModel
from .errors import ChipError, CorruptStorageError
from .parser import Command, CommandDispatcher, split_command
from .storage import Storage
from .task_list import TaskList
from .ui import ERROR_PREFIX, GOODBYE_MESSAGE, ConsoleUi, ResponseCollector, Ui

logger = logging.getLogger(__name__)

MESSAGE_UNEXPECTED_ERROR = "An unexpected error occurred. Please check your command."


class Chip:
    """A task tracking session.

    The task list is loaded once at construction. A corrupt data file does
    not stop the session: the file is backed up (when enabled), the reason is
    kept in ``startup_warning`` and the session starts with an empty list.
    """

    def __init__(self, storage: Storage, config: Optional[ConfigModel] = None):
        self.config = config or ConfigModel()
        self.storage = storage
        self.startup_warning: Optional[str] = None
        self.tasks = self._load_tasks()
        self.dispatcher = CommandDispatcher(
            self.tasks, self.storage, suggest_commands=self.config.suggest_commands
        )

    @classmethod
    def from_config(cls, config: ConfigModel) -> "Chip":
        return cls(Storage.from_config(config), config)

    def _load_tasks(self) -> TaskList:
        try:
            return self.storage.load()
        except CorruptStorageError as e:
            warning = f"{e.message} Starting with an empty task list."
            if self.config.backup_corrupt_files:
                backup_path = self.storage.backup()
                if backup_path is not None:
                    warning += f" The old file was copied to {backup_path}."
            logger.warning(warning)
            self.startup_warning = warning
            return TaskList()

    def _dispatch(self, user_input: str, ui: Ui) -> Optional[Command]:
        """Run one command, reporting any failure through ``ui``."""
        try:
            return self.dispatcher.execute(user_input, ui)
        except ChipError as e:
            ui.show_error(e.message)
        except Exception:
            logger.debug(f"Unexpected error while handling {user_input!r}", exc_info=True)
            ui.show_error(MESSAGE_UNEXPECTED_ERROR)
        return None

    def get_response(self, user_input: str) -> str:
        """Single-shot mode: run one command and return its output as text.

        ``bye``, with or without trailing words, returns the farewell without
        touching the task list.
        """
        if split_command(user_input)[0].lower() == Command.BYE.value:
            return GOODBYE_MESSAGE

        collector = ResponseCollector()
        self._dispatch(user_input, collector)
        return collector.response()

    def run(self, ui: Optional[ConsoleUi] = None) -> None:
        """Interactive mode: read and run commands until ``bye`` or end of input."""
        ui = ui or ConsoleUi(separator_width=self.config.separator_width)
        ui.show_welcome()
        if self.startup_warning:
            ui.show_warning(ERROR_PREFIX + self.startup_warning)
            ui.show_line()

        while True:
            try:
                full_command = ui.read_command()
            except (EOFError, KeyboardInterrupt):
                full_command = Command.BYE.value
            ui.show_line()
            try:
                if self._dispatch(full_command, ui) is Command.BYE:
                    ui.show_goodbye()
                    break
            finally:
                ui.show_line()
