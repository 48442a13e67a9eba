"""Error taxonomy for Chip CLI.

Every error here is recoverable: the session catches ``ChipError`` at the
dispatch boundary and shows ``message`` to the user.
"""

from typing import List, Optional

from .utils.datetime import INPUT_PATTERN


class ChipError(Exception):
    """Base class for user-facing errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownCommandError(ChipError):
    """Exception raised when the action word is not a known command."""

    def __init__(self, action: str, suggestions: Optional[List[str]] = None):
        self.action = action
        self.suggestions = suggestions or []
        message = "I'm sorry, there is no such action."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)


class MissingArgumentError(ChipError):
    """Exception raised when a command is missing its required argument."""

    def __init__(self, command: str, message: Optional[str] = None):
        self.command = command
        super().__init__(message or f"Please specify which task to {command}.")


class EmptyDescriptionError(MissingArgumentError):
    def __init__(self, command: str):
        article = "an" if command[:1] in "aeiou" else "a"
        super().__init__(command, f"The description of {article} {command} cannot be empty.")


class MissingDeadlineTimeError(MissingArgumentError):
    def __init__(self):
        super().__init__("deadline", "Please specify the deadline time using /by.")


class MissingEventStartError(MissingArgumentError):
    def __init__(self):
        super().__init__("event", "Please specify the event start time using /from.")


class MissingEventEndError(MissingArgumentError):
    def __init__(self):
        super().__init__("event", "Please specify the event end time using /to.")


class MissingKeywordError(MissingArgumentError):
    def __init__(self):
        super().__init__("find", "Please specify a keyword to search for.")


class InvalidTaskNumberError(ChipError):
    """Exception raised when a task number is not an integer."""

    def __init__(self, value: str):
        self.value = value
        super().__init__("Please provide a valid task number.")


class IndexOutOfRangeError(ChipError, IndexError):
    """Exception raised when a 0-based index falls outside the task list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if index < 0:
            message = "Task number must be positive."
        else:
            message = f"Task {index + 1} does not exist. You have {size} tasks in the list."
        super().__init__(message)


class InvalidDateFormatError(ChipError, ValueError):
    """Exception raised when a date-time does not match the input pattern."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Please use the date/time format {INPUT_PATTERN}.")


class CorruptStorageError(ChipError):
    """Exception raised when the data file exists but cannot be fully parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class StorageWriteError(ChipError):
    """Exception raised when the task list cannot be written to disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"An error occurred while saving tasks: {reason}")
