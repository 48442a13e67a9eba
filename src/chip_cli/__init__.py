"""Chip CLI - a command-line task tracker for todos, deadlines and events."""

__version__ = "0.1.0"
__author__ = "Chip CLI Team"

from .task import Task, TaskKind
from .task_list import TaskList
from .storage import Storage
from .app import Chip

__all__ = ["Task", "TaskKind", "TaskList", "Storage", "Chip", "__version__"]
