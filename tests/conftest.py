"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chip_cli.config import ConfigModel  # noqa: E402
from chip_cli.parser import CommandDispatcher  # noqa: E402
from chip_cli.storage import Storage  # noqa: E402
from chip_cli.task_list import TaskList  # noqa: E402
from chip_cli.ui import ResponseCollector  # noqa: E402


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    """Per-test data file inside a directory that does not exist yet."""
    return tmp_path / "data" / "chip.txt"


@pytest.fixture()
def storage(data_file: Path) -> Storage:
    return Storage(data_file)


@pytest.fixture()
def config(data_file: Path) -> ConfigModel:
    return ConfigModel(data_file=str(data_file))


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def dispatcher(task_list: TaskList, storage: Storage) -> CommandDispatcher:
    return CommandDispatcher(task_list, storage)


@pytest.fixture()
def ui() -> ResponseCollector:
    return ResponseCollector()
