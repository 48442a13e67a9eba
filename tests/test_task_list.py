"""Tests for the TaskList container."""

import pytest

from chip_cli.errors import IndexOutOfRangeError
from chip_cli.task import Task
from chip_cli.task_list import TaskList


@pytest.fixture()
def populated() -> TaskList:
    return TaskList([
        Task.todo("read book"),
        Task.deadline("Return Book", "2024-06-01 1200"),
        Task.event("book club", "2024-06-02 1900", "2024-06-02 2100"),
        Task.todo("Buy milk"),
    ])


class TestTaskList:
    """Test add/get/delete/size."""

    def test_empty_list(self):
        tasks = TaskList()
        assert tasks.size() == 0
        assert len(tasks) == 0

    def test_add_increases_size(self):
        tasks = TaskList()
        tasks.add(Task.todo("Sample task"))
        tasks.add(Task.todo("Another task"))
        assert tasks.size() == 2

    def test_get_returns_same_task(self):
        tasks = TaskList()
        task = Task.todo("Sample task")
        tasks.add(task)
        assert tasks.get(0) is task

    @pytest.mark.parametrize("index", [0, 1, -1])
    def test_get_out_of_range(self, index):
        tasks = TaskList()
        if index != 0:
            tasks.add(Task.todo("Only task"))
        with pytest.raises(IndexOutOfRangeError):
            tasks.get(index)

    def test_negative_index_is_not_python_indexing(self, populated):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            populated.get(-1)
        assert exc_info.value.message == "Task number must be positive."

    def test_out_of_range_error_is_index_error(self):
        with pytest.raises(IndexError):
            TaskList().delete(0)

    def test_delete_returns_removed_task(self, populated):
        second = populated.get(1)
        removed = populated.delete(1)

        assert removed is second
        assert populated.size() == 3

    def test_delete_then_get_shifts_down(self, populated):
        following = populated.get(2)
        populated.delete(1)
        assert populated.get(1) is following

    def test_delete_last_then_get_raises(self, populated):
        populated.delete(3)
        with pytest.raises(IndexOutOfRangeError):
            populated.get(3)

    def test_format_entry(self):
        assert TaskList.format_entry(2, Task.todo("Read")) == " 2.[T][ ] Read"


class TestFindByKeyword:
    """Test keyword search."""

    def test_case_insensitive(self, populated):
        lower = populated.find_by_keyword("book")
        upper = populated.find_by_keyword("BOOK")

        assert lower == upper
        assert [t.description for t in lower] == ["read book", "Return Book", "book club"]

    def test_matches_whole_display_string(self, populated):
        """Dates and type tags are part of what is searched."""
        assert [t.description for t in populated.find_by_keyword("(by: Jun")] == ["Return Book"]
        assert [t.description for t in populated.find_by_keyword("[E]")] == ["book club"]

    def test_result_is_ordered_subset(self, populated):
        result = populated.find_by_keyword("b")
        positions = [list(populated).index(task) for task in result]
        assert positions == sorted(positions)

    def test_no_match(self, populated):
        assert populated.find_by_keyword("zebra") == []

    def test_empty_keyword_matches_everything(self, populated):
        assert populated.find_by_keyword("") == list(populated)


class TestSortByDescription:
    """Test sorting."""

    def test_sort_is_case_sensitive(self, populated):
        populated.sort_by_description()
        assert [t.description for t in populated] == [
            "Buy milk", "Return Book", "book club", "read book",
        ]

    def test_sort_is_idempotent(self, populated):
        populated.sort_by_description()
        once = list(populated)
        populated.sort_by_description()
        assert list(populated) == once

    def test_sort_is_stable(self):
        first = Task.todo("same")
        second = Task.deadline("same", "2024-01-01 0000")
        tasks = TaskList([Task.todo("zeta"), first, second])

        tasks.sort_by_description()

        assert tasks.get(0) is first
        assert tasks.get(1) is second
