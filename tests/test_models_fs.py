"""
Tests for the data model and lookup helpers
"""

from pathlib import Path

import pytest

from core import Action, ExecutionPlan, FilenameList, PlanEntry, RenameOptions
from core.sort_rules import contains_sorted, find_adjacent_duplicate, sorted_copy
from core.text_match import is_delete_marked, is_valid_target


class TestFilenameList:

    def test_keeps_order_and_dedupes(self):
        files = FilenameList(["b", "a", "b", "c"])
        assert list(files) == ["b", "a", "c"]
        assert files.names == ("b", "a", "c")
        assert len(files) == 3
        assert files[0] == "b"

    def test_membership(self):
        files = FilenameList(["zeta", "alpha", "mid"])
        assert files.has("alpha")
        assert "mid" in files
        assert not files.has("Alpha")
        assert 3 not in files

    def test_is_immutable(self):
        files = FilenameList(["a"])
        with pytest.raises(AttributeError):
            files.extra = 1


class TestSortRules:

    def test_sorted_copy_leaves_input(self):
        names = ["b", "a"]
        assert sorted_copy(names) == ["a", "b"]
        assert names == ["b", "a"]

    def test_contains_sorted(self):
        data = ["a", "c", "e"]
        assert contains_sorted(data, "c")
        assert not contains_sorted(data, "d")
        assert not contains_sorted(data, "z")
        assert not contains_sorted([], "a")

    def test_find_adjacent_duplicate(self):
        assert find_adjacent_duplicate(["a", "b", "b", "c"]) == "b"
        assert find_adjacent_duplicate(["a", "b"]) is None
        assert find_adjacent_duplicate([]) is None


class TestTextMatch:

    def test_is_delete_marked(self):
        assert is_delete_marked("#", "#")
        assert is_delete_marked("#anything", "#")
        assert not is_delete_marked("a#", "#")
        assert not is_delete_marked("", "#")

    def test_is_valid_target(self):
        assert is_valid_target("file.txt") == (True, None)
        assert is_valid_target(" leading space")[0]
        valid, error = is_valid_target("")
        assert not valid
        assert "empty" in error


class TestPlanModels:

    def test_plan_views(self):
        plan = ExecutionPlan(entries=[
            PlanEntry(0, "a", "a", Action.UNCHANGED),
            PlanEntry(1, "b", "#", Action.DELETE),
        ])
        assert [e.old for e in plan.mutations] == ["b"]
        assert not plan.is_noop
        assert plan.of(Action.DELETE)[0].index == 1

    def test_empty_plan_is_noop(self):
        assert ExecutionPlan().is_noop

    def test_options_resolve(self):
        options = RenameOptions(directory=Path("/data"))
        assert options.resolve("x.txt") == Path("/data/x.txt")
        assert options.delete_char == "#"
        assert options.trash_command == "gio"
