"""Tests for the report models (models/test_run.py)."""

from __future__ import annotations

from seesharp.models.test_run import Assembly, TestCase, TestGroup, TestRun


def _tree() -> TestGroup:
    return TestGroup(
        name="",
        tests=[TestCase("Top")],
        groups=[
            TestGroup(
                name="Outer",
                tests=[TestCase("Outer test")],
                groups=[TestGroup(name="Inner", tests=[TestCase("Inner test")])],
            ),
            TestGroup(name="Sibling", tests=[TestCase("Sibling test")]),
        ],
    )


class TestTestGroup:
    def test_defaults_are_empty_lists(self) -> None:
        group = TestGroup(name="Group")
        assert group.tests == []
        assert group.groups == []

    def test_defaults_are_not_shared(self) -> None:
        first, second = TestGroup(name="a"), TestGroup(name="b")
        first.tests.append(TestCase("x"))
        assert second.tests == []

    def test_find_group(self) -> None:
        tree = _tree()
        assert tree.find_group("Sibling") is tree.groups[1]

    def test_find_group_only_looks_at_direct_children(self) -> None:
        assert _tree().find_group("Inner") is None

    def test_iter_tests_depth_first(self) -> None:
        names = [t.name for t in _tree().iter_tests()]
        assert names == ["Top", "Outer test", "Inner test", "Sibling test"]


class TestDefaults:
    def test_test_run(self) -> None:
        test_run = TestRun()
        assert test_run.assemblies == []
        assert test_run.computer == ""

    def test_assembly(self) -> None:
        assembly = Assembly(name="App.dll")
        assert assembly.test_groups == []
        assert assembly.total_count == 0
        assert assembly.time == 0.0
