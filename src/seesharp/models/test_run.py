"""Report models built from xUnit test results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class TestCase:
    """A single test."""

    name: str
    """Human readable name of the test."""

    result: str = ""
    """Outcome as reported by xUnit (``Pass``, ``Fail`` or ``Skip``)."""

    time: float = 0.0
    """Duration in seconds."""


@dataclass
class TestGroup:
    """A named group of tests, optionally holding nested groups."""

    name: str
    """Group name. Empty for the group of tests without any trait."""

    tests: list[TestCase] = field(default_factory=list)
    """Tests that belong directly to this group."""

    groups: list[TestGroup] = field(default_factory=list)
    """Nested groups, in order of first appearance."""

    def find_group(self, name: str) -> TestGroup | None:
        """Return the direct child group called *name*, if any."""
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def iter_tests(self) -> Iterator[TestCase]:
        """Yield every test of this group and of its nested groups."""
        yield from self.tests
        for group in self.groups:
            yield from group.iter_tests()


@dataclass
class Assembly:
    """The run of a single test assembly."""

    name: str
    """File name of the assembly (e.g. ``App.Tests.dll``)."""

    error_count: int = 0
    passed_count: int = 0
    failed_count: int = 0
    not_run_count: int = 0
    total_count: int = 0

    run_date: str = ""
    run_time: str = ""

    time: float = 0.0
    """Total duration in seconds."""

    time_rtf: str = ""
    """Total duration in RTF format."""

    test_groups: list[TestGroup] = field(default_factory=list)
    """Top level groups, one per trait, sorted by name."""


@dataclass
class TestRun:
    """All the results stored in a single xUnit v2+ XML document."""

    computer: str = ""
    user: str = ""
    start_time_rtf: str = ""
    end_time_rtf: str = ""
    timestamp: str = ""
    assemblies: list[Assembly] = field(default_factory=list)
