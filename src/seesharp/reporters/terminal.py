"""Terminal reporter with rich output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from seesharp.models.test_run import Assembly, TestCase, TestGroup, TestRun

console = Console()

_DEFAULT_FAST_THRESHOLD = 0.05
_DEFAULT_SLOW_THRESHOLD = 0.1

_SPEED_MARKERS = {
    "fast": "[green]🚀[/green]",
    "medium": "[yellow]🕐[/yellow]",
    "slow": "[red]🐌[/red]",
}


def _speed(seconds: float, fast_threshold: float, slow_threshold: float) -> str:
    """Return the speed bucket (``fast``, ``medium`` or ``slow``) of a duration."""
    if seconds <= fast_threshold:
        return "fast"
    if seconds <= slow_threshold:
        return "medium"
    return "slow"


class CLIReporter:
    """Rich terminal output reporter for test runs."""

    def __init__(
        self,
        *,
        fast_threshold: float = _DEFAULT_FAST_THRESHOLD,
        slow_threshold: float = _DEFAULT_SLOW_THRESHOLD,
    ) -> None:
        """Initialize the CLI reporter with the speed thresholds, in seconds."""
        self.console = console
        self.fast_threshold = fast_threshold
        self.slow_threshold = slow_threshold

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def print_test_run(self, test_run: TestRun, source: str) -> None:
        """Print *test_run*, read from *source*, with all of its assemblies."""
        self.console.print(f"Input source:         {escape(source)}")
        self.console.print(f"Amount of assemblies: {len(test_run.assemblies)}")

        if test_run.computer:
            self.console.print(f"Computer:             {escape(test_run.computer)}")
        if test_run.user:
            self.console.print(f"User:                 {escape(test_run.user)}")
        if test_run.start_time_rtf:
            self.console.print(f"Start time:           {escape(test_run.start_time_rtf)}")

        end_time = test_run.end_time_rtf or test_run.timestamp
        if end_time:
            self.console.print(f"End time:             {escape(end_time)}")

        for assembly in test_run.assemblies:
            self.print_assembly(assembly)

        self.console.print()

    def print_assembly(self, assembly: Assembly) -> None:
        """Print the summary of *assembly* followed by its test groups."""
        self.console.print()
        self.console.print(f"  Assembly:         [bold]{escape(assembly.name)}[/bold]")

        if assembly.failed_count:
            self.console.print(
                f"  Status:           [bold red]⛌ Failed ({assembly.failed_count} of "
                f"{assembly.total_count} failed).[/bold red]"
            )
        else:
            self.console.print(
                f"  Status:           [bold green]✓ Passed ({assembly.passed_count} of "
                f"{assembly.total_count} passed).[/bold green]"
            )

        self.console.print(f"  Date / time:      {assembly.run_date} {assembly.run_time}")
        self.console.print(f"  Total time:       {assembly.time} seconds.")
        self.console.print()
        self.console.print(f"    # tests:        {assembly.total_count}")
        self.console.print(f"    # Passed tests: {assembly.passed_count}")
        self.console.print(f"    # Failed tests: {assembly.failed_count}")
        self.console.print(f"    # Errors:       {assembly.error_count}")
        self.console.print()

        for group in assembly.test_groups:
            self.print_group(group)

    def print_group(self, group: TestGroup, indent: int = 0) -> None:
        """Print *group* and its nested groups, indenting one space per level."""
        if group.name:
            self.console.print(f"{' ' * (indent + 1)}Group: [bold]{escape(group.name)}[/bold]")

        for test in group.tests:
            self.print_test(test, indent)

        if group.tests:
            self.console.print()

        for child in group.groups:
            self.print_group(child, indent + 1)

    def print_test(self, test: TestCase, indent: int = 0) -> None:
        """Print a single test with its speed marker and duration."""
        marker = _SPEED_MARKERS[_speed(test.time, self.fast_threshold, self.slow_threshold)]
        self.console.print(f"{' ' * indent} {marker} {escape(test.name)} ({test.time} seconds)")


# Global reporter instance
reporter = CLIReporter()
