"""Reporters for outputting test runs."""

from __future__ import annotations

from seesharp.reporters.json_reporter import JSONReporter
from seesharp.reporters.terminal import CLIReporter, reporter

__all__ = [
    "CLIReporter",
    "JSONReporter",
    "reporter",
]
