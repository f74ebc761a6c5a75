"""JSON reporter — serializes a ``TestRun`` as a JSON document.

Produces machine-readable output for downstream tooling, keeping the
nested group structure built by ``seesharp.loader``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from seesharp.models.test_run import TestRun

logger = logging.getLogger(__name__)


class JSONReporter:
    """Generate JSON reports from a ``TestRun``."""

    def generate(self, test_run: TestRun, output_path: Path) -> Path:
        """Write a JSON report file.

        Args:
            test_run: The test run to serialize.
            output_path: Path to write the JSON file.

        Returns:
            The path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.generate_string(test_run), encoding="utf-8")
        logger.info("JSON report written to %s", output_path)
        return output_path

    def generate_string(self, test_run: TestRun) -> str:
        """Return the JSON report as a string."""
        return json.dumps(_build_report(test_run), indent=2, ensure_ascii=False)


def _build_report(test_run: TestRun) -> dict[str, Any]:
    """Build the JSON report structure."""
    return {
        "tool": "seesharp",
        "test_run": asdict(test_run),
    }
