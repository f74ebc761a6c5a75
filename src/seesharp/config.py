"""Configuration parsing from ``.seesharp.yml``."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".seesharp.yml"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")

REPORT_FORMATS = ("terminal", "json")


def _resolve_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with environment variable values."""

    def _replace(match: re.Match[str]) -> str:
        var = match.group(1)
        resolved = os.environ.get(var)
        if resolved is None:
            logger.warning("Environment variable %s is not set (referenced in config)", var)
            return ""
        return resolved

    return _ENV_VAR_RE.sub(_replace, value)


def _resolve_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively resolve environment variables in a dictionary."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = _resolve_env_vars(value)
        elif isinstance(value, dict):
            result[key] = _resolve_dict(value)
        elif isinstance(value, list):
            result[key] = [
                _resolve_env_vars(item) if isinstance(item, str) else item for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass
class ReportConfig:
    """Report rendering configuration."""

    input: str = "data.xml"
    """Results file read when no file is given on the command line."""

    format: str = "terminal"
    """Output format: ``terminal`` or ``json``."""

    fast_threshold: float = 0.05
    """Tests running at most this many seconds are reported as fast."""

    slow_threshold: float = 0.1
    """Tests running longer than this many seconds are reported as slow."""


@dataclass
class NamingConfig:
    """Configuration of the test and group names."""

    keep_words: list[str] = field(default_factory=list)
    """Words that keep their casing when names are turned into sentences."""


@dataclass
class SeeSharpConfig:
    """Complete seesharp configuration from ``.seesharp.yml``."""

    report: ReportConfig = field(default_factory=ReportConfig)
    """Reporting configuration."""

    naming: NamingConfig = field(default_factory=NamingConfig)
    """Naming configuration."""

    raw: dict[str, Any] = field(default_factory=dict)
    """Raw parsed YAML for extension/debugging."""


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        return {}
    return value


def _parse_report_config(raw: dict[str, Any]) -> ReportConfig:
    """Parse the ``report`` section, falling back to environment variables."""
    report_raw = _section(raw, "report")
    default = ReportConfig()

    return ReportConfig(
        input=str(report_raw.get("input", os.environ.get("SEESHARP_INPUT", default.input))),
        format=str(report_raw.get("format", os.environ.get("SEESHARP_FORMAT", default.format))),
        fast_threshold=float(report_raw.get("fast_threshold", default.fast_threshold)),
        slow_threshold=float(report_raw.get("slow_threshold", default.slow_threshold)),
    )


def _parse_naming_config(raw: dict[str, Any]) -> NamingConfig:
    """Parse the ``naming`` section."""
    naming_raw = _section(raw, "naming")
    keep_raw = naming_raw.get("keep_words", [])
    if not isinstance(keep_raw, list):
        keep_raw = []

    return NamingConfig(keep_words=[str(word) for word in keep_raw if word])


def load_config(root: str | Path) -> SeeSharpConfig:
    """Load and parse the ``.seesharp.yml`` configuration in *root*.

    Falls back to defaults and environment variables when the YAML file is
    missing or incomplete.
    """
    config_file = Path(root).resolve() / CONFIG_FILE_NAME

    raw: dict[str, Any] = {}
    if config_file.is_file():
        parsed = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        if isinstance(parsed, dict):
            raw = _resolve_dict(parsed)
        elif parsed is not None:
            logger.warning("Ignoring %s: expected a mapping at the top level", config_file)

    return SeeSharpConfig(
        report=_parse_report_config(raw),
        naming=_parse_naming_config(raw),
        raw=raw,
    )


def _validate_report_config(report: ReportConfig) -> list[str]:
    """Validate report configuration."""
    errors: list[str] = []

    if report.format not in REPORT_FORMATS:
        errors.append(
            f"report.format must be one of {', '.join(REPORT_FORMATS)} (got: {report.format})"
        )

    if report.fast_threshold < 0:
        errors.append(f"report.fast_threshold must not be negative (got: {report.fast_threshold})")

    if report.slow_threshold < 0:
        errors.append(f"report.slow_threshold must not be negative (got: {report.slow_threshold})")

    if report.fast_threshold > report.slow_threshold:
        errors.append(
            f"report.fast_threshold ({report.fast_threshold}) must not exceed "
            f"report.slow_threshold ({report.slow_threshold})"
        )

    return errors


def validate_config(config: SeeSharpConfig) -> list[str]:
    """Validate the configuration and return a list of error messages.

    Returns an empty list if the configuration is valid.
    """
    errors: list[str] = []

    if not config.report.input:
        errors.append("report.input must not be empty")

    errors.extend(_validate_report_config(config.report))
    return errors
