"""Helpers for working with file paths written by other platforms."""

from __future__ import annotations

_SEPARATORS = ("/", "\\")


def file_name(full_path: str) -> str:
    """Return the file name (including extension) at the end of *full_path*.

    Both ``/`` and ``\\`` are treated as separators, regardless of the
    platform running this code, because test results are often produced on
    another OS than the one reading them.  A path without a separator is
    returned unchanged.
    """
    cut = max(full_path.rfind(sep) for sep in _SEPARATORS)
    return full_path[cut + 1 :]
