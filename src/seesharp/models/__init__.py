"""Data models for seesharp."""

from seesharp.models.test_run import Assembly, TestCase, TestGroup, TestRun

__all__ = [
    "Assembly",
    "TestCase",
    "TestGroup",
    "TestRun",
]
