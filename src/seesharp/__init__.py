"""seesharp: readable reports from .NET test results in xUnit's v2+ XML format."""

from seesharp.loader import load
from seesharp.models.test_run import Assembly, TestCase, TestGroup, TestRun
from seesharp.parsing.xunit_xml import DecodeError

__version__ = "1.0.0"

__all__ = [
    "Assembly",
    "DecodeError",
    "TestCase",
    "TestGroup",
    "TestRun",
    "__version__",
    "load",
]
