"""Decoding of .NET test results written in xUnit's v2+ XML format.

The decoded tree mirrors the XML document one-to-one: assemblies contain
collections, collections contain tests and tests carry traits.  It is an
intermediate representation, see ``seesharp.loader`` for the structure
that's meant for further processing.

More information regarding the format: https://xunit.net/docs/format-xml-v2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING

from defusedxml import DefusedXmlException, ElementTree
from defusedxml.ElementTree import ParseError as DefusedParseError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element as XmlElement

_ROOT_TAG = "assemblies"


class DecodeError(ValueError):
    """Raised when a document can't be decoded as xUnit v2+ XML."""


@dataclass
class XmlTrait:
    """A ``<trait>`` element."""

    name: str = ""
    value: str = ""


@dataclass
class XmlTest:
    """A ``<test>`` element."""

    name: str = ""
    """Full name of the test, or the display name chosen by its author."""

    type: str = ""
    """Fully qualified name of the type declaring the test."""

    result: str = ""
    """``Pass``, ``Fail`` or ``Skip``."""

    time: float = 0.0
    """Duration in seconds."""

    traits: list[XmlTrait] = field(default_factory=list)

    @property
    def has_display_name(self) -> bool:
        """Return True if the test was given an explicit display name.

        By default xUnit names a test after its type and method, so a name
        that doesn't contain the type was chosen by the author.  C#
        identifiers can't contain spaces, so a name with a space outside of
        the argument list of a theory is always a display name.

        Spaces from the first ``(`` on are ignored: argument values are
        free text, so ``NS.Class.Method(arg: null)`` is still a default
        name and reads as ``Method``.
        """
        identifier = self.name.split("(", 1)[0]
        return " " in identifier or self.type not in self.name


@dataclass
class XmlCollection:
    """A ``<collection>`` element."""

    tests: list[XmlTest] = field(default_factory=list)


@dataclass
class XmlAssembly:
    """An ``<assembly>`` element."""

    full_name: str = ""
    error_count: int = 0
    passed_count: int = 0
    failed_count: int = 0
    not_run_count: int = 0
    total: int = 0
    run_date: str = ""
    run_time: str = ""
    time: float = 0.0
    time_rtf: str = ""
    collections: list[XmlCollection] = field(default_factory=list)

    def has_tests(self) -> bool:
        """Return True if any collection of the assembly holds a test."""
        return any(collection.tests for collection in self.collections)


@dataclass
class XmlResult:
    """The ``<assemblies>`` root element."""

    computer: str = ""
    user: str = ""
    start_rtf: str = ""
    finish_rtf: str = ""
    timestamp: str = ""
    assemblies: list[XmlAssembly] = field(default_factory=list)


def unmarshal(stream: IO[bytes]) -> XmlResult:
    """Read *stream* and decode it into an ``XmlResult``.

    Raises:
        DecodeError: When the stream is empty, isn't well-formed XML, is
            rejected as unsafe, or isn't an ``<assemblies>`` document.
    """
    data = stream.read()
    if isinstance(data, str):
        data = data.encode("utf-8")

    if not data.strip():
        raise DecodeError("No XML data to decode")

    try:
        root = ElementTree.fromstring(data)
    except DefusedParseError as e:
        raise DecodeError(f"Invalid XML: {e}") from e
    except DefusedXmlException as e:
        raise DecodeError(f"Unsafe XML rejected: {e}") from e

    if root.tag != _ROOT_TAG:
        raise DecodeError(f"Expected <{_ROOT_TAG}> root element, found <{root.tag}>")

    return XmlResult(
        computer=root.get("computer", ""),
        user=root.get("user", ""),
        start_rtf=root.get("start-rtf", ""),
        finish_rtf=root.get("finish-rtf", ""),
        timestamp=root.get("timestamp", ""),
        assemblies=[_read_assembly(elem) for elem in root.findall("assembly")],
    )


def _read_assembly(elem: XmlElement) -> XmlAssembly:
    return XmlAssembly(
        full_name=elem.get("name", ""),
        error_count=_int_attr(elem, "errors"),
        passed_count=_int_attr(elem, "passed"),
        failed_count=_int_attr(elem, "failed"),
        not_run_count=_int_attr(elem, "not-run"),
        total=_int_attr(elem, "total"),
        run_date=elem.get("run-date", ""),
        run_time=elem.get("run-time", ""),
        time=_float_attr(elem, "time"),
        time_rtf=elem.get("time-rtf", ""),
        collections=[
            XmlCollection(tests=[_read_test(test) for test in collection.findall("test")])
            for collection in elem.findall("collection")
        ],
    )


def _read_test(elem: XmlElement) -> XmlTest:
    traits: list[XmlTrait] = []
    for traits_elem in elem.findall("traits"):
        traits.extend(
            XmlTrait(name=trait.get("name", ""), value=trait.get("value", ""))
            for trait in traits_elem.findall("trait")
        )

    return XmlTest(
        name=elem.get("name", ""),
        type=elem.get("type", ""),
        result=elem.get("result", ""),
        time=_float_attr(elem, "time"),
        traits=traits,
    )


def _int_attr(elem: XmlElement, name: str) -> int:
    raw = elem.get(name)
    if raw is None or not raw.strip():
        return 0
    try:
        return int(raw.strip())
    except ValueError as e:
        raise DecodeError(f"<{elem.tag}> attribute {name!r} is not an integer: {raw!r}") from e


def _float_attr(elem: XmlElement, name: str) -> float:
    raw = elem.get(name)
    if raw is None or not raw.strip():
        return 0.0
    try:
        return float(raw.strip())
    except ValueError as e:
        raise DecodeError(f"<{elem.tag}> attribute {name!r} is not a number: {raw!r}") from e
