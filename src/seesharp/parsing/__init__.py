"""Decoding of test result documents."""

from seesharp.parsing.xunit_xml import (
    DecodeError,
    XmlAssembly,
    XmlCollection,
    XmlResult,
    XmlTest,
    XmlTrait,
    unmarshal,
)

__all__ = [
    "DecodeError",
    "XmlAssembly",
    "XmlCollection",
    "XmlResult",
    "XmlTest",
    "XmlTrait",
    "unmarshal",
]
