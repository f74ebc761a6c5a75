"""Load xUnit v2+ XML results into the hierarchical report model.

``load`` decodes a results document and turns it into a ``TestRun``:
machine generated test names are rewritten as sentences, and the tests of
each assembly are grouped by trait and then by the nested types they are
declared in.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from seesharp.models.test_run import Assembly, TestCase, TestGroup, TestRun
from seesharp.parsing.xunit_xml import unmarshal
from seesharp.utils import camelcase, sentence
from seesharp.utils.paths import file_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seesharp.parsing.xunit_xml import XmlAssembly, XmlResult, XmlTest, XmlTrait

logger = logging.getLogger(__name__)

# Separator xUnit writes between a nested type and its declaring type.
_NESTING_MARKER = "+"


def load(stream: IO[bytes], *, keep_words: Iterable[str] = ()) -> TestRun:
    """Return the ``TestRun`` stored in *stream*.

    Args:
        stream: Readable binary stream holding an xUnit v2+ XML document.
        keep_words: Words left untouched when test names are rewritten as
            sentences (e.g. ``["HTTP"]``).

    Raises:
        DecodeError: When *stream* doesn't hold a valid document.
    """
    return build_test_run(unmarshal(stream), keep_words=keep_words)


def build_test_run(result: XmlResult, *, keep_words: Iterable[str] = ()) -> TestRun:
    """Convert a decoded document into a ``TestRun``."""
    keep = tuple(keep_words)
    logger.debug("Building report for %d assemblies", len(result.assemblies))

    return TestRun(
        computer=result.computer,
        user=result.user,
        start_time_rtf=result.start_rtf,
        end_time_rtf=result.finish_rtf,
        timestamp=result.timestamp,
        assemblies=[_build_assembly(assembly, keep) for assembly in result.assemblies],
    )


def _build_assembly(assembly: XmlAssembly, keep: tuple[str, ...]) -> Assembly:
    return Assembly(
        name=file_name(assembly.full_name),
        error_count=assembly.error_count,
        passed_count=assembly.passed_count,
        failed_count=assembly.failed_count,
        not_run_count=assembly.not_run_count,
        total_count=assembly.total,
        run_date=assembly.run_date,
        run_time=assembly.run_time,
        time=assembly.time,
        time_rtf=assembly.time_rtf,
        test_groups=group_tests(assembly, keep),
    )


def group_tests(assembly: XmlAssembly, keep: tuple[str, ...] = ()) -> list[TestGroup]:
    """Return the tests of *assembly* as a tree of groups.

    There's one top level group per trait (``"Name - Value"``), sorted by
    name; tests without traits go into the group named ``""``.  A test with
    several traits shows up in each of their groups.  Inside a trait group,
    nested tests are placed in sub groups named after their declaring types.
    """
    if not assembly.has_tests():
        return []

    tests_by_trait: dict[str, list[XmlTest]] = {}

    for collection in assembly.collections:
        for test in collection.tests:
            if not test.traits:
                tests_by_trait.setdefault("", []).append(test)

            for trait in test.traits:
                tests_by_trait.setdefault(trait_name(trait), []).append(test)

    groups: list[TestGroup] = []
    for key in sorted(tests_by_trait):
        root = TestGroup(name=key)

        for test in tests_by_trait[key]:
            test_case = TestCase(name=friendly_name(test, keep), result=test.result, time=test.time)
            _insert(root, group_path(test, keep), test_case)

        groups.append(root)

    logger.debug("Assembly %r: %d test group(s)", assembly.full_name, len(groups))
    return groups


def _insert(root: TestGroup, path: list[str], test_case: TestCase) -> None:
    """Append *test_case* to the group at *path* below *root*, creating groups as needed."""
    group = root
    for name in path:
        child = group.find_group(name)
        if child is None:
            child = TestGroup(name=name)
            group.groups.append(child)
        group = child

    group.tests.append(test_case)


def trait_name(trait: XmlTrait) -> str:
    """Return the display name of *trait*."""
    return f"{trait.name} - {trait.value}"


def is_nested(test: XmlTest) -> bool:
    """Return True if *test* is declared inside a nested type.

    xUnit joins nested type names with ``+`` in the default test name; a
    ``+`` inside the argument list of a theory doesn't count.
    Display names are free text, so they never count as nested.
    """
    return not test.has_display_name and _NESTING_MARKER in _strip_arguments(test.name)


def friendly_name(test: XmlTest, keep: Iterable[str] = ()) -> str:
    """Return the human readable name of *test*.

    A display name is returned as is.  Otherwise the method name (the last
    ``.`` separated part, without its argument list) is split into words
    and rewritten as a sentence: ``ParameterizedTestMethod(arg: null)``
    becomes ``Parameterized test method``.
    """
    if test.has_display_name:
        return test.name

    method = _strip_arguments(test.name).rsplit(".", 1)[-1]
    return sentence.transform(camelcase.split(method), keep)


def group_path(test: XmlTest, keep: Iterable[str] = ()) -> list[str]:
    """Return the names of the nested groups *test* belongs to, outermost first.

    ``NS.TestClass+Method+Scenario.Result`` yields
    ``["Test class", "Method", "Scenario"]``.  Tests that aren't nested
    belong to no nested group.
    """
    if not is_nested(test):
        return []

    segments = _strip_arguments(test.name).split(_NESTING_MARKER)
    parts = [
        segments[0].rsplit(".", 1)[-1],
        *segments[1:-1],
        segments[-1].rsplit(".", 1)[0],
    ]

    keep = tuple(keep)
    return [sentence.transform(camelcase.split(part), keep) for part in parts]


def _strip_arguments(name: str) -> str:
    """Remove the argument list of a theory (``Method(x: 1)``) from *name*."""
    idx = name.find("(")
    if idx == -1:
        return name
    return name[:idx]
