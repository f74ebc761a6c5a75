"""Splitting of "CamelCase" identifiers into words.

The scanner walks the identifier once and records the end position of
every word.  Digit runs, letter words (including acronyms such as ``XML``)
and whitespace runs each form a word.  Characters that belong to none of
those classes are kept with the word that follows them, so joining the
result always gives back the original identifier.
"""

from __future__ import annotations


def split(value: str) -> list[str]:
    """Split *value* as a "CamelCase" identifier and return its words.

    Returns ``[value]`` when *value* is empty or is not valid text (for
    example a string carrying lone surrogates from a bad UTF-8 decode).

    Examples::

        split("EasyXMLParser")  # ["Easy", "XML", "Parser"]
        split("GL11Version")    # ["GL", "11", "Version"]
        split("Two  spaces")    # ["Two", "  ", "spaces"]
    """
    if not _is_valid(value):
        return [value]

    end_positions: list[int] = []
    pos = 0

    while pos < len(value):
        char = value[pos]

        if char.isdigit():
            pos = _number_end(value, pos)
            end_positions.append(pos + 1)
        elif char.isupper() or char.islower():
            pos = _word_end(value, pos)
            end_positions.append(pos + 1)
        elif char.isspace():
            pos = _space_end(value, pos)
            end_positions.append(pos + 1)

        pos += 1

    return _words_by_end_positions(value, end_positions)


def _is_valid(value: str) -> bool:
    """Return True if *value* is non-empty and encodable as UTF-8."""
    if not value:
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _words_by_end_positions(value: str, end_positions: list[int]) -> list[str]:
    """Cut *value* at each end position.

    Trailing characters after the last recorded word are kept on that word;
    an identifier without any word is returned whole.
    """
    if not end_positions:
        return [value]

    words: list[str] = []
    start = 0
    for end in end_positions:
        words.append(value[start:end])
        start = end

    if start < len(value):
        words[-1] += value[start:]

    return words


def _number_end(value: str, idx: int) -> int:
    """Return the position of the last digit in the run starting at *idx*."""
    idx += 1
    while idx < len(value) and value[idx].isdigit():
        idx += 1
    return idx - 1


def _word_end(value: str, idx: int) -> int:
    """Return the position of the last letter of the word starting at *idx*.

    An uppercase letter followed by another uppercase letter starts an
    acronym: the uppercase run is consumed, minus its last letter when a
    lowercase letter follows (that letter starts the next word, as in
    ``XMLParser``).  Any other letter starts a word made of the letter and
    the lowercase letters after it.
    """
    if value[idx].isupper() and idx + 1 < len(value) and value[idx + 1].isupper():
        idx += 1
        while idx < len(value) and value[idx].isupper():
            idx += 1

        if idx < len(value) and value[idx].islower():
            return idx - 2
        return idx - 1

    idx += 1
    while idx < len(value) and value[idx].islower():
        idx += 1
    return idx - 1


def _space_end(value: str, idx: int) -> int:
    """Return the position of the last whitespace in the run starting at *idx*."""
    idx += 1
    while idx < len(value) and value[idx].isspace():
        idx += 1
    return idx - 1
