"""Turning a sequence of words into a human readable sentence."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def transform(words: Sequence[str], keep: Iterable[str] = ()) -> str:
    """Join *words* into a sentence.

    The first word is used as is.  Every following word is lowercased,
    unless it is one of the words in *keep*.

    Example::

        transform(["An", "HTTP", "&", "SqlQuery"], keep=["HTTP", "SqlQuery"])
        # "An HTTP & SqlQuery"
    """
    keep_set = frozenset(keep)
    sentence: list[str] = []

    for idx, word in enumerate(words):
        if idx == 0 or word in keep_set:
            sentence.append(word)
        else:
            sentence.append(word.lower())

    return " ".join(sentence)
