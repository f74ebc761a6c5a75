"""Tests for utils/sentence.py — composing sentences from words."""

from __future__ import annotations

from seesharp.utils.sentence import transform


class TestTransform:
    def test_empty(self) -> None:
        assert transform([]) == ""

    def test_single_word_is_kept(self) -> None:
        assert transform(["Result"]) == "Result"

    def test_lowercases_all_but_first(self) -> None:
        assert transform(["A", "Collection", "Of", "Words"]) == "A collection of words"

    def test_first_word_is_never_transformed(self) -> None:
        assert transform(["HTTP", "Request"]) == "HTTP request"

    def test_keep_words_are_untouched(self) -> None:
        words = ["An", "HTTP", "&", "SqlQuery"]
        assert transform(words, ["HTTP", "SqlQuery"]) == "An HTTP & SqlQuery"

    def test_keep_accepts_any_iterable(self) -> None:
        assert transform(["Uses", "JSON"], keep=(w for w in ["JSON"])) == "Uses JSON"

    def test_whitespace_words_are_joined(self) -> None:
        assert transform(["Two", "  ", "Spaces"]) == "Two    spaces"
