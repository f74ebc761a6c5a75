"""Tests for utils/camelcase.py — splitting identifiers into words."""

from __future__ import annotations

import pytest

from seesharp.utils.camelcase import split

# ── Known identifiers ────────────────────────────────────────────


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", [""]),
        ("lowercase", ["lowercase"]),
        ("Uppercase", ["Uppercase"]),
        ("MultipleWords", ["Multiple", "Words"]),
        ("MyID", ["My", "ID"]),
        ("HTML", ["HTML"]),
        ("PDFLoader", ["PDF", "Loader"]),
        ("ASample", ["A", "Sample"]),
        ("EasyXMLParser", ["Easy", "XML", "Parser"]),
        ("vimRPCPlugin", ["vim", "RPC", "Plugin"]),
        ("GL11Version", ["GL", "11", "Version"]),
        ("10", ["10"]),
        ("10Validators", ["10", "Validators"]),
        ("May5", ["May", "5"]),
        ("BFG9000", ["BFG", "9000"]),
        ("Html2Version", ["Html", "2", "Version"]),
        ("5May2000", ["5", "May", "2000"]),
        ("Two  spaces", ["Two", "  ", "spaces"]),
    ],
)
def test_split(value: str, expected: list[str]) -> None:
    assert split(value) == expected


class TestInvalidInput:
    def test_invalid_utf8_is_returned_whole(self) -> None:
        value = b"BadUTF8\xe2\xe2\xa1".decode("utf-8", errors="surrogateescape")
        assert split(value) == [value]

    def test_empty_string(self) -> None:
        assert split("") == [""]


# ── Acronym boundaries ───────────────────────────────────────────


class TestAcronyms:
    def test_acronym_before_space_is_kept_whole(self) -> None:
        assert split("HTTP Server") == ["HTTP", " ", "Server"]

    def test_acronym_at_end(self) -> None:
        assert split("ParseJSON") == ["Parse", "JSON"]

    def test_acronym_before_digits(self) -> None:
        assert split("UTF8Decoder") == ["UTF", "8", "Decoder"]

    def test_single_lowercase_before_word(self) -> None:
        assert split("iPhone") == ["i", "Phone"]

    def test_lowercase_followed_by_acronym(self) -> None:
        assert split("xID") == ["x", "ID"]

    def test_two_letter_acronym_before_word(self) -> None:
        assert split("IOStream") == ["IO", "Stream"]


# ── Other characters ─────────────────────────────────────────────


class TestOtherCharacters:
    def test_underscore_stays_with_following_word(self) -> None:
        assert split("Given_When") == ["Given", "_When"]

    def test_trailing_symbol_stays_with_last_word(self) -> None:
        assert split("Works!") == ["Works!"]

    def test_only_symbols(self) -> None:
        assert split("&&") == ["&&"]


# ── Lossless partition ───────────────────────────────────────────


@pytest.mark.parametrize(
    "value",
    [
        "EasyXMLParser",
        "GL11Version",
        "Two  spaces",
        "Should_ReturnHTTP404_WhenNotFound",
        "A1B2C3",
        "ABCdefGHI",
        "   leadingSpaces",
        "trailingSpaces   ",
        "mixed\tTabs\nAndNewlines",
        "Über5Straße",
        "X",
        "x",
        "9",
        "__init__",
        "Html2Version(arg: null)",
    ],
)
def test_split_is_lossless(value: str) -> None:
    words = split(value)
    assert "".join(words) == value
    assert all(words)
