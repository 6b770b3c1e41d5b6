# tests/test_string_tools.py
"""
Tests for utils.string_tools.capitalize.
"""

from __future__ import annotations

import re

import pytest

from utils.string_tools import MATCH_LETTER, MATCH_NON_LETTER, capitalize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("you jumped!", "You jumped!"),
        ("  the goblin fled.", "  The goblin fled."),
        ('"ñandú," I said', '"Ñandú," I said'),
        ("...élan", "...Élan"),
        ("42 ogres arrived", "42 Ogres arrived"),
        ("_under score", "_Under score"),
        ("ωμέγα", "Ωμέγα"),
        ("Already Capital", "Already Capital"),
        ("``e vanished.", "``E vanished."),
    ],
)
def test_capitalize_first_letter(text, expected) -> None:
    assert capitalize(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "1234 ...", "!?"])
def test_capitalize_without_letters_is_identity(text) -> None:
    assert capitalize(text) == text


def test_capitalize_only_touches_one_character() -> None:
    assert capitalize("i saw i") == "I saw i"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ßtraße", "ßtraße"),
        ("ŉ test", "ŉ test"),
        ("ﬁre", "ﬁre"),
        ("ǆungla", "ǅungla"),
    ],
)
def test_capitalize_never_changes_length(text, expected) -> None:
    result = capitalize(text)
    assert result == expected
    assert len(result) == len(text)


def test_capitalize_is_idempotent() -> None:
    for text in ["you were", "ßtraße", "  ǆungla"]:
        once = capitalize(text)
        assert capitalize(once) == once


def test_letter_classes_are_complementary() -> None:
    for ch in "aZé9_ -Жω":
        assert bool(re.fullmatch(MATCH_LETTER, ch)) != bool(re.fullmatch(MATCH_NON_LETTER, ch))
