"""Unit tests for helpers/punctuation."""

import pytest

from citation_formatter.helpers.punctuation import (
    ensure_period,
    join_apa_names,
    join_segments,
    labelled,
    terminate,
    truncate_names,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Title", "Title."),
        ("Title.", "Title."),
        ("Is it safe?", "Is it safe?"),
        ("Wow!", "Wow!"),
        ("", ""),
    ],
)
def test_terminate(text, expected):
    assert terminate(text) == expected


def test_ensure_period_only_checks_for_period():
    assert ensure_period("Title") == "Title."
    assert ensure_period("Title.") == "Title."
    assert ensure_period("Is it safe?") == "Is it safe?."


def test_labelled():
    assert labelled("Vol.", "15") == "Vol. 15"
    assert labelled("Vol.", None) is None


def test_join_segments_skips_absent():
    assert join_segments(["a", None, "", "b"]) == "a b"
    assert join_segments(["a", None, "b"], separator=", ") == "a, b"
    assert join_segments([None, None]) == ""


@pytest.mark.parametrize(
    "names, expected",
    [
        ([], ""),
        (["A"], "A"),
        (["A", "B"], "A & B"),
        (["A", "B", "C"], "A, B, & C"),
        (["A", "B", "C", "D"], "A, B, C, & D"),
    ],
)
def test_join_apa_names(names, expected):
    assert join_apa_names(names) == expected


def test_truncate_names():
    assert truncate_names(["A", "B"], 3, "et al") == ["A", "B"]
    assert truncate_names(["A", "B", "C"], 3, "et al") == ["A", "B", "C"]
    assert truncate_names(["A", "B", "C", "D"], 3, "et al") == ["A", "B", "C", "et al"]
