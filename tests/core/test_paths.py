"""Tests for canonical path helpers."""

import pytest

from gameplaytags.core.identity import canonicalize, is_canonical, last_segment, parent_paths


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Combat.Damage.Fire", "Combat.Damage.Fire"),
        ("  Combat.Damage  ", "Combat.Damage"),
        ("Combat . Damage", "Combat.Damage"),
        ("Root", "Root"),
        ("", None),
        ("   ", None),
        (None, None),
        ("A..B", None),
        ("A.", None),
        (".A", None),
        ("A. .B", None),
    ],
)
def test_canonicalize(raw, expected):
    assert canonicalize(raw) == expected


def test_canonical_form_is_case_preserving():
    assert canonicalize("combat.Damage") == "combat.Damage"


def test_is_canonical():
    assert is_canonical("A.B")
    assert not is_canonical(" A.B")
    assert not is_canonical(None)


def test_parent_paths_shortest_first():
    assert list(parent_paths("Combat.Damage.Fire")) == ["Combat", "Combat.Damage"]
    assert list(parent_paths("Combat")) == []


def test_last_segment():
    assert last_segment("Effect.Slow") == "Slow"
    assert last_segment("Effect") == "Effect"
