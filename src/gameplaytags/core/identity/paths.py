"""Canonical tag path helpers.

A canonical path is one or more non-empty, whitespace-trimmed segments joined
by ``.``. Comparison is ordinal and case-sensitive.

Usage:
    canonicalize(" Combat . Damage ")  # "Combat.Damage"
    list(parent_paths("Combat.Damage.Fire"))  # ["Combat", "Combat.Damage"]
"""

from __future__ import annotations

from collections.abc import Iterator

SEPARATOR = "."


def canonicalize(path: str | None) -> str | None:
    """Return the canonical form of a path, or None if it has none.

    Args:
        path: Raw path as authored (may carry stray whitespace).

    Returns:
        Trimmed, dot-joined path, or None for blank paths and paths with an
        empty segment (e.g. ``"A..B"`` or ``"A."``).
    """
    if path is None:
        return None
    stripped = path.strip()
    if not stripped:
        return None
    segments = [segment.strip() for segment in stripped.split(SEPARATOR)]
    if any(not segment for segment in segments):
        return None
    return SEPARATOR.join(segments)


def is_canonical(path: str | None) -> bool:
    """Check whether a path is already in canonical form."""
    return path is not None and canonicalize(path) == path


def parent_paths(path: str) -> Iterator[str]:
    """Yield every strict prefix of a path, shortest first.

    Args:
        path: Canonical tag path.

    Yields:
        ``"A"``, ``"A.B"`` for ``"A.B.C"``; nothing for a single segment.
    """
    segments = path.split(SEPARATOR)
    for end in range(1, len(segments)):
        yield SEPARATOR.join(segments[:end])


def last_segment(path: str) -> str:
    """Text after the last separator, or the whole path."""
    return path.rpartition(SEPARATOR)[2]
