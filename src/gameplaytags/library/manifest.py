"""Tag manifest: explicit registration list for tags declared in code.

Code that references tags by constant declares them here instead of relying
on magic strings. The manifest is later merged into the tag config as its
generated tags (see ``sync_generated_tags``).

Usage:
    SLOW = declare_tag("Status.Debuff.Slow")

    class Reasons:
        BLOCKED = declare_tag("Effect.FailReason.Blocked")
"""

from __future__ import annotations

from collections.abc import Iterator

from gameplaytags.core.identity import GameplayTag, canonicalize


class TagManifest:
    """Ordered, duplicate-free list of tag paths declared from code."""

    def __init__(self) -> None:
        self._paths: list[str] = []

    def declare(self, path: str) -> GameplayTag:
        """Record a tag path and return its handle.

        Args:
            path: Canonical tag path.

        Returns:
            GameplayTag for the path (usable before any registry build).

        Raises:
            ValueError: If the path is blank or not in canonical form.
        """
        if canonicalize(path) != path:
            raise ValueError(
                f"Declared tag {path!r} is not a canonical path. "
                f"Use trimmed, non-empty segments joined by '.'"
            )
        if path not in self._paths:
            self._paths.append(path)
        return GameplayTag.from_path(path)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._paths))

    def __contains__(self, path: object) -> bool:
        return path in self._paths


# Module-level manifest instance
_manifest = TagManifest()


def get_manifest() -> TagManifest:
    """Access the global tag manifest."""
    return _manifest


def declare_tag(path: str) -> GameplayTag:
    """Declare a tag in the global manifest and return its handle."""
    return _manifest.declare(path)
