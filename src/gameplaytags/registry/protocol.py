"""Tag source protocol: where the registry gets its tag universe.

Usage:
    class MySource:
        def load_tags(self) -> list[str]:
            return ["Combat.Damage.Fire", "Status.Debuff.Slow"]

    registry = TagRegistry(source=MySource())
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class TagSourceError(Exception):
    """Raised when a tag source cannot provide its tag list at all."""

    pass


@runtime_checkable
class TagSource(Protocol):
    """Provider of an ordered list of unique, canonical tag paths."""

    def load_tags(self) -> list[str]:
        """Return the current tag universe.

        Raises:
            TagSourceError: If the underlying store is unavailable.
        """
        ...
