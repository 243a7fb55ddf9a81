"""Tag identity models.

Usage:
    fire = GameplayTag.from_path("Combat.Damage.Fire")
    damage = GameplayTag.from_path("Combat.Damage")
    fire.matches_or_is_descendant_of(damage)  # True once the registry is built

    restored = GameplayTag.from_raw_id(fire.to_raw())
    assert restored == fire
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from gameplaytags.core.identity.hashing import NONE_ID, fnv1a_32
from gameplaytags.core.identity.paths import last_segment

if TYPE_CHECKING:
    from gameplaytags.registry import TagRegistry


def _resolve_registry(registry: TagRegistry | None) -> TagRegistry:
    if registry is not None:
        return registry
    # Late import to avoid circular dependency
    from gameplaytags.registry import get_registry

    return get_registry()


@dataclass(frozen=True, slots=True, order=True)
class GameplayTag:
    """Lightweight handle for a gameplay tag: a 32-bit hash of its path.

    Equality, ordering and hashing use only ``id``. The handle carries no
    name; names are resolved through the tag registry when displayed.
    """

    id: int = NONE_ID

    NONE: ClassVar[GameplayTag]

    @classmethod
    def from_path(cls, path: str | None) -> GameplayTag:
        """Create a tag from its dotted path.

        The path is hashed as given; callers pass canonical paths. Works
        whether or not the registry has been built.

        Args:
            path: Canonical tag path, e.g. ``"Effect.Slow"``.

        Returns:
            Tag for the path, or ``GameplayTag.NONE`` for None/empty input.
        """
        if not path:
            return cls.NONE
        return cls(fnv1a_32(path))

    @classmethod
    def from_raw_id(cls, raw_id: int) -> GameplayTag:
        """Wrap a persisted id without validation."""
        return cls(raw_id)

    @property
    def is_valid(self) -> bool:
        return self.id != NONE_ID

    @property
    def is_none(self) -> bool:
        return self.id == NONE_ID

    def to_raw(self) -> int:
        """Serialized form of the tag (the bare integer id)."""
        return self.id

    def matches_or_is_descendant_of(
        self, other: GameplayTag, registry: TagRegistry | None = None
    ) -> bool:
        """Check if this tag equals ``other`` or sits below it in the hierarchy.

        Args:
            other: Candidate ancestor tag.
            registry: Registry to consult (global registry if None).

        Returns:
            False when ``other`` is NONE, True when equal, otherwise whether
            the registry lists ``other`` among this tag's ancestors.
        """
        if other.is_none:
            return False
        if self.id == other.id:
            return True
        return _resolve_registry(registry).is_descendant_of(self.id, other.id)

    def name(self, registry: TagRegistry | None = None) -> str | None:
        """Registered path for this tag, or None if the registry has none."""
        return _resolve_registry(registry).resolve_name(self.id)

    def display_name(self, registry: TagRegistry | None = None) -> str:
        """Registered path, or ``#<id>`` for ids the registry does not know.

        Unknown ids are expected for runtime-only tags absent from the loaded
        tag list, so this never raises.
        """
        resolved = self.name(registry)
        return resolved if resolved else f"#{self.id}"

    def last_segment(self, registry: TagRegistry | None = None) -> str:
        """Last part of the display name (``"Slow"`` for ``"Effect.Slow"``)."""
        return last_segment(self.display_name(registry))

    def __str__(self) -> str:
        return self.display_name()

    def __repr__(self) -> str:
        return f"GameplayTag(id={self.id})"


GameplayTag.NONE = GameplayTag(NONE_ID)
