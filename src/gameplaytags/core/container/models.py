"""Tag container: a duplicate-free tag collection with hierarchy-aware queries.

Usage:
    active = TagContainer.of(GameplayTag.from_path("Status.Debuff.Slow"))

    active.has_tag(GameplayTag.from_path("Status.Debuff"))  # True
    active.has_tag_exact(GameplayTag.from_path("Status.Debuff"))  # False

    required = TagContainer.of(GameplayTag.from_path("Status"))
    active.has_all(required)  # True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from gameplaytags.core.identity import GameplayTag

if TYPE_CHECKING:
    from gameplaytags.registry import TagRegistry


class TagContainer:
    """Ordered, duplicate-free collection of gameplay tags.

    Insertion order is kept for display but carries no meaning; equality
    ignores it. Every operation is total: invalid or empty input yields a
    False/no-op result, never an exception.

    Not synchronized. Callers sharing a container across threads must guard
    mutation themselves.

    Args:
        tags: Initial tags. Invalid tags and duplicates are dropped.
        registry: Registry used for hierarchy queries (global registry if None).
    """

    __slots__ = ("_tags", "_registry")

    def __init__(
        self,
        tags: Iterable[GameplayTag] = (),
        *,
        registry: TagRegistry | None = None,
    ):
        self._tags: list[GameplayTag] = []
        self._registry = registry
        for tag in tags:
            self.add(tag)

    @classmethod
    def of(cls, *tags: GameplayTag, registry: TagRegistry | None = None) -> TagContainer:
        """Build a container from tags given as arguments."""
        return cls(tags, registry=registry)

    @classmethod
    def from_raw_ids(
        cls, raw_ids: Iterable[int], *, registry: TagRegistry | None = None
    ) -> TagContainer:
        """Restore a container from persisted integer ids."""
        return cls((GameplayTag.from_raw_id(raw) for raw in raw_ids), registry=registry)

    def to_raw_ids(self) -> list[int]:
        """Serialized form: the bare integer ids in insertion order."""
        return [tag.to_raw() for tag in self._tags]

    # Mutation

    def add(self, tag: GameplayTag) -> None:
        """Append a tag unless it is invalid or already present."""
        if not tag.is_valid or tag in self._tags:
            return
        self._tags.append(tag)

    def remove(self, tag: GameplayTag) -> bool:
        """Remove a tag by exact match.

        Returns:
            True if the tag was present.
        """
        try:
            self._tags.remove(tag)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._tags.clear()

    # Single-tag queries

    def has_tag(self, tag_or_parent: GameplayTag) -> bool:
        """Hierarchy-aware contains.

        True if any stored tag equals ``tag_or_parent`` or is a descendant of
        it, so a query for a broad tag matches more specific stored tags.
        Note the direction: each stored tag is tested against the query
        (``stored.matches_or_is_descendant_of(query)``), not the reverse.
        """
        if not tag_or_parent.is_valid or not self._tags:
            return False
        return any(
            stored.matches_or_is_descendant_of(tag_or_parent, self._registry)
            for stored in self._tags
        )

    def has_tag_exact(self, tag: GameplayTag) -> bool:
        """True if exactly this tag is stored."""
        if not tag.is_valid or not self._tags:
            return False
        return tag in self._tags

    # Multi-tag queries

    def has_any(self, other: TagContainer) -> bool:
        """True if any tag of ``other`` passes ``has_tag`` against this container."""
        if not self._tags or not other._tags:
            return False
        return any(self.has_tag(tag) for tag in other._tags)

    def has_any_exact(self, other: TagContainer) -> bool:
        """True if any tag of ``other`` is stored here verbatim."""
        if not self._tags or not other._tags:
            return False
        return any(self.has_tag_exact(tag) for tag in other._tags)

    def has_all(self, other: TagContainer) -> bool:
        """True if every tag of ``other`` passes ``has_tag``.

        Vacuously true when ``other`` is empty, even if this container is.
        """
        if not other._tags:
            return True
        if not self._tags:
            return False
        return all(self.has_tag(tag) for tag in other._tags)

    def has_all_exact(self, other: TagContainer) -> bool:
        """Exact-match analogue of ``has_all``."""
        if not other._tags:
            return True
        if not self._tags:
            return False
        return all(self.has_tag_exact(tag) for tag in other._tags)

    # Collection protocol

    @property
    def tags(self) -> tuple[GameplayTag, ...]:
        """Read-only snapshot of the stored tags."""
        return tuple(self._tags)

    @property
    def is_empty(self) -> bool:
        return not self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[GameplayTag]:
        return iter(tuple(self._tags))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, GameplayTag) and self.has_tag_exact(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagContainer):
            return NotImplemented
        return set(self._tags) == set(other._tags)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._tags:
            return "{}"
        return "{" + ", ".join(tag.display_name(self._registry) for tag in self._tags) + "}"

    def __repr__(self) -> str:
        return f"TagContainer({self._tags!r})"
