"""Tag registry: the process-wide index of tag names, ids and ancestry.

Usage:
    registry = TagRegistry()
    registry.build(["Combat.Damage.Fire", "Status.Debuff.Slow"])

    fire = registry.resolve_id("Combat.Damage.Fire")
    combat = registry.resolve_id("Combat")  # implicit parent, still registered
    registry.is_descendant_of(fire, combat)  # True

    # Global instance used by GameplayTag / TagContainer by default
    get_registry().rebuild()

Concurrency:
    build() and rebuild() must be serialized by the caller (one writer at a
    time, e.g. at startup or after a config change). Readers may run while a
    build is in progress: each build assembles a fresh TagIndex and installs
    it with a single assignment, so a reader sees either the old or the new
    state, never a mix.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gameplaytags.core.identity import NONE_ID, SEPARATOR, fnv1a_32, parent_paths
from gameplaytags.registry.models import BuildReport, TagIndex
from gameplaytags.registry.protocol import TagSource, TagSourceError

logger = logging.getLogger(__name__)


def _is_well_formed(path: str | None) -> bool:
    if not path:
        return False
    return all(path.split(SEPARATOR))


def compile_index(
    paths: Iterable[str | None],
    *,
    source_available: bool = True,
    error: str | None = None,
) -> TagIndex:
    """Derive a complete tag index from a flat list of dotted paths.

    Pure function of its input: the same sequence always yields the same
    mappings.

    Args:
        paths: Canonical tag paths in registration order. Duplicates are
            ignored (first occurrence wins); blank and malformed entries are
            skipped.
        source_available: Recorded in the report.
        error: Recorded in the report.

    Returns:
        New TagIndex marked as built.
    """
    name_to_id: dict[str, int] = {}
    id_to_name: dict[int, str] = {}
    ancestors: dict[int, frozenset[int]] = {}
    skipped = 0

    def register(name: str) -> tuple[int, bool]:
        if name in name_to_id:
            return name_to_id[name], False
        tag_id = fnv1a_32(name)
        name_to_id[name] = tag_id
        id_to_name.setdefault(tag_id, name)
        return tag_id, True

    # Explicit tags first, so implicit discovery never claims their names
    explicit: list[str] = []
    for path in paths:
        if path is None or not _is_well_formed(path):
            logger.debug("Skipping malformed tag path %r", path)
            skipped += 1
            continue
        _, added = register(path)
        if added:
            explicit.append(path)

    implicit: list[str] = []
    for path in explicit:
        chain: set[int] = set()
        for prefix in parent_paths(path):
            prefix_id, added = register(prefix)
            if added:
                implicit.append(prefix)
            ancestors.setdefault(prefix_id, frozenset(chain))
            chain.add(prefix_id)
        ancestors.setdefault(name_to_id[path], frozenset(chain))

    children: dict[int, list[int]] = {}
    for name, tag_id in name_to_id.items():
        parent, sep, _ = name.rpartition(SEPARATOR)
        if sep:
            children.setdefault(name_to_id[parent], []).append(tag_id)

    report = BuildReport(
        explicit_count=len(explicit),
        implicit_count=len(implicit),
        skipped_count=skipped,
        source_available=source_available,
        error=error,
    )
    return TagIndex(
        name_to_id=name_to_id,
        id_to_name=id_to_name,
        ancestors=ancestors,
        children={parent_id: tuple(ids) for parent_id, ids in children.items()},
        built=True,
        report=report,
    )


class TagRegistry:
    """Name/id mapping and precomputed ancestry for a tag universe.

    Starts unbuilt. The first query triggers a lazy build from ``source``
    unless ``lazy_build`` is False, in which case queries answer from the
    empty state until ``build()`` or ``rebuild()`` is called.

    Args:
        source: Provider of tag paths for lazy builds and ``rebuild()``.
            None means an empty universe.
        lazy_build: Build on first query if not built yet.
    """

    def __init__(self, source: TagSource | None = None, *, lazy_build: bool = True):
        self._source = source
        self._lazy_build = lazy_build
        self._index = TagIndex()

    @property
    def source(self) -> TagSource | None:
        return self._source

    @property
    def is_built(self) -> bool:
        return self._index.built

    @property
    def last_report(self) -> BuildReport | None:
        """Report of the most recent build, or None if never built."""
        index = self._index
        return index.report if index.built else None

    # Building

    def build(self, paths: Iterable[str | None]) -> BuildReport:
        """Replace the registry state with one derived from ``paths``.

        Safe to call repeatedly; each call is a full rebuild.

        Args:
            paths: Ordered tag paths (explicit tags).

        Returns:
            Summary of the new state.
        """
        return self._install(compile_index(paths))

    def rebuild(self) -> BuildReport:
        """Rebuild from the configured source.

        An unavailable source is not fatal: the registry installs an empty,
        valid state and reports ``source_available=False``.

        Returns:
            Summary of the new state.
        """
        if self._source is None:
            return self._install(compile_index(()))
        try:
            paths = self._source.load_tags()
        except TagSourceError as exc:
            logger.warning("Tag source unavailable, building empty registry: %s", exc)
            return self._install(compile_index((), source_available=False, error=str(exc)))
        return self._install(compile_index(paths))

    def ensure_built(self) -> None:
        """Trigger the lazy build if the registry has never been built."""
        if not self._index.built and self._lazy_build:
            self.rebuild()

    def _install(self, index: TagIndex) -> BuildReport:
        self._index = index
        report = index.report
        logger.info(
            "Tag registry built: %d explicit, %d implicit, %d skipped",
            report.explicit_count,
            report.implicit_count,
            report.skipped_count,
        )
        return report

    def _current(self) -> TagIndex:
        self.ensure_built()
        return self._index

    # Lookups

    def resolve_name(self, tag_id: int) -> str | None:
        """Return the registered path for an id, or None if unknown."""
        return self._current().id_to_name.get(tag_id)

    def resolve_id(self, name: str | None) -> int:
        """Return the id for a path.

        Unregistered but well-formed names still get their deterministic
        hash, so the result is stable. Such ids have no ancestry in this
        registry until the path is part of a build.

        Args:
            name: Exact canonical path.

        Returns:
            Registered or computed id; NONE_ID for None/empty input.
        """
        if not name:
            return NONE_ID
        tag_id = self._current().name_to_id.get(name)
        if tag_id is not None:
            return tag_id
        return fnv1a_32(name)

    def is_registered(self, tag_id: int) -> bool:
        return tag_id in self._current().id_to_name

    def is_descendant_of(self, child_id: int, parent_id: int) -> bool:
        """Check whether ``child_id`` equals or sits below ``parent_id``.

        Answers strictly from the last build. Ids the build did not register
        have no ancestry and are never descendants (not even of themselves).

        Args:
            child_id: Candidate descendant.
            parent_id: Candidate ancestor.

        Returns:
            False if either id is NONE_ID or ``child_id`` is unknown.
        """
        if child_id == NONE_ID or parent_id == NONE_ID:
            return False
        ancestors = self._current().ancestors.get(child_id)
        if ancestors is None:
            return False
        return child_id == parent_id or parent_id in ancestors

    def ancestors_of(self, tag_id: int) -> frozenset[int]:
        """All strict ancestors of a tag (empty for roots and unknown ids)."""
        return self._current().ancestors.get(tag_id, frozenset())

    def children_of(self, tag_id: int) -> tuple[int, ...]:
        """Direct children of a tag in registration order."""
        return self._current().children.get(tag_id, ())

    def all_names(self) -> list[str]:
        """Every registered path: explicit tags first, then implicit parents."""
        return list(self._current().name_to_id)

    def __len__(self) -> int:
        return len(self._current().name_to_id)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._current().name_to_id


# Module-level registry instance, created on first use
_registry: TagRegistry | None = None


def _default_registry() -> TagRegistry:
    # Late import to avoid circular dependency
    from gameplaytags.config import SettingsTagSource

    source = SettingsTagSource()
    try:
        lazy_build = source.settings.lazy_build
    except TagSourceError as exc:
        # The same error resurfaces from load_tags() and empties the first build
        logger.warning("Tag settings unreadable, using default lazy_build: %s", exc)
        lazy_build = True
    return TagRegistry(source, lazy_build=lazy_build)


def get_registry() -> TagRegistry:
    """Access the global tag registry.

    Returns:
        The process-wide TagRegistry, created from TagSettings on first call.
    """
    global _registry
    if _registry is None:
        _registry = _default_registry()
    return _registry


def set_registry(registry: TagRegistry) -> TagRegistry | None:
    """Install ``registry`` as the global registry.

    Returns:
        The previously installed registry (None if none was created yet).
    """
    global _registry
    previous = _registry
    _registry = registry
    return previous


def reset_registry() -> None:
    """Drop the global registry; the next ``get_registry()`` creates a fresh one."""
    global _registry
    _registry = None

