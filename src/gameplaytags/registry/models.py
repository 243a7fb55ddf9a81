"""Registry data models: build reports and the immutable index snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class BuildReport:
    """Outcome of a registry build.

    Attributes:
        explicit_count: Distinct paths registered from the input.
        implicit_count: Parent prefixes registered without being listed.
        skipped_count: Blank or malformed input entries that were ignored.
        source_available: False if the tag source could not be read and the
            registry fell back to an empty universe.
        error: Message from the source failure, if any.
    """

    explicit_count: int = 0
    implicit_count: int = 0
    skipped_count: int = 0
    source_available: bool = True
    error: str | None = None

    @property
    def total_count(self) -> int:
        """All tags known after the build, explicit and implicit."""
        return self.explicit_count + self.implicit_count


@dataclass(slots=True, frozen=True)
class TagIndex:
    """One complete registry state, replaced as a whole on every build.

    Readers grab a reference to the current index once per query, so a
    concurrent rebuild never exposes a half-filled state. Treat the dicts as
    read-only.

    Attributes:
        name_to_id: Path -> id for explicit and implicit tags.
        id_to_name: Id -> path (first registration wins).
        ancestors: Id -> all strict ancestor ids, direct and transitive.
        children: Id -> direct child ids in registration order.
        built: False only for the initial placeholder index.
        report: Summary of the build that produced this index.
    """

    name_to_id: dict[str, int] = field(default_factory=dict)
    id_to_name: dict[int, str] = field(default_factory=dict)
    ancestors: dict[int, frozenset[int]] = field(default_factory=dict)
    children: dict[int, tuple[int, ...]] = field(default_factory=dict)
    built: bool = False
    report: BuildReport = field(default_factory=BuildReport)
