"""Tag configuration model: the authored tag universe and its sanitization.

The config keeps two lists. ``tags`` is the full universe; ``generated_tags``
tracks entries that came from code (the tag manifest) so they can be replaced
wholesale on the next sync without touching hand-authored tags.

Usage:
    config = TagConfig.load(Path("tags.json"))
    config.set_generated_tags(["Effect.FailReason.MaxStacksReached"])
    config.save(Path("tags.json"))
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gameplaytags.core.identity import canonicalize
from gameplaytags.registry.protocol import TagSourceError


def sanitize_paths(paths: Iterable[str | None]) -> list[str]:
    """Canonicalize, drop blank/malformed entries, de-duplicate and sort.

    Sorting is ordinal (code point order), matching tag comparison rules.
    """
    canonical = {path for path in map(canonicalize, paths) if path is not None}
    return sorted(canonical)


class TagConfig(BaseModel):
    """Persisted list of allowed tags, using dot notation for hierarchy.

    Attributes:
        tags: Every allowed tag path (e.g. ``Combat.Damage.Fire``).
        generated_tags: Subset of ``tags`` synchronized from code.
    """

    model_config = ConfigDict(extra="ignore")

    tags: list[str] = Field(default_factory=list)
    generated_tags: list[str] = Field(default_factory=list)

    def sanitized_tags(self) -> list[str]:
        return sanitize_paths(self.tags)

    def sanitized_generated_tags(self) -> list[str]:
        return sanitize_paths(self.generated_tags)

    def all_tags(self) -> list[str]:
        """Sanitized union of authored and generated tags."""
        return sanitize_paths([*self.tags, *self.generated_tags])

    def set_generated_tags(self, paths: Iterable[str | None]) -> None:
        """Replace the code-generated tags.

        Previously generated entries are removed from ``tags`` first, so tags
        renamed or deleted in code do not linger. Hand-authored tags are kept.

        Args:
            paths: New generated tag paths (sanitized before storing).
        """
        old_generated = set(self.sanitized_generated_tags())
        new_generated = sanitize_paths(paths)
        custom = [tag for tag in self.tags if canonicalize(tag) not in old_generated]
        self.tags = sanitize_paths([*new_generated, *custom])
        self.generated_tags = new_generated

    def normalize(self) -> bool:
        """Sanitize both lists and make sure every generated tag is listed.

        Returns:
            True if either list changed.
        """
        generated = self.sanitized_generated_tags()
        tags = sanitize_paths([*self.tags, *generated])
        changed = generated != self.generated_tags or tags != self.tags
        self.generated_tags = generated
        self.tags = tags
        return changed

    def is_valid(self, path: str | None) -> bool:
        """Check whether ``path`` is one of the configured tags."""
        if not path:
            return False
        return path in self.sanitized_tags()

    @classmethod
    def load(cls, path: Path) -> TagConfig:
        """Read a config from a JSON file.

        Raises:
            TagSourceError: If the file is missing, unreadable, not UTF-8 or invalid.
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TagSourceError(f"Cannot read tag config {path}: {e}") from e
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise TagSourceError(f"Invalid tag config {path}: {e}") from e

    def save(self, path: Path) -> None:
        """Write the config as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2) + "\n", encoding="utf-8")
