"""Tag sources: providers of the tag universe for the registry.

Usage:
    registry = TagRegistry(source=StaticTagSource(["Combat.Damage.Fire"]))
    registry = TagRegistry(source=FileTagSource(Path("tags.json")))
    registry = TagRegistry(source=SettingsTagSource())  # GAMEPLAYTAGS_* env
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import SettingsError

from gameplaytags.config.models import TagConfig, sanitize_paths
from gameplaytags.config.settings import TagSettings
from gameplaytags.registry.protocol import TagSourceError


class StaticTagSource:
    """Fixed in-memory tag list."""

    def __init__(self, paths: Iterable[str | None] = ()):
        self._paths = list(paths)

    def load_tags(self) -> list[str]:
        return sanitize_paths(self._paths)


class FileTagSource:
    """Tag list read from a JSON TagConfig file on every load.

    Args:
        path: Location of the config file.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_tags(self) -> list[str]:
        """Load authored and generated tags from the file.

        Raises:
            TagSourceError: If the file is missing or invalid.
        """
        return TagConfig.load(self._path).all_tags()


class SettingsTagSource:
    """Tag list assembled from TagSettings: the config file plus inline tags.

    Args:
        settings: Settings to read. Loaded from the environment if None.
    """

    def __init__(self, settings: TagSettings | None = None):
        self._settings = settings

    @property
    def settings(self) -> TagSettings:
        """Settings in use, read from the environment on first access.

        Raises:
            TagSourceError: If the environment holds values that do not parse.
        """
        if self._settings is None:
            try:
                self._settings = TagSettings()
            except (SettingsError, ValidationError) as e:
                raise TagSourceError(f"Invalid tag settings: {e}") from e
        return self._settings

    def load_tags(self) -> list[str]:
        """Load the union of the config file's tags and the inline tags.

        Raises:
            TagSourceError: If the settings do not parse, or a config file is
                set but cannot be read.
        """
        settings = self.settings
        paths = list(settings.tags)
        if settings.config_file is not None:
            paths.extend(FileTagSource(settings.config_file).load_tags())
        return sanitize_paths(paths)
