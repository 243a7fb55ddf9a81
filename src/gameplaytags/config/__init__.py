"""Configuration module: tag settings, the tag config model and tag sources.

Usage:
    from gameplaytags.config import FileTagSource, TagConfig, TagSettings

    settings = TagSettings(config_file="tags.json")
    config = TagConfig(tags=["Combat.Damage.Fire"])
"""

from gameplaytags.config.models import TagConfig, sanitize_paths
from gameplaytags.config.settings import TagSettings
from gameplaytags.config.sources import FileTagSource, SettingsTagSource, StaticTagSource

__all__ = [
    "TagSettings",
    "TagConfig",
    "sanitize_paths",
    "StaticTagSource",
    "FileTagSource",
    "SettingsTagSource",
]
