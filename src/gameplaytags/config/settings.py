"""Configuration settings using Pydantic Settings.

Usage:
    from gameplaytags.config import TagSettings

    # Load from environment variables (GAMEPLAYTAGS_*)
    settings = TagSettings()

    # Or override with explicit values
    settings = TagSettings(config_file="tags.json", lazy_build=False)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TagSettings(BaseSettings):  # type: ignore[misc]
    """Where the global tag registry finds its tag universe.

    Attributes:
        config_file: JSON tag config file (see TagConfig). None to skip.
        tags: Extra tag paths, e.g. ``GAMEPLAYTAGS_TAGS='["A.B", "C"]'``.
        lazy_build: Build the registry on first query if not built yet.

    Environment Variables:
        GAMEPLAYTAGS_CONFIG_FILE
        GAMEPLAYTAGS_TAGS
        GAMEPLAYTAGS_LAZY_BUILD
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMEPLAYTAGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_file: Path | None = None
    tags: list[str] = Field(default_factory=list)
    lazy_build: bool = True
