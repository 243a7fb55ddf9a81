"""Synchronization of code-declared tags into the tag config and registry.

Usage:
    report = sync_config_file(Path("tags.json"))
"""

from __future__ import annotations

import logging
from pathlib import Path

from gameplaytags.config import TagConfig
from gameplaytags.library.manifest import TagManifest, get_manifest
from gameplaytags.registry import BuildReport, TagRegistry, get_registry

logger = logging.getLogger(__name__)


def sync_generated_tags(
    config: TagConfig,
    manifest: TagManifest | None = None,
    registry: TagRegistry | None = None,
) -> BuildReport:
    """Make the manifest the config's generated tags and rebuild the registry.

    Args:
        config: Config to update in place.
        manifest: Declared tags (global manifest if None).
        registry: Registry to rebuild from the updated config (global if None).

    Returns:
        Report of the registry rebuild.
    """
    manifest = manifest if manifest is not None else get_manifest()
    registry = registry if registry is not None else get_registry()

    config.set_generated_tags(manifest.paths)
    logger.info(
        "Synced %d generated tags into config (%d tags total)",
        len(config.generated_tags),
        len(config.tags),
    )
    return registry.build(config.all_tags())


def sync_config_file(
    path: Path,
    manifest: TagManifest | None = None,
    registry: TagRegistry | None = None,
) -> BuildReport:
    """Load (or start) a config file, sync the manifest into it and save it.

    Args:
        path: JSON config file. Created if it does not exist.
        manifest: Declared tags (global manifest if None).
        registry: Registry to rebuild (global if None).

    Returns:
        Report of the registry rebuild.

    Raises:
        TagSourceError: If the file exists but cannot be read or parsed.
    """
    config = TagConfig.load(path) if path.exists() else TagConfig()
    report = sync_generated_tags(config, manifest=manifest, registry=registry)
    config.save(path)
    return report
