"""gameplaytags: hierarchical gameplay tags with stable integer ids.

Usage:
    from gameplaytags import GameplayTag, TagContainer, get_registry

    get_registry().build(["Status.Debuff.Slow", "Status.Buff.Haste"])

    active = TagContainer.of(GameplayTag.from_path("Status.Debuff.Slow"))
    active.has_tag(GameplayTag.from_path("Status.Debuff"))  # True
    active.has_tag_exact(GameplayTag.from_path("Status.Debuff"))  # False
"""

__version__ = "0.1.0"

# Configuration
from gameplaytags.config import (
    FileTagSource,
    SettingsTagSource,
    StaticTagSource,
    TagConfig,
    TagSettings,
)

# Core primitives
from gameplaytags.core import (
    NONE_ID,
    GameplayTag,
    TagContainer,
    canonicalize,
    fnv1a_32,
)

# Code-first tags
from gameplaytags.library import (
    EffectApplyFailReasons,
    TagManifest,
    declare_tag,
    get_manifest,
    sync_config_file,
    sync_generated_tags,
)

# Registry
from gameplaytags.registry import (
    BuildReport,
    TagRegistry,
    TagSource,
    TagSourceError,
    get_registry,
    reset_registry,
    set_registry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "GameplayTag",
    "TagContainer",
    "NONE_ID",
    "canonicalize",
    "fnv1a_32",
    # Registry
    "TagRegistry",
    "BuildReport",
    "TagSource",
    "TagSourceError",
    "get_registry",
    "set_registry",
    "reset_registry",
    # Config
    "TagSettings",
    "TagConfig",
    "StaticTagSource",
    "FileTagSource",
    "SettingsTagSource",
    # Library
    "TagManifest",
    "declare_tag",
    "get_manifest",
    "EffectApplyFailReasons",
    "sync_generated_tags",
    "sync_config_file",
]
