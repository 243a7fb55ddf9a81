"""Code-first tags: the tag manifest, built-in tags and config sync."""

from gameplaytags.library.builtin import EffectApplyFailReasons
from gameplaytags.library.manifest import TagManifest, declare_tag, get_manifest
from gameplaytags.library.sync import sync_config_file, sync_generated_tags

__all__ = [
    "TagManifest",
    "declare_tag",
    "get_manifest",
    "EffectApplyFailReasons",
    "sync_generated_tags",
    "sync_config_file",
]
