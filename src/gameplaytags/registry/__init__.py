"""Tag registry: the stateful index behind tag names, ids and ancestry."""

from gameplaytags.registry.models import BuildReport, TagIndex
from gameplaytags.registry.protocol import TagSource, TagSourceError
from gameplaytags.registry.registry import (
    TagRegistry,
    compile_index,
    get_registry,
    reset_registry,
    set_registry,
)

__all__ = [
    "TagRegistry",
    "TagIndex",
    "BuildReport",
    "TagSource",
    "TagSourceError",
    "compile_index",
    "get_registry",
    "set_registry",
    "reset_registry",
]
