"""Tag identity functionality: path hashing, canonical paths and tag handles."""

from gameplaytags.core.identity.hashing import NONE_ID, fnv1a_32
from gameplaytags.core.identity.models import GameplayTag
from gameplaytags.core.identity.paths import (
    SEPARATOR,
    canonicalize,
    is_canonical,
    last_segment,
    parent_paths,
)

__all__ = [
    "GameplayTag",
    "NONE_ID",
    "SEPARATOR",
    "fnv1a_32",
    "canonicalize",
    "is_canonical",
    "last_segment",
    "parent_paths",
]
