"""Core functionalities: stateless tag identity and tag containers.

Architecture Note:
    core/ holds value types and pure functions with no process-wide state.
    The stateful tag index lives in registry/; configuration in config/.
"""

from gameplaytags.core.container import TagContainer
from gameplaytags.core.identity import (
    NONE_ID,
    SEPARATOR,
    GameplayTag,
    canonicalize,
    fnv1a_32,
    is_canonical,
    last_segment,
    parent_paths,
)

__all__ = [
    # Identity
    "GameplayTag",
    "NONE_ID",
    "SEPARATOR",
    "fnv1a_32",
    "canonicalize",
    "is_canonical",
    "last_segment",
    "parent_paths",
    # Container
    "TagContainer",
]
