"""Tag container functionality: hierarchy-aware tag sets."""

from gameplaytags.core.container.models import TagContainer

__all__ = [
    "TagContainer",
]
