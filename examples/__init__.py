"""Example tags and tag holders for gameplaytags.

This package demonstrates library usage but is not part of the core API.
"""

from .tags import Status

__all__ = [
    "Status",
]
