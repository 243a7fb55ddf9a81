"""Centralized tags referenced from code without magic strings.

Ids are FNV-1a hashes of the full path, so they are stable across sessions
even before the registry is built. Sync the manifest into the tag config for
readable names and hierarchy queries.
"""

from __future__ import annotations

from gameplaytags.library.manifest import declare_tag


class EffectApplyFailReasons:
    """Standardized reasons why applying an effect was denied."""

    # Effect already has its configured maximum number of stacks
    MAX_STACKS_REACHED = declare_tag("Effect.FailReason.MaxStacksReached")
    # Effect's own pre-apply validation failed (requirements not met)
    FAILED_INTERNAL_CHECK = declare_tag("Effect.FailReason.FailedInternalCheck")
    # Duplicate effect with the same tag was discarded by stacking policy
    DUPLICATE_DISCARDED = declare_tag("Effect.FailReason.DuplicateDiscarded")
    # Opposite tag on the target lost a stack instead of this effect applying
    OPPOSITE_TAG_CONSUMED = declare_tag("Effect.FailReason.OppositeTagConsumed")
