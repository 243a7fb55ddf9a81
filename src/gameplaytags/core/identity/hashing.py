"""Deterministic tag path hashing.

Usage:
    tag_id = fnv1a_32("Combat.Damage.Fire")
"""

from __future__ import annotations

# 32-bit FNV-1a constants
# Algorithm: hash = (hash XOR byte) * FNV_PRIME, wrapped to 32 bits
FNV1A_32_OFFSET_BASIS = 2166136261  # 0x811c9dc5
FNV1A_32_PRIME = 16777619  # 0x01000193
UINT32_MASK = 0xFFFFFFFF

NONE_ID = 0  # reserved "no tag" id
REMAPPED_ID = 1  # hashes landing on NONE_ID are remapped here


def fnv1a_32(text: str) -> int:
    """Hash a tag path to a stable, non-zero 32-bit id.

    Hashes the UTF-8 encoding of the path, so the result is identical across
    processes and platforms (unlike the builtin ``hash()``).

    Two distinct paths could in theory both end up on ``REMAPPED_ID``: one
    hashing to 1 naturally and one hashing to 0. The odds are negligible for
    a tag universe of a few thousand entries and the case is not handled.

    Args:
        text: Canonical tag path.

    Returns:
        Unsigned 32-bit id, never ``NONE_ID``.
    """
    value = FNV1A_32_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * FNV1A_32_PRIME) & UINT32_MASK
    if value == NONE_ID:
        return REMAPPED_ID
    return value
