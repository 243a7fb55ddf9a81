"""Tests for the code-first tag manifest."""

import pytest

from gameplaytags import EffectApplyFailReasons, GameplayTag, TagManifest, get_manifest


@pytest.fixture
def manifest():
    return TagManifest()


def test_declare_returns_tag_handle(manifest):
    tag = manifest.declare("Effect.FailReason.Blocked")

    assert tag == GameplayTag.from_path("Effect.FailReason.Blocked")
    assert "Effect.FailReason.Blocked" in manifest


def test_declare_is_idempotent(manifest):
    manifest.declare("A.B")
    manifest.declare("A.B")

    assert manifest.paths == ("A.B",)
    assert len(manifest) == 1


def test_declare_keeps_declaration_order(manifest):
    manifest.declare("Z")
    manifest.declare("A")

    assert list(manifest) == ["Z", "A"]


@pytest.mark.parametrize("path", ["", "  A.B", "A..B", "A.", "A . B"])
def test_declare_rejects_non_canonical_paths(manifest, path):
    with pytest.raises(ValueError, match="not a canonical path"):
        manifest.declare(path)


def test_builtin_tags_are_declared_globally():
    """Built-in fail reasons are registered in the global manifest on import."""
    paths = get_manifest().paths

    assert "Effect.FailReason.MaxStacksReached" in paths
    assert "Effect.FailReason.FailedInternalCheck" in paths
    assert "Effect.FailReason.DuplicateDiscarded" in paths
    assert "Effect.FailReason.OppositeTagConsumed" in paths


def test_builtin_tags_have_stable_ids():
    assert EffectApplyFailReasons.MAX_STACKS_REACHED == GameplayTag.from_path(
        "Effect.FailReason.MaxStacksReached"
    )
    assert EffectApplyFailReasons.MAX_STACKS_REACHED.is_valid
