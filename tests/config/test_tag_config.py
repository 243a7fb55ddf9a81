"""Tests for TagConfig sanitization and the generated-tag merge policy."""

import pytest

from gameplaytags import TagConfig, TagSourceError
from gameplaytags.config import sanitize_paths


def test_sanitize_trims_dedups_and_sorts():
    raw = ["  Status.Debuff ", "Combat", "", "   ", None, "Status.Debuff", "A..B", "Combat . Fire"]

    assert sanitize_paths(raw) == ["Combat", "Combat.Fire", "Status.Debuff"]


def test_sanitize_sort_is_ordinal():
    """Uppercase sorts before lowercase, as in ordinal comparison."""
    assert sanitize_paths(["b", "B", "a", "A"]) == ["A", "B", "a", "b"]


def test_set_generated_tags_merges_and_tracks():
    config = TagConfig(tags=["Custom.Tag"])

    config.set_generated_tags(["Effect.FailReason.Blocked", " Effect.FailReason.Blocked "])

    assert config.generated_tags == ["Effect.FailReason.Blocked"]
    assert config.tags == ["Custom.Tag", "Effect.FailReason.Blocked"]


def test_set_generated_tags_drops_stale_generated():
    """Tags renamed or removed in code must not linger in the config."""
    config = TagConfig(tags=["Custom.Tag", "Old.Generated"], generated_tags=["Old.Generated"])

    config.set_generated_tags(["New.Generated"])

    assert config.tags == ["Custom.Tag", "New.Generated"]
    assert config.generated_tags == ["New.Generated"]


def test_tag_claimed_by_code_is_removed_with_it():
    config = TagConfig(tags=["Shared.Tag"], generated_tags=[])

    config.set_generated_tags(["Shared.Tag"])
    config.set_generated_tags([])

    # Once it became generated, removing it from code removes it from the config
    assert config.tags == []


def test_normalize_adds_missing_generated_tags():
    config = TagConfig(tags=["B", " A"], generated_tags=["C"])

    assert config.normalize()
    assert config.tags == ["A", "B", "C"]
    assert config.generated_tags == ["C"]
    assert not config.normalize()


def test_is_valid():
    config = TagConfig(tags=["Status.Debuff.Slow"])

    assert config.is_valid("Status.Debuff.Slow")
    assert not config.is_valid("Status.Debuff")
    assert not config.is_valid("")
    assert not config.is_valid(None)


def test_all_tags_includes_generated():
    config = TagConfig(tags=["B"], generated_tags=["A"])

    assert config.all_tags() == ["A", "B"]


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "tags.json"
    config = TagConfig(tags=["A.B", "C"], generated_tags=["C"])

    config.save(path)
    loaded = TagConfig.load(path)

    assert loaded == config


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text('{"tags": ["A"], "version": 3}', encoding="utf-8")

    assert TagConfig.load(path).tags == ["A"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(TagSourceError, match="Cannot read tag config"):
        TagConfig.load(tmp_path / "missing.json")


def test_load_invalid_file_raises(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text('{"tags": "not-a-list"}', encoding="utf-8")

    with pytest.raises(TagSourceError, match="Invalid tag config"):
        TagConfig.load(path)


def test_load_non_utf8_file_raises(tmp_path):
    path = tmp_path / "tags.json"
    path.write_bytes(b'{"tags": ["A\xff"]}')

    with pytest.raises(TagSourceError, match="Cannot read tag config"):
        TagConfig.load(path)


def test_set_generated_tags_drops_stale_entries_with_stray_whitespace():
    """Hand-edited stale generated entries are matched after canonicalizing."""
    config = TagConfig(tags=["Custom.Tag", " Old.Generated"], generated_tags=["Old.Generated "])

    config.set_generated_tags(["New.Generated"])

    assert config.tags == ["Custom.Tag", "New.Generated"]
    assert config.generated_tags == ["New.Generated"]
