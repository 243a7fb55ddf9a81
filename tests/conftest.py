"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from gameplaytags import GameplayTag, StaticTagSource, TagRegistry, set_registry


@pytest.fixture(autouse=True)
def global_registry():
    """Fresh, empty global registry for every test; previous one restored after."""
    registry = TagRegistry()
    previous = set_registry(registry)
    yield registry
    set_registry(previous)  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host GAMEPLAYTAGS_* variables out of settings-driven tests."""
    for name in ("GAMEPLAYTAGS_CONFIG_FILE", "GAMEPLAYTAGS_TAGS", "GAMEPLAYTAGS_LAZY_BUILD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry():
    """Isolated registry, not installed globally."""
    return TagRegistry()


@pytest.fixture
def status_registry():
    """Isolated registry built from a small status/combat universe."""
    registry = TagRegistry(
        StaticTagSource(
            [
                "Status.Debuff.Slow",
                "Status.Debuff.Stun",
                "Status.Buff.Haste",
                "Combat.Damage.Fire",
            ]
        )
    )
    registry.rebuild()
    return registry


@pytest.fixture
def tag():
    """Shorthand factory: tag("A.B") -> GameplayTag."""
    return GameplayTag.from_path
