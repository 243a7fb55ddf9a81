"""Basic gameplaytags usage example.

Demonstrates:
- Declaring tags in code and syncing them into a tag config
- Building the global registry
- Hierarchy-aware and exact queries on tag containers
- Persisting tags as raw integer ids
"""

import logging
from dataclasses import dataclass, field

from gameplaytags import (
    GameplayTag,
    TagConfig,
    TagContainer,
    get_registry,
    sync_generated_tags,
)

from .tags import Status


@dataclass
class Character:
    name: str
    active: TagContainer = field(default_factory=TagContainer)

    def can_act(self) -> bool:
        return not self.active.has_tag(Status.STUN)


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    # Authored tags plus everything declared with declare_tag()
    config = TagConfig(tags=["Combat.Damage.Fire", "Combat.Damage.Ice"])
    report = sync_generated_tags(config)
    print(f"Registry: {report.explicit_count} explicit, {report.implicit_count} implicit tags")

    hero = Character("hero")
    hero.active.add(Status.SLOW)
    hero.active.add(Status.HASTE)
    print(f"{hero.name} tags: {hero.active}")

    print(f"Debuffed? {hero.active.has_tag(Status.DEBUFF)}")
    print(f"Exactly 'Status.Debuff'? {hero.active.has_tag_exact(Status.DEBUFF)}")
    print(f"Can act? {hero.can_act()}")

    hero.active.add(Status.STUN)
    print(f"Stunned, can act? {hero.can_act()}")

    fire = GameplayTag.from_path("Combat.Damage.Fire")
    resistances = TagContainer.of(GameplayTag.from_path("Combat.Damage"))
    print(f"Resists {fire.last_segment()}? {TagContainer.of(fire).has_any(resistances)}")

    saved = hero.active.to_raw_ids()
    restored = TagContainer.from_raw_ids(saved)
    print(f"Saved {saved} -> restored {restored}")

    registry = get_registry()
    children = [GameplayTag.from_raw_id(i) for i in registry.children_of(Status.DEBUFF.id)]
    print(f"Children of {Status.DEBUFF}: {', '.join(str(c) for c in children)}")


if __name__ == "__main__":
    main()
