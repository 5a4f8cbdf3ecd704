"""Caves, the enemies they hold and the gold they reward."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .enemy import Enemy, create_enemy

# name -> (gold reward, enemy kinds in order)
_LAYOUTS = {
    "Easy": (200, ("Horse", "WeakGoblin", "WeakGoblin")),
    "Medium": (500, ("WeakGoblin", "StrongGoblin", "StrongGoblin", "StrongerGoblin")),
    "Hard": (2000, ("StrongerGoblin", "MightyGoblin", "KingApe", "StrongerGoblin")),
    "Very Hard": (
        5000,
        ("Unicorn", "KingApe", "StrongerGoblin", "Unicorn", "KingApe"),
    ),
    "Extreme": (10000, ("Dragon",)),
}

# minimum hero level needed to enter each cave
_REQUIRED_LEVEL = (
    ("Easy", 0),
    ("Medium", 5),
    ("Hard", 10),
    ("Very Hard", 15),
    ("Extreme", 25),
)


@dataclass
class Grotte:
    """A cave with a gold reward and the enemies guarding it."""

    name: str
    gold: int
    enemies: list[Enemy] = field(default_factory=list)

    def remove_enemy(self, index: int) -> Enemy | None:
        """Remove and return the enemy at index; ignore an invalid index."""
        if 0 <= index < len(self.enemies):
            return self.enemies.pop(index)
        return None

    def is_empty(self) -> bool:
        """Return True when no enemies are left."""
        return not self.enemies


def create_grotte(name: str, rng: random.Random | None = None) -> Grotte:
    """Create a cave of the given difficulty filled with fresh enemies."""
    try:
        gold, kinds = _LAYOUTS[name]
    except KeyError:
        raise ValueError("No cave found, try again") from None
    return Grotte(name, gold, [create_enemy(kind, rng) for kind in kinds])


def available_grottes(level: int) -> list[str]:
    """Return the cave names a hero of the given level may enter."""
    return [name for name, required in _REQUIRED_LEVEL if level >= required]