"""Enemies and the factory that rolls their stats."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import NamedTuple


class UnknownEnemyError(LookupError):
    """Raised when an enemy kind is not known."""


@dataclass
class Enemy:
    """An enemy waiting in a cave."""

    name: str
    hp: int
    power: int
    xp: int
    id: int | None = None


class _Template(NamedTuple):
    display_name: str
    hp: int
    hp_spread: int
    power: int
    power_spread: int
    xp: int
    xp_spread: int


_TEMPLATES = {
    "Horse": _Template("Horse", 4, 2, 1, 1, 100, 50),
    "WeakGoblin": _Template("Weak Goblin", 4, 2, 2, 1, 200, 100),
    "StrongGoblin": _Template("Strong Goblin", 8, 3, 3, 1, 400, 100),
    "StrongerGoblin": _Template("Stronger Goblin", 10, 4, 4, 1, 500, 200),
    "MightyGoblin": _Template("Mighty Goblin", 15, 5, 5, 2, 800, 200),
    "KingApe": _Template("KingApe", 30, 5, 5, 2, 1000, 300),
    "Unicorn": _Template("Unicorn", 50, 10, 8, 3, 1500, 500),
    "Dragon": _Template("Dragon", 200, 10, 10, 5, 3000, 1000),
}

ENEMY_KINDS = tuple(_TEMPLATES)


def random_plus_minus(value: int, rng: random.Random | None = None) -> int:
    """Return either -value or +value, each with equal chance."""
    source = rng if rng is not None else random
    return -value if source.randrange(2) == 0 else value


def create_enemy(name: str, rng: random.Random | None = None) -> Enemy:
    """Create an enemy of the given kind with randomly varied stats."""
    try:
        template = _TEMPLATES[name]
    except KeyError:
        raise UnknownEnemyError(f"No enemy kind named {name!r}") from None
    hp = template.hp + random_plus_minus(template.hp_spread, rng)
    power = template.power + random_plus_minus(template.power_spread, rng)
    xp = template.xp + random_plus_minus(template.xp_spread, rng)
    return Enemy(template.display_name, hp, power, xp)