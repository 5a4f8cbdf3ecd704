"""A fight between the hero and one enemy."""

from __future__ import annotations

from collections.abc import Callable

from .enemy import Enemy
from .grotte import Grotte
from .hero import Hero

XP_PER_LEVEL = 1000
_SEPARATOR = "-----------------------------------"


def format_hero(hero: Hero) -> str:
    """Return the hero's stats as text."""
    return "\n".join(
        [
            f"Navn: {hero.name}",
            f"HP: {hero.hp}",
            f"Power: {hero.power}",
            f"Level: {hero.level}",
            f"XP: {hero.xp}",
            f"Gold: {hero.gold}",
        ]
    )


def format_enemy(enemy: Enemy) -> str:
    """Return the enemy's stats as text."""
    return "\n".join(
        [
            f"Navn: {enemy.name}",
            f"HP: {enemy.hp}",
            f"Power: {enemy.power}",
            f"XP: {enemy.xp}",
        ]
    )


class Fight:
    """Rounds of blows between a hero and an enemy inside a cave."""

    def __init__(self, hero: Hero, enemy: Enemy, grotte: Grotte) -> None:
        self.hero = hero
        self.enemy = enemy
        self.grotte = grotte

    def exchange_blows(self) -> None:
        """Play one round: the enemy hits the hero, then the hero hits back."""
        self.hero.hp -= self.enemy.power
        self.enemy.hp -= self.hero.total_power()

    def award_xp(self) -> None:
        """Give the hero the enemy's experience."""
        self.hero.xp += self.enemy.xp

    def award_gold(self) -> None:
        """Give the hero the cave's gold."""
        self.hero.gold += self.grotte.gold

    def level_up(self) -> bool:
        """Raise the hero one level if enough experience is gathered."""
        hero = self.hero
        if hero.xp < XP_PER_LEVEL:
            return False
        hero.level += 1
        hero.hp += 2
        hero.max_hp += 2
        hero.power += 1
        hero.xp -= XP_PER_LEVEL
        return True

    def run(
        self,
        wait: Callable[[], object] | None = None,
        out: Callable[[str], object] | None = None,
    ) -> bool:
        """Fight until one side falls; return True if the hero won."""
        wait = wait if wait is not None else input
        out = out if out is not None else print
        hero, enemy = self.hero, self.enemy

        while hero.hp > 0 and enemy.hp > 0:
            out("--------------------------")
            out("| Tryk enter for at fighte |")
            out("--------------------------")
            wait()
            self.exchange_blows()
            out("")
            out(format_hero(hero))
            out("")
            out(format_enemy(enemy))
            out("")

        if hero.hp <= 0:
            out("You lost")
            return False

        out(_SEPARATOR)
        out(f"{enemy.name} defeated!")
        out("You won!")
        hero.hp = hero.max_hp
        self.award_xp()
        if self.level_up():
            out(f"New level: {hero.level}")
        out(_SEPARATOR)
        out("Hero Stats:")
        out("")
        out(format_hero(hero))
        hero.decrease_weapon_durability()
        out("")
        line = hero.weapon_line()
        if line is not None:
            out(line)
        broken = hero.destroy_weapon()
        if broken is not None:
            out(f"{broken.name} is broken and destroyed")
        out("")
        out(_SEPARATOR)
        return True