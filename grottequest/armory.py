"""The armory where a hero spends gold on weapons."""

from __future__ import annotations

from .hero import Hero
from .weapon import Weapon, create_weapon


class PurchaseError(Exception):
    """Raised when a weapon cannot be bought."""


ARMORY_STOCK = (
    "Sword",
    "Axe",
    "Bow",
    "Spear",
    "Doomblade",
    "Shadowfang",
    "Thundercleaver",
    "Nightpiercer",
    "Soulstorm Staff",
    "Titanium Edge",
    "Ebonfang",
    "Dragonscale Shield",
)


class Armory:
    """A shop offering a fixed stock of weapons to one hero."""

    def __init__(self, hero: Hero) -> None:
        self.hero = hero
        self.weapons: list[Weapon] = []

    def load_weapons(self) -> None:
        """Fill the shelves with fresh weapons, replacing any old stock."""
        self.weapons = [create_weapon(name) for name in ARMORY_STOCK]

    def weapon_lines(self) -> list[str]:
        """Return one numbered line for each weapon on offer."""
        return [
            f"({index}) {weapon.name} Power: {weapon.power} "
            f"Durability: {weapon.durability} Price: {weapon.price}"
            for index, weapon in enumerate(self.weapons)
        ]

    def choose_weapon(self, index: int) -> str | None:
        """Return the name of the weapon at index, or None if there is none."""
        if 0 <= index < len(self.weapons):
            return self.weapons[index].name
        return None

    def buy_weapon(self, index: int) -> Weapon:
        """Sell the weapon at index to the hero and return the new weapon."""
        name = self.choose_weapon(index)
        if name is None:
            raise PurchaseError("Invalid choose")
        if self.hero.gold < self.weapons[index].price:
            raise PurchaseError("Not enough gold")
        weapon = create_weapon(name)
        self.hero.add_weapon(weapon)
        self.hero.gold -= weapon.price
        return weapon