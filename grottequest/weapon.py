"""Weapons and the catalogue they are made from."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


class UnknownWeaponError(LookupError):
    """Raised when a weapon name is not in the catalogue."""


@dataclass
class Weapon:
    """A weapon a hero can carry and equip."""

    name: str
    power: int
    durability: int
    price: int
    id: int | None = None

    def describe(self) -> str:
        """Return a one-line description of the weapon."""
        return (
            f"{self.name}: Power {self.power}, "
            f"Holdbarhed {self.durability}, Pris {self.price}"
        )


# name -> (power, durability, price)
WEAPON_CATALOGUE = MappingProxyType(
    {
        "Sword": (1, 5, 500),
        "Axe": (1, 40, 700),
        "Bow": (2, 30, 600),
        "Spear": (3, 15, 650),
        "Doomblade": (5, 50, 10000),
        "Shadowfang": (6, 45, 20000),
        "Thundercleaver": (10, 30, 30000),
        "Nightpiercer": (8, 1000, 50000),
        "Soulstorm Staff": (10, 1000, 75000),
        "Titanium Edge": (15, 1000, 90000),
        "Ebonfang": (20, 500, 100000),
        "Dragonscale Shield": (20, 100000, 200000),
        "Star destroyer": (50, 1000000, 500000),
    }
)


def create_weapon(name: str) -> Weapon:
    """Create a fresh weapon from the catalogue by its name."""
    try:
        power, durability, price = WEAPON_CATALOGUE[name]
    except KeyError:
        raise UnknownWeaponError(f"No weapon named {name!r}") from None
    return Weapon(name, power, durability, price)