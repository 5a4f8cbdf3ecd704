"""The hero and the weapons it carries."""

from __future__ import annotations

from dataclasses import dataclass, field

from .weapon import Weapon


@dataclass
class Hero:
    """The player's character."""

    name: str
    hp: int
    power: int
    level: int = 1
    xp: int = 0
    gold: int = 0
    max_hp: int | None = None
    inventory: list[Weapon] = field(default_factory=list)
    equipped: Weapon | None = None
    id: int | None = None

    def __post_init__(self) -> None:
        if self.max_hp is None:
            self.max_hp = self.hp

    def add_weapon(self, weapon: Weapon) -> None:
        """Put a weapon into the inventory."""
        self.inventory.append(weapon)

    def inventory_lines(self) -> list[str]:
        """Return one numbered line for each weapon in the inventory."""
        return [
            f"({index}) {weapon.name}: Power: {weapon.power}, "
            f"Durability: {weapon.durability}, Price: {weapon.price}"
            for index, weapon in enumerate(self.inventory)
        ]

    def equip_weapon(self, index: int) -> Weapon:
        """Equip the weapon at the given inventory position and return it."""
        if not 0 <= index < len(self.inventory):
            raise IndexError("No weapon found")
        self.equipped = self.inventory[index]
        return self.equipped

    def unequip_weapon(self) -> None:
        """Put the equipped weapon away."""
        self.equipped = None

    def destroy_weapon(self) -> Weapon | None:
        """Remove the equipped weapon if it is worn out; return it if so."""
        weapon = self.equipped
        if weapon is None or weapon.durability > 0:
            return None
        position = next(
            (i for i, item in enumerate(self.inventory) if item is weapon), None
        )
        if position is not None:
            del self.inventory[position]
        self.equipped = None
        return weapon

    def decrease_weapon_durability(self) -> None:
        """Wear the equipped weapon down by one."""
        if self.equipped is not None:
            self.equipped.durability -= 1

    def total_power(self) -> int:
        """Return the hero's power plus that of the equipped weapon."""
        if self.equipped is not None:
            return self.power + self.equipped.power
        return self.power

    def weapon_line(self) -> str | None:
        """Describe the equipped weapon, or return None when there is none."""
        if self.equipped is None:
            return None
        return f"Weapon: {self.equipped.describe()}"