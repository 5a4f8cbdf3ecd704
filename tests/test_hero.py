import pytest

from grottequest.hero import Hero
from grottequest.weapon import create_weapon


@pytest.fixture
def hero():
    return Hero("Aria", 10, 2)


def test_max_hp_defaults_to_hp(hero):
    assert hero.max_hp == hero.hp


def test_explicit_max_hp_kept():
    assert Hero("Bo", 4, 1, max_hp=12).max_hp == 12


def test_new_hero_has_empty_inventory(hero):
    assert hero.inventory_lines() == []
    assert hero.equipped is None


def test_inventories_are_not_shared():
    first = Hero("A", 10, 2)
    second = Hero("B", 10, 2)
    first.add_weapon(create_weapon("Axe"))
    assert len(second.inventory) == 0


def test_inventory_lines(hero):
    hero.add_weapon(create_weapon("Sword"))
    hero.add_weapon(create_weapon("Bow"))
    lines = hero.inventory_lines()
    assert len(lines) == 2
    assert lines[0].startswith("(0) Sword:")
    assert lines[1].startswith("(1) Bow:")
    assert "Price: 500" in lines[0]


def test_total_power_without_weapon(hero):
    assert hero.total_power() == hero.power


def test_equip_weapon_adds_power(hero):
    spear = create_weapon("Spear")
    hero.add_weapon(spear)
    assert hero.equip_weapon(0) is spear
    assert hero.total_power() == hero.power + spear.power


def test_equip_out_of_range(hero):
    hero.add_weapon(create_weapon("Sword"))
    with pytest.raises(IndexError):
        hero.equip_weapon(1)
    with pytest.raises(IndexError):
        hero.equip_weapon(-1)


def test_unequip(hero):
    hero.add_weapon(create_weapon("Sword"))
    hero.equip_weapon(0)
    hero.unequip_weapon()
    assert hero.equipped is None
    assert hero.total_power() == hero.power


def test_weapon_line(hero):
    assert hero.weapon_line() is None
    sword = create_weapon("Sword")
    hero.add_weapon(sword)
    hero.equip_weapon(0)
    assert hero.weapon_line() == "Weapon: " + sword.describe()


def test_decrease_durability(hero):
    axe = create_weapon("Axe")
    start = axe.durability
    hero.add_weapon(axe)
    hero.decrease_weapon_durability()
    assert axe.durability == start
    hero.equip_weapon(0)
    hero.decrease_weapon_durability()
    assert axe.durability == start - 1


def test_destroy_keeps_intact_weapon(hero):
    hero.add_weapon(create_weapon("Axe"))
    hero.equip_weapon(0)
    assert hero.destroy_weapon() is None
    assert len(hero.inventory) == 1


def test_destroy_worn_out_weapon(hero):
    other = create_weapon("Sword")
    sword = create_weapon("Sword")
    hero.add_weapon(other)
    hero.add_weapon(sword)
    hero.equip_weapon(1)
    while sword.durability > 0:
        hero.decrease_weapon_durability()
    assert hero.destroy_weapon() is sword
    assert hero.equipped is None
    assert len(hero.inventory) == 1
    assert hero.inventory[0] is other


def test_destroy_without_weapon(hero):
    assert hero.destroy_weapon() is None