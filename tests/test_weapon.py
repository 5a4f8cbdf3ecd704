import pytest

from grottequest.weapon import (
    WEAPON_CATALOGUE,
    UnknownWeaponError,
    Weapon,
    create_weapon,
)


def test_create_sword_matches_catalogue():
    assert create_weapon("Sword") == Weapon("Sword", 1, 5, 500)


def test_create_dragonscale_shield():
    shield = create_weapon("Dragonscale Shield")
    assert shield.price == 200000
    assert shield.durability == 100000


def test_star_destroyer_is_available():
    assert create_weapon("Star destroyer").price == 500000


@pytest.mark.parametrize("name", list(WEAPON_CATALOGUE))
def test_every_catalogue_entry_keeps_its_name(name):
    assert create_weapon(name).name == name


def test_each_call_returns_a_new_object():
    first = create_weapon("Axe")
    second = create_weapon("Axe")
    first.durability -= 1
    assert second.durability == first.durability + 1
    assert first is not second


def test_unknown_weapon_raises():
    with pytest.raises(UnknownWeaponError):
        create_weapon("Toothpick")


def test_unknown_weapon_is_lookup_error():
    with pytest.raises(LookupError):
        create_weapon("")


def test_describe_format():
    assert create_weapon("Sword").describe() == "Sword: Power 1, Holdbarhed 5, Pris 500"


def test_describe_reflects_durability_change():
    bow = create_weapon("Bow")
    bow.durability = 0
    assert "Holdbarhed 0" in bow.describe()
    assert bow.describe().startswith("Bow:")