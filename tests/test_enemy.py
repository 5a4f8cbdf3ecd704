import random

import pytest

from grottequest.enemy import (
    ENEMY_KINDS,
    Enemy,
    UnknownEnemyError,
    create_enemy,
    random_plus_minus,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


LOW = _FixedRng(0)
HIGH = _FixedRng(1)


def test_random_plus_minus_low():
    assert random_plus_minus(7, LOW) == -7


def test_random_plus_minus_high():
    assert random_plus_minus(7, HIGH) == 7


def test_random_plus_minus_only_two_outcomes():
    rng = random.Random(42)
    results = {random_plus_minus(3, rng) for _ in range(200)}
    assert results == {-3, 3}


def test_random_plus_minus_without_rng():
    assert random_plus_minus(5) in (-5, 5)


@pytest.mark.parametrize(
    "kind,display",
    [
        ("Horse", "Horse"),
        ("WeakGoblin", "Weak Goblin"),
        ("StrongGoblin", "Strong Goblin"),
        ("StrongerGoblin", "Stronger Goblin"),
        ("MightyGoblin", "Mighty Goblin"),
        ("KingApe", "KingApe"),
        ("Unicorn", "Unicorn"),
        ("Dragon", "Dragon"),
    ],
)
def test_display_names(kind, display):
    assert create_enemy(kind, LOW).name == display


@pytest.mark.parametrize("kind", ENEMY_KINDS)
def test_low_roll_is_weaker_than_high_roll(kind):
    low = create_enemy(kind, LOW)
    high = create_enemy(kind, HIGH)
    assert low.hp < high.hp
    assert low.power < high.power
    assert low.xp < high.xp


@pytest.mark.parametrize("kind", ENEMY_KINDS)
def test_random_stats_stay_within_the_two_rolls(kind):
    low = create_enemy(kind, LOW)
    high = create_enemy(kind, HIGH)
    rng = random.Random(7)
    for _ in range(50):
        enemy = create_enemy(kind, rng)
        assert enemy.hp in (low.hp, high.hp)
        assert enemy.power in (low.power, high.power)
        assert enemy.xp in (low.xp, high.xp)


def test_enemy_hp_is_mutable():
    enemy = Enemy("Dummy", 1, 1, 1)
    enemy.hp -= 3
    assert enemy.hp == -2


def test_unknown_enemy_raises():
    with pytest.raises(UnknownEnemyError):
        create_enemy("Weak Goblin", LOW)