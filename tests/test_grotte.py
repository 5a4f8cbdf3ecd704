import random

import pytest

from grottequest.enemy import Enemy
from grottequest.grotte import Grotte, available_grottes, create_grotte


ALL_NAMES = ["Easy", "Medium", "Hard", "Very Hard", "Extreme"]


def test_easy_grotte_layout():
    grotte = create_grotte("Easy", random.Random(1))
    assert grotte.name == "Easy"
    assert grotte.gold == 200
    assert [e.name for e in grotte.enemies] == ["Horse", "Weak Goblin", "Weak Goblin"]


def test_extreme_grotte_holds_dragon():
    grotte = create_grotte("Extreme", random.Random(1))
    assert grotte.gold == 10000
    assert [e.name for e in grotte.enemies] == ["Dragon"]


def test_very_hard_layout():
    grotte = create_grotte("Very Hard", random.Random(3))
    assert grotte.gold == 5000
    assert [e.name for e in grotte.enemies] == [
        "Unicorn",
        "KingApe",
        "Stronger Goblin",
        "Unicorn",
        "KingApe",
    ]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_every_grotte_starts_non_empty(name):
    grotte = create_grotte(name)
    assert grotte.name == name
    assert not grotte.is_empty()


def test_unknown_grotte_raises():
    with pytest.raises(ValueError):
        create_grotte("Impossible")


def test_remove_enemy_until_empty():
    grotte = create_grotte("Medium", random.Random(5))
    count = len(grotte.enemies)
    removed = [grotte.remove_enemy(0) for _ in range(count)]
    assert all(isinstance(enemy, Enemy) for enemy in removed)
    assert grotte.is_empty()


def test_remove_enemy_returns_the_right_one():
    first = Enemy("A", 1, 1, 1)
    second = Enemy("B", 2, 2, 2)
    grotte = Grotte("Test", 0, [first, second])
    assert grotte.remove_enemy(1) is second
    assert grotte.enemies == [first]


def test_remove_enemy_invalid_index_is_ignored():
    grotte = Grotte("Test", 0, [Enemy("A", 1, 1, 1)])
    assert grotte.remove_enemy(1) is None
    assert grotte.remove_enemy(-1) is None
    assert len(grotte.enemies) == 1


def test_empty_grotte():
    assert Grotte("Dummy", 1).is_empty()


def test_available_grottes_beginner():
    assert available_grottes(1) == ["Easy"]


def test_available_grottes_thresholds():
    assert available_grottes(4) == ["Easy"]
    assert available_grottes(5) == ["Easy", "Medium"]
    assert available_grottes(15) == ["Easy", "Medium", "Hard", "Very Hard"]
    assert available_grottes(25) == ALL_NAMES


def test_available_grottes_negative_level():
    assert available_grottes(-1) == []


def test_available_grottes_grow_with_level():
    previous = []
    for level in range(0, 30):
        current = available_grottes(level)
        assert current[: len(previous)] == previous
        previous = current