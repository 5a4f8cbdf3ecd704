"""Saving heroes, their weapons and their kills in SQLite."""

from __future__ import annotations

import os
import sqlite3
from typing import NamedTuple

from .hero import Hero
from .weapon import Weapon

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Hero (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    hp INTEGER NOT NULL,
    maxHp INTEGER NOT NULL,
    power INTEGER NOT NULL,
    level INTEGER NOT NULL,
    xp INTEGER NOT NULL,
    gold INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS Weapon (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    power INTEGER NOT NULL,
    durability INTEGER NOT NULL,
    price INTEGER NOT NULL,
    hero_id INTEGER REFERENCES Hero(id)
);
CREATE TABLE IF NOT EXISTS Hero_Kills (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    hero_id INTEGER,
    enemy_id INTEGER,
    weapon_id INTEGER,
    kill_time TEXT
);
"""


class HeroSummary(NamedTuple):
    """A saved hero as shown in listings."""

    id: int
    name: str
    level: int
    xp: int
    gold: int


class GameDatabase:
    """The SQLite store of saved heroes and their kills."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.connection = sqlite3.connect(path)
        self.create_schema()

    def close(self) -> None:
        """Close the database connection."""
        self.connection.close()

    def __enter__(self) -> GameDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        with self.connection:
            self.connection.executescript(_SCHEMA)

    def load_hero(self, hero_id: int) -> Hero | None:
        """Load a saved hero and its weapons; return None if there is none."""
        row = self.connection.execute(
            "SELECT id, name, hp, maxHp, power, level, xp, gold FROM Hero WHERE id = ?",
            (hero_id,),
        ).fetchone()
        if row is None:
            return None
        found_id, name, hp, _max_hp, power, level, xp, gold = row
        hero = Hero(name, hp, power, level, xp, gold, id=found_id)
        weapons = self.connection.execute(
            "SELECT id, name, power, durability, price FROM Weapon "
            "WHERE hero_id = ? ORDER BY id",
            (found_id,),
        )
        for weapon_id, w_name, w_power, w_durability, w_price in weapons:
            hero.add_weapon(
                Weapon(w_name, w_power, w_durability, w_price, id=weapon_id)
            )
        return hero

    def save_hero(self, hero: Hero) -> int:
        """Insert or update a hero by name, replace its weapons, return its id."""
        with self.connection as conn:
            row = conn.execute(
                "SELECT id FROM Hero WHERE name = ?", (hero.name,)
            ).fetchone()
            if row is not None:
                hero_id = row[0]
                conn.execute(
                    "UPDATE Hero SET hp = ?, maxHp = ?, power = ?, level = ?, "
                    "xp = ?, gold = ? WHERE id = ?",
                    (hero.hp, hero.hp, hero.power, hero.level, hero.xp, hero.gold, hero_id),
                )
            else:
                cursor = conn.execute(
                    "INSERT INTO Hero(name, hp, maxHp, power, level, xp, gold) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (hero.name, hero.hp, hero.hp, hero.power, hero.level, hero.xp, hero.gold),
                )
                hero_id = cursor.lastrowid
            conn.execute("DELETE FROM Weapon WHERE hero_id = ?", (hero_id,))
            for weapon in hero.inventory:
                cursor = conn.execute(
                    "INSERT INTO Weapon(name, power, durability, price, hero_id) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (weapon.name, weapon.power, weapon.durability, weapon.price, hero_id),
                )
                weapon.id = cursor.lastrowid
        hero.id = hero_id
        return hero_id

    def list_heroes(self) -> list[HeroSummary]:
        """Return a summary of every saved hero."""
        rows = self.connection.execute(
            "SELECT id, name, level, xp, gold FROM Hero ORDER BY id"
        )
        return [HeroSummary(*row) for row in rows]

    def record_kill(
        self, hero_id: int | None, enemy_id: int | None, weapon_id: int | None
    ) -> None:
        """Record that a hero killed an enemy with a weapon, stamped now."""
        with self.connection:
            self.connection.execute(
                "INSERT INTO Hero_Kills(hero_id, enemy_id, weapon_id, kill_time) "
                "VALUES (?, ?, ?, datetime('now'))",
                (hero_id, enemy_id, weapon_id),
            )

    def kills_per_hero(self) -> list[tuple[str, int]]:
        """Return (hero name, kills) pairs, most kills first."""
        rows = self.connection.execute(
            """SELECT Hero.name, COUNT(*) AS kills
               FROM Hero_Kills
               JOIN Hero ON Hero_Kills.hero_id = Hero.id
               GROUP BY Hero.id
               ORDER BY kills DESC"""
        )
        return [(name, kills) for name, kills in rows]

    def weapon_kills_for_hero(self, name: str) -> list[tuple[str, int]]:
        """Return (weapon name, kills) pairs for the named hero, most first."""
        rows = self.connection.execute(
            """SELECT Weapon.name, COUNT(*) AS kills
               FROM Hero_Kills
               JOIN Weapon ON Hero_Kills.weapon_id = Weapon.id
               JOIN Hero ON Hero_Kills.hero_id = Hero.id
               WHERE Hero.name = ?
               GROUP BY Weapon.id
               ORDER BY kills DESC""",
            (name,),
        )
        return [(weapon, kills) for weapon, kills in rows]

    def top_hero_per_weapon(self) -> list[tuple[str, str, int]]:
        """Return (weapon name, top hero name, kills) for each weapon used."""
        rows = self.connection.execute(
            """SELECT weapon_name, hero_name, MAX(kills) FROM (
                   SELECT Weapon.name AS weapon_name,
                          Hero.name AS hero_name,
                          Weapon.id AS weapon_id,
                          Hero.id AS hero_id,
                          COUNT(*) AS kills
                   FROM Hero_Kills
                   JOIN Weapon ON Hero_Kills.weapon_id = Weapon.id
                   JOIN Hero ON Hero_Kills.hero_id = Hero.id
                   GROUP BY Weapon.id, Hero.id
               )
               GROUP BY weapon_id
               ORDER BY weapon_id"""
        )
        return [(weapon, hero, kills) for weapon, hero, kills in rows]