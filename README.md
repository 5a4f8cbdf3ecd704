# grottequest

A small role-playing game played in the terminal. You create a hero and
fight your way through caves (*grotter*) full of horses, goblins, apes,
unicorns and finally a dragon. You earn experience and gold and spend the
gold on weapons in the armory. Heroes, their weapons and their kills are
kept in an SQLite database file.

## Installing

```
pip install .
```

The game uses only the Python standard library.

## Playing

```
grottequest
```

By default the game opens, or creates, the database file `myDataBase.db`
in the parent of the current directory (`../myDataBase.db`). Use
`--database` to choose another file:

```
grottequest --database saves.db
```

The start menu offers:

- `(0) New Game`: enter a name. The new hero starts with 10 HP, power 2,
  level 1, no XP and no gold.
- `(1) Load Game`: lists the saved heroes and loads one by its ID. If no
  hero has that ID, you are asked to create a new one.
- `(2) Analyse saves`: shows the saved heroes, the kills per hero, the
  kills per weapon for a hero you name, and the hero with the most kills
  for each weapon.
- `(3) Exit game`.

In the game itself you choose between `(0) Fight Monsters`,
`(2) Go to Armory` and `(4) Save and Exit`.

### How the game works

- Caves open by level: Easy from the start, Medium at level 5, Hard at 10,
  Very Hard at 15 and Extreme, where the dragon lives, at 25. Each cave
  pays out gold once all of its enemies have been fought.
- Enemy stats vary a little each time a cave is created.
- Each round the enemy hits first, then the hero hits back with its own
  power plus the power of the equipped weapon.
- A won fight restores the hero's HP to its maximum and gives the enemy's
  XP. With 1000 XP or more the hero goes up one level: +2 HP, +2 maximum
  HP, +1 power, and 1000 XP is spent.
- After a won fight the equipped weapon loses one point of durability. At
  zero it breaks and leaves the inventory.
- Every fight is recorded as a kill in the database, together with the
  weapon that was equipped.
- The armory sells a fixed range of weapons, from a Sword at 500 gold to a
  Dragonscale Shield at 200000. Bought weapons go into the inventory and
  can be equipped and unequipped there.
- `Save and Exit` writes the hero and its inventory to the database. A hero
  is matched by name: saving again updates the existing record.

## Using it as a library

The parts of the game can be used on their own:

```python
import random

from grottequest.hero import Hero
from grottequest.weapon import create_weapon
from grottequest.grotte import create_grotte, available_grottes
from grottequest.armory import Armory
from grottequest.storage import GameDatabase

rng = random.Random(1)
hero = Hero("Ada", 10, 2, 1, 0, 1000)
hero.add_weapon(create_weapon("Sword"))
hero.equip_weapon(0)
print(hero.total_power())          # own power plus the weapon's

print(available_grottes(hero.level))
cave = create_grotte("Easy", rng)

armory = Armory(hero)
armory.load_weapons()
print("\n".join(armory.weapon_lines()))

with GameDatabase("saves.db") as db:
    db.save_hero(hero)
    for summary in db.list_heroes():
        print(summary)
```

The modules are:

- `grottequest.weapon`: `Weapon`, `create_weapon`, `UnknownWeaponError`
- `grottequest.enemy`: `Enemy`, `create_enemy`, `random_plus_minus`,
  `UnknownEnemyError`
- `grottequest.hero`: `Hero`
- `grottequest.grotte`: `Grotte`, `create_grotte`, `available_grottes`
- `grottequest.armory`: `Armory`, `PurchaseError`
- `grottequest.fight`: `Fight`, `format_hero`, `format_enemy`
- `grottequest.storage`: `GameDatabase`, `HeroSummary`
- `grottequest.game`: `Game`, `main`

An unknown weapon or enemy name raises `UnknownWeaponError` or
`UnknownEnemyError`. An unknown cave name raises `ValueError`. Buying with
a bad index or without enough gold raises `PurchaseError`. Equipping a
weapon index that does not exist raises `IndexError`.

## What it does not do

- Weapons can only be bought in the armory. Caves do not drop any.
- Beating the dragon does not end the game.
- A lost fight does not reset the hero. The game goes on, and nothing is
  saved until you choose `Save and Exit`.
- There is no way to leave a running game without saving except
  interrupting it (Ctrl-C or end of input).

## Running the tests

Install the test extra and run pytest:

```
pip install .[test]
pytest
```