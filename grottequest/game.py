"""The interactive game: menus, caves, the armory and saved heroes."""

from __future__ import annotations

import argparse
import random
import sqlite3
import sys
from collections.abc import Callable, Sequence

from .armory import Armory, PurchaseError
from .fight import Fight, format_enemy, format_hero
from .grotte import Grotte, available_grottes, create_grotte
from .hero import Hero
from .storage import GameDatabase

DEFAULT_DATABASE = "../myDataBase.db"

NEW_HERO_HP = 10
NEW_HERO_POWER = 2

_SEPARATOR = "-----------------------------------"

_RULES = (
    "===================================",
    "             Game rules            ",
    "===================================",
    "",
    "1. The goal is to defeat the dragon",
    " - The dragon is in the Extreme cave",
    " - The Extreme cave unlocks at lvl 25",
    "2. Defeat enemies in caves to gain xp and gold",
    "3. Weapons can be bought in armory or found in caves",
    "4. When a cave is defeated u can choose a new one",
    "5. You can exit and save game after defeating a cave",
    "6. losing a battle will reset hero down to last save",
)

_ANALYSE_MENU = (
    "\nAnalyse menu:\n"
    "(0) Show heroes\n"
    "(1) Show enemies defeated for each hero\n"
    "(2) For a given hero, show weapon kills\n"
    "(3) For each weapon, show which hero has most kills\n"
    "(4) Exit analyse\n"
    "Chose an input: "
)


def _is_number(token: str) -> bool:
    return bool(token) and token.isascii() and token.isdigit()


class Game:
    """One game session driven through an input function and an output function."""

    def __init__(
        self,
        db: GameDatabase,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.db = db
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else print
        self.rng = rng if rng is not None else random.Random()
        self.hero: Hero | None = None

    # -- small I/O helpers -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self._output(text)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _read_int(self, prompt: str) -> int | None:
        token = self._ask(prompt).split(maxsplit=1)
        if not token:
            return None
        try:
            return int(token[0])
        except ValueError:
            return None

    # -- heroes ------------------------------------------------------------

    def new_hero(self) -> Hero:
        """Ask for a name and start a fresh hero with it."""
        name = ""
        while not name:
            words = self._ask("Enter the name of your Hero: ").split()
            name = words[0] if words else ""
        self.hero = Hero(name, NEW_HERO_HP, NEW_HERO_POWER, 1, 0, 0)
        return self.hero

    def choose_hero(self, choice: int | None) -> Hero:
        """Create a new hero (0) or load a saved one (1)."""
        while choice not in (0, 1):
            choice = self._read_int(
                "Incorrect. Type 0 for new hero or 1 to load an existing hero: "
            )
        if choice == 0:
            return self.new_hero()

        self.show_heroes()
        hero_id = None
        while hero_id is None:
            hero_id = self._read_int("Type the ID of the hero to load: ")
        self._say(_SEPARATOR)
        self._say("Hero stats: ")
        self._say(_SEPARATOR)

        hero = self.db.load_hero(hero_id)
        if hero is None:
            self._say("No saved hero found with that ID!")
            return self.new_hero()
        self.hero = hero
        self.display_hero()
        return hero

    def display_hero(self) -> None:
        """Show the current hero's stats and inventory."""
        hero = self.hero
        self._say(f"Hero Name: {hero.name}")
        self._say(f"HP: {hero.hp}")
        self._say(f"Power: {hero.power}")
        self._say(f"Level: {hero.level}")
        self._say(f"XP: {hero.xp}")
        self._say(f"Gold: {hero.gold}")
        self._say("Inventory: ")
        for line in hero.inventory_lines():
            self._say(line)
        self._say("")

    def show_heroes(self) -> None:
        """List the heroes saved in the database."""
        self._say("Saved heroes in database:")
        for summary in self.db.list_heroes():
            self._say(
                f"ID: {summary.id}, Name: {summary.name}, Level: {summary.level}, "
                f"XP: {summary.xp}, Gold: {summary.gold}"
            )

    # -- analysis ----------------------------------------------------------

    def analyse(self) -> None:
        """Run the analysis menu over saved heroes and kills until exit."""
        while True:
            choice = self._read_int(_ANALYSE_MENU)
            self._say("")
            if choice == 0:
                self.show_heroes()
            elif choice == 1:
                for name, kills in self.db.kills_per_hero():
                    self._say(f"Hero: {name}, Kills: {kills}")
            elif choice == 2:
                name = self._ask("Enter a Hero id: ")
                for weapon, kills in self.db.weapon_kills_for_hero(name):
                    self._say(f"Weapon: {weapon}, Kills: {kills}")
            elif choice == 3:
                for weapon, hero, kills in self.db.top_hero_per_weapon():
                    self._say(f"Weapon: {weapon}, Top Hero: {hero}, Kills: {kills}")
            elif choice == 4:
                self._say("exiting analyses")
                return
            else:
                self._say("Ugyldigt valg, prøv igen.")

    # -- caves -------------------------------------------------------------

    def choose_grotte(self) -> Grotte:
        """Let the hero pick one of the caves its level allows."""
        options = available_grottes(self.hero.level)
        while True:
            self._say("Grotter: ")
            for index, name in enumerate(options):
                self._say(f"({index}) {name}")
            words = self._ask("Choose a grotte: ").split()
            token = words[0] if words else ""
            if not _is_number(token):
                self._say("choose a number again")
                continue
            number = int(token)
            if number < len(options):
                return create_grotte(options[number], self.rng)
            self._say("invalid number, try again: ")

    def choose_enemy_index(self, grotte: Grotte) -> int:
        """Show the cave's enemies and return the index of the one picked."""
        self._say("Enemies in grotten: ")
        self._say("")
        for index, enemy in enumerate(grotte.enemies):
            self._say(f"Enemy: {index}")
            self._say(enemy.name)
            self._say(f"hp: {enemy.hp}")
            self._say(f"power: {enemy.power}")
            self._say(f"xp: {enemy.xp}")
            self._say("")

        prompt = "Choose an enemy to fight: "
        while True:
            words = self._ask(prompt).split()
            prompt = ""
            token = words[0] if words else ""
            if not _is_number(token):
                self._say("Vælg et tal, prøv igen.")
                continue
            number = int(token)
            if number < len(grotte.enemies):
                return number
            self._say("Ugyldigt tal, prøv igen.")

    def game_rules(self) -> None:
        """Show the rules of the game."""
        for line in _RULES:
            self._say(line)

    def _clear_grotte(self) -> None:
        hero = self.hero
        grotte = self.choose_grotte()
        self._say("")
        while not grotte.is_empty():
            index = self.choose_enemy_index(grotte)
            enemy = grotte.enemies[index]
            fight = Fight(hero, enemy, grotte)
            self._say(_SEPARATOR)
            self._say("Stats for Hero and Enemy")
            self._say("")
            self._say(format_hero(hero))
            line = hero.weapon_line()
            if line is not None:
                self._say(line)
            self._say("")
            self._say(format_enemy(enemy))
            self._say("")

            weapon_id = hero.equipped.id if hero.equipped is not None else None
            fight.run(wait=lambda: self._input(""), out=self._output)
            self.db.record_kill(hero.id, enemy.id, weapon_id)
            grotte.remove_enemy(index)

        self._say("")
        self._say("You have cleared Grotten")
        Fight(hero, None, grotte).award_gold()
        self._say(f"Hero gained gold: {grotte.gold}")

    # -- armory ------------------------------------------------------------

    def _visit_armory(self, armory: Armory) -> None:
        hero = self.hero
        self._say("<><><><><><><><><><><><><><><><><><><><><>")
        self._say("Welcome to the Armory")
        self._say("You can buy weapons here")
        self._say("")
        armory.load_weapons()
        self._say("Avaliable Weapons:")
        for line in armory.weapon_lines():
            self._say(line)

        while True:
            self._say("--------------------------------------------")
            self._say(f"You have: {hero.gold} gold")
            armory.load_weapons()
            self._say("")
            answer = self._ask(
                "Your options: (0) Buy Weapons, (1) Equip Weapon, "
                "(2) Unequip Weapon, (3) Exit Armory: "
            )
            choice = answer[:1]
            if choice == "0":
                index = self._read_int("Buy a weapon by index: ")
                try:
                    weapon = armory.buy_weapon(index if index is not None else -1)
                except PurchaseError as error:
                    self._say(str(error))
                else:
                    self._say(f"You have bought: {weapon.name}")
                self._say("")
            elif choice == "1":
                self._say("")
                self._say("Inventory: ")
                for line in hero.inventory_lines():
                    self._say(line)
                self._say("")
                index = self._read_int("Choose a weapon to equip: ")
                self._say("")
                try:
                    weapon = hero.equip_weapon(index if index is not None else -1)
                except IndexError:
                    self._say("No weapon found")
                else:
                    self._say(
                        f"Equipped: {weapon.name}, Power: {weapon.power}, "
                        f"Durability: {weapon.durability}"
                    )
            elif choice == "2":
                line = hero.weapon_line()
                self._say(f"Unequipped {line}" if line is not None else "Unequipped ")
                self._say("")
                hero.unequip_weapon()
            elif choice == "3":
                self._say("Exiting armory")
                return

    # -- main loop ---------------------------------------------------------

    def start(self) -> None:
        """Run the start menu and then the game loop until the player quits."""
        while True:
            choice = self._read_int(
                "(0) New Game, (1) Load Game, (2) Analyse saves, (3) Exit game: "
            )
            if choice in (0, 1):
                self.choose_hero(choice)
                break
            if choice == 2:
                self.analyse()
            elif choice == 3:
                self._say("exiting game")
                return

        self.game_rules()
        self._say("")
        armory = Armory(self.hero)

        while True:
            choice = self._read_int(
                "Your options are: (0) Fight Monsters, (2) Go to Armory, "
                "(4) Save and Exit: "
            )
            self._say("")
            if choice == 0:
                self._clear_grotte()
            elif choice == 2:
                self._visit_armory(armory)
            elif choice == 4:
                self.db.save_hero(self.hero)
                self._say("Hero and inventory saved to database!")
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Open the save database and play."""
    parser = argparse.ArgumentParser(prog="grottequest", description="A cave-crawling game.")
    parser.add_argument(
        "--database",
        default=DEFAULT_DATABASE,
        help="SQLite file holding saved heroes",
    )
    args = parser.parse_args(argv)

    try:
        db = GameDatabase(args.database)
    except sqlite3.Error as error:
        print(f"Can't open database: {error}", file=sys.stderr)
        return 1

    with db:
        try:
            Game(db).start()
        except (EOFError, KeyboardInterrupt):
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())