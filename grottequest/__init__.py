"""A text-mode cave-crawling role-playing game with SQLite saves."""

__version__ = "0.1.0"
__all__ = ["armory", "enemy", "fight", "game", "grotte", "hero", "storage", "weapon"]