"""A simulated pocket game console: LED and light menus, leaderboards and four small games."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "games",
    "hardware",
    "led",
    "light",
    "pong",
    "reaction",
    "snake",
    "trivial",
    "utils",
]