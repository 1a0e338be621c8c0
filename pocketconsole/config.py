"""Shared data structures, menus and settings."""

from __future__ import annotations

import string
from dataclasses import dataclass

TRIVIAL_MAX_QUESTIONS = 10
TRIVIAL_QUESTIONS_PER_GAME = 3
NAME_LENGTH = 3

LETTERS_AVAILABLE: tuple[str, ...] = (*string.ascii_uppercase, " ")


@dataclass(frozen=True)
class MenuOption:
    """One line of a menu."""

    text: str
    value: int = 0


@dataclass
class TrivialQuestion:
    """A trivia question with three answer options."""

    question: str = ""
    options: tuple[str, str, str] = ("", "", "")
    correct_answer: int = 0
    question_id: int = 0

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if len(self.options) != 3:
            raise ValueError("a trivia question has exactly three options")


@dataclass
class State:
    """Mutable settings shared across the menus."""

    ldr_value: int = 0
    led_state: bool = False
    threshold: int = 2750
    selected_option: int = 0
    player_name: str = ""


MAIN_MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("LED", 0),
    MenuOption("LIGHT", 1),
    MenuOption("GAMES", 2),
    MenuOption("EXIT", 3),
)

LED_MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("LED ON", 1),
    MenuOption("LED OFF", 2),
    MenuOption("BLINK LED", 3),
)

LIGHT_MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("ACTUAL DAY STATE", 1),
    MenuOption("LIGHT INTENSITY", 2),
    MenuOption("EXIT", 3),
)

GAME_MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("TRIVIAL", 1),
    MenuOption("SNAKE", 2),
    MenuOption("PONG", 3),
    MenuOption("REACTION!", 4),
)