"""The games menu and dispatch to each game."""

from __future__ import annotations

import random
from pathlib import Path

from pocketconsole.config import GAME_MENU_OPTIONS
from pocketconsole.hardware import Board, Button
from pocketconsole.led import LedController
from pocketconsole.pong import play_pong
from pocketconsole.reaction import play_reaction
from pocketconsole.snake import play_snake
from pocketconsole.trivial import play_trivial
from pocketconsole.utils import POLL_MS, PRESS_DELAY_MS, clear_screen, load_scene, print_menu

QUESTIONS_FILE = "questions.tr"


def game_menu_controller(board: Board, selected: int, directory, rng=None):
    """Show the loading scene for a game and play it; returns the game's result."""
    if not 0 <= selected < len(GAME_MENU_OPTIONS):
        raise IndexError(f"no game at menu position {selected}")
    rng = rng if rng is not None else random.Random()
    directory = Path(directory)
    clear_screen(board)
    load_scene(board, GAME_MENU_OPTIONS[selected].text)
    if selected == 0:
        return play_trivial(board, directory / QUESTIONS_FILE, directory, rng)
    if selected == 1:
        return play_snake(board, directory, rng)
    if selected == 2:
        return play_pong(board)
    return play_reaction(board, LedController(board), rng)


def game_menu(board: Board, directory, rng=None) -> None:
    """Show the games menu until LEFT is pressed."""
    rng = rng if rng is not None else random.Random()
    selected = 0
    last = len(GAME_MENU_OPTIONS) - 1
    while True:
        clear_screen(board)
        print_menu(board, GAME_MENU_OPTIONS, "GAME MENU:", selected)
        if board.is_pressed(Button.UP):
            selected = max(selected - 1, 0)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.DOWN):
            selected = min(selected + 1, last)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.LEFT):
            board.delay(PRESS_DELAY_MS)
            return
        elif board.is_pressed(Button.RIGHT):
            game_menu_controller(board, selected, directory, rng)
            board.delay(PRESS_DELAY_MS)
        else:
            board.delay(POLL_MS)