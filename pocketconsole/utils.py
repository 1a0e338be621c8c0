"""Screen helpers, menu rendering, name entry and leaderboards."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence
from pathlib import Path

from pocketconsole.config import LETTERS_AVAILABLE, NAME_LENGTH, MenuOption
from pocketconsole.hardware import SCREEN_WIDTH, Board, Button

logger = logging.getLogger(__name__)

POLL_MS = 20
PRESS_DELAY_MS = 200
LEADERBOARD_SIZE = 3

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def clear_screen(board: Board) -> None:
    """Erase the display and home the cursor."""
    board.display.clear()
    board.display.set_cursor(0, 0)


def load_scene(board: Board, text: str) -> None:
    """Show ``text`` over a loading bar that fills across the screen."""
    display = board.display
    for percent in range(SCREEN_WIDTH):
        display.println(text)
        display.fill_rect(0, 22, percent, 8)
        display.draw_rect(0, 22, SCREEN_WIDTH, 8)
        display.show()
        board.delay(20)
        clear_screen(board)


def menu_window(selected: int, size: int) -> list[tuple[int, bool]]:
    """The up to three option indices visible around ``selected``.

    Each entry is ``(index, is_pointer)``; exactly one visible entry carries
    the pointer.
    """
    if selected == 0:
        centre, pointer = 1, -1
    elif selected == size - 1:
        centre, pointer = size - 2, 1
    else:
        centre, pointer = selected, 0
    return [
        (centre + offset, offset == pointer)
        for offset in (-1, 0, 1)
        if 0 <= centre + offset < size
    ]


def _option_text(option) -> str:
    return option.text if isinstance(option, MenuOption) else str(option)


def print_menu(
    board: Board,
    options: Sequence,
    title: str,
    selected: int,
    current_input: str | None = None,
) -> None:
    """Draw a titled menu window with a pointer at the selected option."""
    display = board.display
    display.println(title if current_input is None else title + current_input)
    for index, is_pointer in menu_window(selected, len(options)):
        prefix = "   >  " if is_pointer else "      "
        display.println(prefix + _option_text(options[index]))
    display.show()


def _wait_for_any_button(board: Board) -> None:
    while not any(board.is_pressed(b) for b in (Button.UP, Button.DOWN, Button.RIGHT)):
        board.delay(PRESS_DELAY_MS)
    board.delay(PRESS_DELAY_MS)


def get_player_name(board: Board) -> str:
    """Let the player pick a three-letter name with the buttons."""
    letters: list[str] = []
    selected = 0
    last = len(LETTERS_AVAILABLE) - 1
    while len(letters) < NAME_LENGTH:
        clear_screen(board)
        current = "".join(letters).ljust(NAME_LENGTH)
        print_menu(board, LETTERS_AVAILABLE, "Enter your name: ", selected, current)
        if board.is_pressed(Button.UP):
            selected = max(selected - 1, 0)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.DOWN):
            selected = min(selected + 1, last)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.RIGHT):
            letters.append(LETTERS_AVAILABLE[selected])
            board.delay(PRESS_DELAY_MS)
        else:
            board.delay(POLL_MS)

    name = "".join(letters)
    clear_screen(board)
    board.display.println(f"Name: {name}")
    board.display.println("\nPress any button to \ncontinue")
    board.display.show()
    _wait_for_any_button(board)
    return name


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_leaderboard_line(line: str) -> tuple[str, int] | None:
    """Split a ``name,score`` line; ``None`` when it has no comma."""
    player, comma, score = line.partition(",")
    if not comma:
        return None
    return player, _to_int(score)


def _leaderboard_path(directory, game: str) -> Path:
    return Path(os.fspath(directory)) / f"leaderboard.{game}"


def _entries(path: Path) -> list[tuple[str, int]]:
    entries = []
    for line in path.read_text(encoding="utf-8").split("\n"):
        parsed = parse_leaderboard_line(line)
        if parsed is None:
            continue
        entries.append(parsed)
    return entries


def read_leaderboard(directory, game: str) -> list[tuple[str, int]]:
    """Entries of a game's leaderboard file in file order; empty if missing."""
    path = _leaderboard_path(directory, game)
    if not path.is_file():
        return []
    return _entries(path)


def _rank(entries) -> list[tuple[str, int]]:
    best: list[tuple[str, int]] = [("", 0)] * LEADERBOARD_SIZE
    for name, score in entries:
        for position, (_, best_score) in enumerate(best):
            if score > best_score:
                best.insert(position, (name, score))
                del best[LEADERBOARD_SIZE:]
                break
    return best


def update_leaderboard(directory, player_name: str, score: int, game: str) -> list[tuple[str, int]]:
    """Merge a new score into a game's leaderboard, keeping the three best."""
    path = _leaderboard_path(directory, game)
    logger.debug("updating %s with %s,%d", path, player_name, score)
    existing = _entries(path) if path.is_file() else []
    best = _rank([*existing, (player_name, score)])
    path.write_text("".join(f"{name},{points}\n" for name, points in best), encoding="utf-8")
    return best


def display_leaderboard(board: Board, directory, game: str) -> list[tuple[str, int]]:
    """Show the players with a positive score and return them."""
    clear_screen(board)
    display = board.display
    display.println("Best Players:")
    path = _leaderboard_path(directory, game)
    if not path.is_file():
        logger.debug("leaderboard %s could not be opened", path)
        display.println("Error opening leaderboard file!")
        display.show()
        return []
    shown = [(name, score) for name, score in _entries(path) if score > 0]
    for name, score in shown:
        display.println(f"   {name} - {score}")
    display.show()
    return shown