"""Snake on a 16x4 grid that wraps around its edges."""

from __future__ import annotations

import enum
import random

from pocketconsole.hardware import Board, Button
from pocketconsole.utils import (
    PRESS_DELAY_MS,
    clear_screen,
    display_leaderboard,
    get_player_name,
    update_leaderboard,
)

GRID_WIDTH = 16
GRID_HEIGHT = 4
CELL_SIZE = 8
FRAME_MS = 200
RESULT_PAUSE_MS = 5000
LEADERBOARD_GAME = "sn"


class Direction(enum.IntEnum):
    """Heading of the snake."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}

_BUTTON_DIRECTIONS = {
    Button.UP: Direction.UP,
    Button.DOWN: Direction.DOWN,
    Button.LEFT: Direction.LEFT,
    Button.RIGHT: Direction.RIGHT,
}

_STEER_ORDER = (Button.UP, Button.DOWN, Button.LEFT, Button.RIGHT)


class SnakeGame:
    """State of one snake game: body, heading, apple and score."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Put a one-cell snake in the middle heading right and place an apple."""
        self.score = 0
        self.body: list[tuple[int, int]] = [(GRID_WIDTH // 2, GRID_HEIGHT // 2)]
        self.direction = Direction.RIGHT
        self.game_over = False
        self.apple = self._random_cell()

    def _random_cell(self) -> tuple[int, int]:
        x = self.rng.randrange(0, GRID_WIDTH)
        y = self.rng.randrange(0, GRID_HEIGHT)
        return x, y

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    def steer(self, button: Button) -> bool:
        """Turn towards ``button`` unless that would reverse; report whether it turned."""
        direction = _BUTTON_DIRECTIONS[button]
        if self.direction == direction.opposite:
            return False
        self.direction = direction
        return True

    def step(self) -> bool:
        """Move one cell, eat and grow, and return whether the game is over."""
        if self.game_over:
            raise RuntimeError("the game is over")
        dx, dy = _DELTAS[self.direction]
        x, y = self.head
        new_head = ((x + dx) % GRID_WIDTH, (y + dy) % GRID_HEIGHT)
        old_tail = self.body[-1]
        self.body = [new_head, *self.body[:-1]]

        if new_head == self.apple:
            self.score += 1
            self.body.append(old_tail)
            self.apple = self._random_cell()

        if new_head in self.body[1:]:
            self.game_over = True
        return self.game_over

    def render(self, board: Board) -> None:
        """Draw the apple, the head as an outline and the body as filled squares."""
        clear_screen(board)
        display = board.display
        apple_x, apple_y = self.apple
        display.fill_rect(apple_x * CELL_SIZE + 1, apple_y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
        head_x, head_y = self.head
        display.draw_rect(head_x * CELL_SIZE, head_y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        for x, y in self.body[1:]:
            display.fill_rect(x * CELL_SIZE + 1, y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
        display.show()


def update_snake_leaderboard(directory, player_name: str, score: int) -> list[tuple[str, int]]:
    """Record a snake score in the snake leaderboard."""
    return update_leaderboard(directory, player_name, score, LEADERBOARD_GAME)


def display_snake_leaderboard(board: Board, directory) -> list[tuple[str, int]]:
    """Show the snake leaderboard."""
    return display_leaderboard(board, directory, LEADERBOARD_GAME)


def play_snake(board: Board, directory, rng=None) -> int:
    """Play one game of snake, record the score and return it."""
    clear_screen(board)
    board.display.show()
    game = SnakeGame(rng)
    name = get_player_name(board)

    while not game.game_over:
        game.render(board)
        for button in _STEER_ORDER:
            if board.is_pressed(button) and game.steer(button):
                break
        game.step()
        board.delay(FRAME_MS)

    clear_screen(board)
    board.display.println("Game Over!")
    board.display.println(f"Score: {game.score}")
    board.display.println("\nPress any button to \ncontinue")
    board.display.show()
    while not any(board.is_pressed(b) for b in (Button.UP, Button.DOWN, Button.RIGHT)):
        board.delay(PRESS_DELAY_MS)

    update_snake_leaderboard(directory, name, game.score)
    display_snake_leaderboard(board, directory)
    board.delay(RESULT_PAUSE_MS)
    return game.score