"""Two-player reaction game: press first once the LED lights up."""

from __future__ import annotations

import random

from pocketconsole.hardware import Board, Button
from pocketconsole.led import LedController
from pocketconsole.utils import POLL_MS, clear_screen

ROUNDS = 5
LEFT_PLAYER = 0
RIGHT_PLAYER = 1
MIN_WAIT_MS = 3000
MAX_WAIT_MS = 10000
MESSAGE_MS = 2000

_SIDES = {Button.LEFT: LEFT_PLAYER, Button.RIGHT: RIGHT_PLAYER}


class ReactionGame:
    """Scores of the left and right players."""

    def __init__(self):
        self.scores = [0, 0]
        self.loser: int | None = None

    @staticmethod
    def _side(button: Button) -> int:
        try:
            return _SIDES[button]
        except KeyError:
            raise ValueError(f"{button!r} is not a player button") from None

    def early_press(self, button: Button) -> int:
        """Penalise the player who pressed too soon; return that player."""
        loser = self._side(button)
        self.loser = loser
        self.scores[loser] -= 1
        return loser

    def record_press(self, button: Button | None) -> int | None:
        """Award the round to the player who pressed; None when nobody did."""
        if button is None:
            return None
        winner = self._side(button)
        self.scores[winner] += 1
        return winner

    def overall_winner(self) -> int:
        """The left player only wins with strictly more points."""
        return LEFT_PLAYER if self.scores[LEFT_PLAYER] > self.scores[RIGHT_PLAYER] else RIGHT_PLAYER


def _pressed_side(board: Board) -> Button | None:
    if board.is_pressed(Button.RIGHT):
        return Button.RIGHT
    if board.is_pressed(Button.LEFT):
        return Button.LEFT
    return None


def _message(board: Board, *lines: str) -> None:
    clear_screen(board)
    for line in lines:
        board.display.println(line)
    board.display.show()


def play_reaction(board: Board, led: LedController, rng=None) -> int:
    """Play five rounds and return the overall winner (0 left, 1 right)."""
    rng = rng if rng is not None else random.Random()
    game = ReactionGame()
    led.turn_off()

    _message(board, "Get ready...")
    board.delay(MESSAGE_MS)

    for round_number in range(1, ROUNDS + 1):
        _message(board, f"Round {round_number}", "\nWait for it...")
        deadline = board.elapsed_ms + rng.randrange(MIN_WAIT_MS, MAX_WAIT_MS)
        while board.elapsed_ms < deadline:
            button = _pressed_side(board)
            if button is None:
                board.delay(POLL_MS)
                continue
            loser = game.early_press(button)
            _message(board, "Early Press Detected!", f"Loser Score: {game.scores[loser]}")
            board.delay(MESSAGE_MS)

        clear_screen(board)
        board.display.println("Press NOW!")
        led.turn_on()
        board.display.show()
        while game.loser is None and _pressed_side(board) is None:
            board.delay(POLL_MS)
        led.turn_off()

        winner = game.record_press(_pressed_side(board))
        game.loser = None

        if winner == LEFT_PLAYER:
            _message(board, "Left Player wins!", f"Left player score: {game.scores[LEFT_PLAYER]}")
        else:
            _message(board, "Right Player wins!", f"Right player score: {game.scores[RIGHT_PLAYER]}")
        board.delay(MESSAGE_MS)

    overall = game.overall_winner()
    headline = "Left Player Wins!!" if overall == LEFT_PLAYER else "Right Player Wins!!"
    _message(board, headline, "\nPress any button to \ncontinue")
    while not any(board.is_pressed(b) for b in (Button.UP, Button.DOWN, Button.RIGHT)):
        board.delay(POLL_MS)
    return overall