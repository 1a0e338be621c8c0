"""Pong against a computer paddle with three difficulty levels."""

from __future__ import annotations

from pocketconsole.config import MenuOption
from pocketconsole.hardware import SCREEN_HEIGHT, SCREEN_WIDTH, Board, Button
from pocketconsole.utils import PRESS_DELAY_MS, clear_screen, print_menu

CELL_SIZE = 4
BALL_CHAR = chr(254)
PADDLE_CHAR = chr(219)
PADDLE_LENGTH = 4
WINNING_SCORE = 5
FRAME_MS = 200

NO_WINNER = 0
PLAYER = 1
AI = 2

EASY, MEDIUM, HARD = 1, 2, 3
_REACTION_THRESHOLDS = {EASY: 4, MEDIUM: 2, HARD: 1}

PONG_DIFFICULTY_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("Easy"),
    MenuOption("Medium"),
    MenuOption("Hard"),
)


def ai_move(ball_y: int, ball_x: int, paddle_y: int, difficulty: int) -> int:
    """New position of the computer's paddle after reacting to the ball."""
    threshold = _REACTION_THRESHOLDS.get(difficulty, 4)
    if ball_x < SCREEN_WIDTH // 2:
        return paddle_y
    if ball_y < paddle_y and abs(ball_y - paddle_y) > threshold:
        return paddle_y - 1
    bottom = paddle_y + PADDLE_LENGTH - 1
    if ball_y > bottom and abs(ball_y - bottom) > threshold:
        return paddle_y + 1
    return paddle_y


class Pong:
    """State of one match: ball, paddles and scores."""

    def __init__(self, difficulty: int = EASY):
        self.difficulty = difficulty
        self.reset()

    def reset(self) -> None:
        """Start a fresh match with the ball in the middle."""
        self.winner = NO_WINNER
        self.ball_x = SCREEN_WIDTH // 2
        self.ball_y = SCREEN_HEIGHT // 2
        self.velocity_x = 1
        self.velocity_y = 1
        self.player_y = SCREEN_HEIGHT // 2 - 10
        self.ai_y = SCREEN_HEIGHT // 2 - 10
        self.player_score = 0
        self.ai_score = 0

    def reset_ball(self) -> None:
        """Recentre the ball, reversing its horizontal direction."""
        self.ball_x = SCREEN_WIDTH // 2
        self.ball_y = SCREEN_HEIGHT // 2
        self.velocity_x = -1 if self.velocity_x > 0 else 1
        self.velocity_y = 1 if self.velocity_y > 0 else -1

    def move_player(self, button: Button) -> int:
        """Move the player's paddle for a button press; return its position."""
        if button is Button.UP and self.player_y > 0:
            self.player_y -= 1
        elif button is Button.DOWN and self.player_y < SCREEN_HEIGHT // CELL_SIZE - PADDLE_LENGTH:
            self.player_y += 1
        return self.player_y

    def step(self) -> int:
        """Advance one frame and return the winner so far."""
        if self.ball_x <= 0:
            self.ai_score += 1
            self.reset_ball()
        elif self.ball_x >= SCREEN_WIDTH - 1:
            self.player_score += 1
            self.reset_ball()

        if self.ball_y <= 0 or self.ball_y >= SCREEN_HEIGHT // CELL_SIZE - 1:
            self.velocity_y = -self.velocity_y
        hits_player = self.ball_x == 1 and self.ball_y == self.player_y
        hits_ai = self.ball_x == SCREEN_WIDTH // CELL_SIZE - 2 and self.ball_y == self.ai_y
        if hits_player or hits_ai:
            self.velocity_x = -self.velocity_x

        self.ball_x += self.velocity_x
        self.ball_y += self.velocity_y
        self.ai_y = ai_move(self.ball_y, self.ball_x, self.ai_y, self.difficulty)

        if self.player_score >= WINNING_SCORE:
            self.winner = PLAYER
        elif self.ai_score >= WINNING_SCORE:
            self.winner = AI
        else:
            self.winner = NO_WINNER
        return self.winner

    def render(self, board: Board) -> None:
        """Draw ball, paddles and scores."""
        clear_screen(board)
        display = board.display
        display.set_cursor(self.ball_x, self.ball_y)
        display.write(BALL_CHAR)
        for offset in range(PADDLE_LENGTH):
            display.set_cursor(0, self.player_y + offset)
            display.write(PADDLE_CHAR)
        for offset in range(PADDLE_LENGTH):
            display.set_cursor(SCREEN_WIDTH - 1, self.ai_y + offset)
            display.write(PADDLE_CHAR)
        display.set_cursor(SCREEN_WIDTH // 4, 0)
        display.print(self.player_score)
        display.set_cursor(3 * SCREEN_WIDTH // 4 - 20, 0)
        display.print(self.ai_score)
        display.show()


def select_pong_difficulty(board: Board) -> int:
    """Let the player choose the computer's difficulty; returns 1, 2 or 3."""
    selected = 0
    last = len(PONG_DIFFICULTY_OPTIONS) - 1
    difficulty = None
    while difficulty is None:
        clear_screen(board)
        if board.is_pressed(Button.UP) and selected > 0:
            selected -= 1
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.DOWN) and selected < last:
            selected += 1
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.RIGHT):
            difficulty = selected + 1
        print_menu(board, PONG_DIFFICULTY_OPTIONS, "Select AI Difficulty", selected)
        board.delay(PRESS_DELAY_MS)
    return difficulty


def play_pong(board: Board) -> int:
    """Play a match to five points and return the winner (1 player, 2 AI)."""
    game = Pong(select_pong_difficulty(board))
    while game.winner == NO_WINNER:
        if board.is_pressed(Button.UP) and game.player_y > 0:
            game.move_player(Button.UP)
        elif board.is_pressed(Button.DOWN):
            game.move_player(Button.DOWN)
        game.step()
        game.render(board)
        board.delay(FRAME_MS)
    return game.winner