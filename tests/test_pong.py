import pytest

from pocketconsole.hardware import SCREEN_HEIGHT, SCREEN_WIDTH, Board, Button
from pocketconsole.pong import (
    AI,
    BALL_CHAR,
    CELL_SIZE,
    EASY,
    HARD,
    MEDIUM,
    NO_WINNER,
    PADDLE_CHAR,
    PLAYER,
    WINNING_SCORE,
    Pong,
    ai_move,
    play_pong,
    select_pong_difficulty,
)


def test_ai_ignores_ball_on_player_side():
    assert ai_move(0, SCREEN_WIDTH // 2 - 1, 10, HARD) == 10


def test_ai_moves_up_towards_ball():
    assert ai_move(0, SCREEN_WIDTH - 10, 10, EASY) == 10 - 1


def test_ai_moves_down_towards_ball():
    assert ai_move(30, SCREEN_WIDTH - 10, 10, EASY) == 10 + 1


def test_ai_stays_when_ball_within_paddle():
    assert ai_move(11, SCREEN_WIDTH - 10, 10, HARD) == 10


@pytest.mark.parametrize("difficulty, moves", [(EASY, False), (MEDIUM, False), (HARD, True)])
def test_ai_reaction_depends_on_difficulty(difficulty, moves):
    paddle = 10
    ball_y = paddle + 3 + 2
    result = ai_move(ball_y, SCREEN_WIDTH - 10, paddle, difficulty)
    assert result == (paddle + 1 if moves else paddle)


def test_unknown_difficulty_behaves_like_easy():
    for ball_y in range(0, 30):
        assert ai_move(ball_y, SCREEN_WIDTH, 10, 99) == ai_move(ball_y, SCREEN_WIDTH, 10, EASY)


def test_new_game_is_centred():
    game = Pong()
    assert (game.ball_x, game.ball_y) == (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    assert (game.player_score, game.ai_score, game.winner) == (0, 0, NO_WINNER)


def test_reset_ball_reverses_horizontal_direction():
    game = Pong()
    game.ball_x, game.ball_y = 5, 3
    game.reset_ball()
    assert game.velocity_x == -1
    assert (game.ball_x, game.ball_y) == (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    game.reset_ball()
    assert game.velocity_x == 1


def test_reset_clears_scores():
    game = Pong(HARD)
    game.player_score = 3
    game.ai_score = 2
    game.reset()
    assert (game.player_score, game.ai_score) == (0, 0)
    assert game.difficulty == HARD


def test_player_paddle_stays_in_bounds():
    game = Pong()
    for _ in range(20):
        game.move_player(Button.UP)
    assert game.player_y == 0
    for _ in range(20):
        game.move_player(Button.DOWN)
    assert game.player_y == SCREEN_HEIGHT // CELL_SIZE - 4


def test_other_buttons_do_not_move_paddle():
    game = Pong()
    before = game.player_y
    assert game.move_player(Button.LEFT) == before


def test_ball_at_left_edge_scores_for_ai():
    game = Pong()
    game.ball_x = 0
    game.step()
    assert game.ai_score == 1
    assert game.player_score == 0


def test_ball_at_right_edge_scores_for_player():
    game = Pong()
    game.ball_x = SCREEN_WIDTH - 1
    game.step()
    assert game.player_score == 1


def test_player_wins_at_five():
    game = Pong()
    game.player_score = WINNING_SCORE - 1
    game.ball_x = SCREEN_WIDTH - 1
    assert game.step() == PLAYER


def test_ai_wins_at_five():
    game = Pong()
    game.ai_score = WINNING_SCORE - 1
    game.ball_x = 0
    assert game.step() == AI


def test_ball_bounces_off_player_paddle():
    game = Pong()
    game.ball_x, game.ball_y = 1, 3
    game.player_y = 3
    game.velocity_x = -1
    game.step()
    assert game.velocity_x == 1


def test_render_draws_ball_paddles_and_scores():
    board = Board()
    game = Pong()
    game.player_score = 2
    game.ai_score = 3
    game.render(board)
    text = board.display.frames[-1][0]
    assert text.count(BALL_CHAR) == 1
    assert text.count(PADDLE_CHAR) == 8
    assert text.endswith("23")


def test_select_difficulty_defaults_to_easy():
    board = Board(idle_limit=10)
    board.queue(Button.RIGHT)
    assert select_pong_difficulty(board) == EASY


def test_select_difficulty_navigates_and_clamps():
    board = Board(idle_limit=10)
    board.queue(Button.DOWN, None, Button.DOWN, None, Button.DOWN, None, Button.RIGHT)
    assert select_pong_difficulty(board) == HARD


def test_select_difficulty_up_moves_back():
    board = Board(idle_limit=10)
    board.queue(Button.DOWN, None, Button.UP, None, Button.RIGHT)
    assert select_pong_difficulty(board) == EASY


def test_play_pong_finishes_with_a_winner():
    board = Board()
    board.queue(Button.RIGHT)
    winner = play_pong(board)
    assert winner in (PLAYER, AI)
    last_text = board.display.frames[-1][0]
    assert str(WINNING_SCORE) in last_text