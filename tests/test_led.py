import pytest

from pocketconsole.hardware import Board, Button
from pocketconsole.led import (
    BLINK_OFF_MS,
    BLINK_ON_MS,
    LedController,
    led_menu,
    led_menu_controller,
)


@pytest.fixture
def board():
    return Board(idle_limit=50)


def test_turn_on_and_off(board):
    led = LedController(board)
    led.turn_on()
    assert led.state is True
    assert board.led_on is True
    led.turn_off()
    assert led.state is False
    assert board.led_history == [True, False]


def test_blink_starts_with_led_on(board):
    led = LedController(board)
    assert led.blink() is True
    assert led.blinking is True
    assert board.led_history == [True]


def test_blink_twice_does_not_restart(board):
    led = LedController(board)
    led.blink()
    assert led.blink() is False
    assert board.led_history == [True]


def test_blink_steps_alternate(board):
    led = LedController(board)
    led.blink()
    assert led.blink_step() == BLINK_OFF_MS
    assert board.led_on is False
    assert led.blink_step() == BLINK_ON_MS
    assert board.led_on is True


def test_blink_does_not_change_state(board):
    led = LedController(board)
    led.blink()
    assert led.state is False


def test_turn_on_stops_blinking(board):
    led = LedController(board)
    led.blink()
    led.turn_on()
    assert led.blinking is False
    with pytest.raises(RuntimeError):
        led.blink_step()


def test_blink_step_without_blinking_raises(board):
    with pytest.raises(RuntimeError):
        LedController(board).blink_step()


@pytest.mark.parametrize("index, expected", [(0, True), (1, False)])
def test_menu_controller_switches(board, index, expected):
    led = LedController(board)
    led_menu_controller(led, index)
    assert board.led_on is expected
    assert led.state is expected


def test_menu_controller_blink(board):
    led = LedController(board)
    led_menu_controller(led, 2)
    assert led.blinking is True


def test_menu_controller_unknown_index_does_nothing(board):
    led = LedController(board)
    led_menu_controller(led, 7)
    assert board.led_history == []


def test_led_menu_turns_on_then_exits(board):
    led = LedController(board)
    board.queue(None, Button.RIGHT, Button.LEFT)
    led_menu(board, led)
    assert led.state is True
    assert "LED MENU:" in board.display.frames[-1][0]


def test_led_menu_navigates_to_blink(board):
    led = LedController(board)
    board.queue(Button.DOWN, Button.DOWN, Button.DOWN, Button.RIGHT, Button.LEFT)
    led_menu(board, led)
    assert led.blinking is True
    assert "BLINK LED" in board.display.frames[-1][0]


def test_led_menu_up_clamps_at_first(board):
    led = LedController(board)
    board.queue(Button.UP, Button.UP, Button.RIGHT, Button.LEFT)
    led_menu(board, led)
    assert led.state is True


def test_led_menu_advances_running_blink(board):
    led = LedController(board)
    led.blink()
    board.delay(BLINK_ON_MS)
    board.queue(Button.LEFT)
    led_menu(board, led)
    assert board.led_history == [True, False]