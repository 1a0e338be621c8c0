"""Light sensor readout with a percentage bar."""

from __future__ import annotations

from pocketconsole.config import State
from pocketconsole.hardware import SCREEN_WIDTH, Board, Button
from pocketconsole.utils import PRESS_DELAY_MS, clear_screen

ADC_MAX = 4095


def _scale(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linear integer rescale, truncating toward zero."""
    numerator = (value - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min


def light_percent(raw: int) -> int:
    """Brightness in percent for a raw sensor reading; darker reads higher."""
    raw = min(max(raw, 0), ADC_MAX)
    percent = _scale(raw, 0, ADC_MAX, 100, 0)
    return min(max(percent, 0), 100)


def bar_width(percent: int) -> int:
    """Width in pixels of the bar drawn for ``percent``."""
    return _scale(percent, 0, 100, 0, SCREEN_WIDTH)


def show_light_intensity(board: Board) -> int:
    """Draw the current light level as text and a bar; return the percentage."""
    percent = light_percent(board.read_light())
    display = board.display
    display.println(f"Luz actual: {percent}%")
    display.fill_rect(0, 22, bar_width(percent), 8)
    display.draw_rect(0, 22, SCREEN_WIDTH, 8)
    return percent


def light_menu(board: Board, state: State) -> None:
    """Show the live light level until LEFT is pressed."""
    while True:
        clear_screen(board)
        show_light_intensity(board)
        board.display.show()
        state.ldr_value = board.read_light()
        leaving = board.is_pressed(Button.LEFT)
        if leaving:
            board.delay(PRESS_DELAY_MS)
        board.delay(PRESS_DELAY_MS)
        if leaving:
            return