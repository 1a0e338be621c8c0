"""LED control: on, off and a repeating blink, plus the LED menu."""

from __future__ import annotations

from pocketconsole.config import LED_MENU_OPTIONS
from pocketconsole.hardware import LED_PIN, Board, Button
from pocketconsole.utils import POLL_MS, PRESS_DELAY_MS, clear_screen, print_menu

BLINK_ON_MS = 3000
BLINK_OFF_MS = 1500


class LedController:
    """Drives the board LED and keeps track of whether it is on or blinking.

    Blinking runs alongside the menus: :meth:`blink_step` performs one phase
    (switching the LED and returning how long that phase lasts), and the
    menu loop advances the blink whenever a phase has run out.
    """

    def __init__(self, board: Board, pin: int = LED_PIN):
        self.board = board
        self.pin = pin
        self.state = False
        self.blinking = False
        self._next_on = True
        self._deadline: int | None = None

    def _stop_blinking(self) -> None:
        self.blinking = False
        self._next_on = True
        self._deadline = None

    def turn_on(self) -> None:
        """Stop any blinking and switch the LED on."""
        self._stop_blinking()
        self.board.set_led(True)
        self.state = True

    def turn_off(self) -> None:
        """Stop any blinking and switch the LED off."""
        self._stop_blinking()
        self.board.set_led(False)
        self.state = False

    def blink(self) -> bool:
        """Start blinking; returns False when a blink is already running."""
        if self.blinking:
            return False
        self.blinking = True
        self._next_on = True
        self.blink_step()
        return True

    def blink_step(self) -> int:
        """Run the next blink phase and return its length in milliseconds."""
        if not self.blinking:
            raise RuntimeError("the LED is not blinking")
        on = self._next_on
        self.board.set_led(on)
        hold = BLINK_ON_MS if on else BLINK_OFF_MS
        self._next_on = not on
        self._deadline = self.board.elapsed_ms + hold
        return hold

    def _poll(self) -> None:
        if self.blinking and self._deadline is not None and self.board.elapsed_ms >= self._deadline:
            self.blink_step()


def led_menu_controller(controller: LedController, selected: int) -> None:
    """Carry out the LED menu entry at index ``selected``."""
    actions = {0: controller.turn_on, 1: controller.turn_off, 2: controller.blink}
    action = actions.get(selected)
    if action is not None:
        action()


def led_menu(board: Board, controller: LedController) -> None:
    """Show the LED menu until LEFT is pressed."""
    selected = 0
    last = len(LED_MENU_OPTIONS) - 1
    while True:
        clear_screen(board)
        print_menu(board, LED_MENU_OPTIONS, "LED MENU:", selected)
        if board.is_pressed(Button.UP):
            selected = max(selected - 1, 0)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.DOWN):
            selected = min(selected + 1, last)
            board.delay(PRESS_DELAY_MS)
        elif board.is_pressed(Button.LEFT):
            board.delay(PRESS_DELAY_MS)
            controller._poll()
            return
        elif board.is_pressed(Button.RIGHT):
            led_menu_controller(controller, selected)
            board.delay(PRESS_DELAY_MS)
        else:
            board.delay(POLL_MS)
        controller._poll()