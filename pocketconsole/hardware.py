"""Simulated board: pins, OLED display and scripted push buttons."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

LDR_PIN = 2
LED_PIN = 21
SDA_PIN = 3
SCL_PIN = 4

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 32


class Button(enum.Enum):
    """The four navigation buttons, valued by the pin they sit on."""

    UP = 8
    DOWN = 6
    RIGHT = 7
    LEFT = 5


class Display:
    """An in-memory monochrome display that records text runs and rectangles.

    Text is kept as runs of ``(x, y, text)``; rectangles as
    ``(x, y, width, height, filled)``. Every call to :meth:`show` appends a
    ``(text, rects)`` snapshot to :attr:`frames`.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT, history: int = 512):
        self.width = width
        self.height = height
        self.cursor: tuple[int, int] = (0, 0)
        self.runs: list[tuple[int, int, str]] = []
        self.rects: list[tuple[int, int, int, int, bool]] = []
        self.frames: deque[tuple[str, tuple[tuple[int, int, int, int, bool], ...]]] = deque(
            maxlen=history
        )
        self._new_run = True

    def clear(self) -> None:
        """Erase everything drawn since the last clear."""
        self.runs.clear()
        self.rects.clear()
        self._new_run = True

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor; following text starts a new run there."""
        self.cursor = (x, y)
        self._new_run = True

    def print(self, text) -> None:
        """Append text at the cursor."""
        text = str(text)
        if self.runs and not self._new_run:
            x, y, existing = self.runs[-1]
            self.runs[-1] = (x, y, existing + text)
        else:
            self.runs.append((*self.cursor, text))
            self._new_run = False

    def println(self, text="") -> None:
        """Append text followed by a line break."""
        self.print(f"{text}\n")

    def write(self, char) -> None:
        """Append a single character, given as a string or a character code."""
        if isinstance(char, int):
            char = chr(char)
        if len(char) != 1:
            raise ValueError("write() takes exactly one character")
        self.print(char)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a filled rectangle."""
        self.rects.append((x, y, width, height, True))

    def draw_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a rectangle outline."""
        self.rects.append((x, y, width, height, False))

    def show(self):
        """Push the current contents to the screen and return the snapshot."""
        frame = (self.text(), tuple(self.rects))
        self.frames.append(frame)
        return frame

    def text(self) -> str:
        """All text currently drawn, in drawing order."""
        return "".join(run for _, _, run in self.runs)


class Board:
    """A board whose button presses are scripted ahead of time.

    Each queued frame is the set of buttons held until the next call to
    :meth:`delay`. When no frames are left, nothing is held; after more than
    ``idle_limit`` such idle delays a :class:`TimeoutError` is raised so that
    a loop waiting for input cannot spin forever.
    """

    def __init__(self, light: int = 0, idle_limit: int = 10_000, display: Display | None = None):
        self.display = display if display is not None else Display()
        self.light = light
        self.led_on = False
        self.led_history: list[bool] = []
        self.elapsed_ms = 0
        self.idle_limit = idle_limit
        self._frames: deque[frozenset[Button]] = deque()
        self._held: set[Button] = set()
        self._idle = 0

    def queue(self, *args) -> None:
        """Queue input frames: ``None``, a Button, or an iterable of Buttons."""
        for frame in args:
            self._frames.append(self._as_frame(frame))

    @staticmethod
    def _as_frame(frame) -> frozenset[Button]:
        if frame is None:
            return frozenset()
        if isinstance(frame, Button):
            return frozenset({frame})
        if isinstance(frame, (str, bytes)) or not isinstance(frame, Iterable):
            raise TypeError(f"not a button frame: {frame!r}")
        buttons = frozenset(frame)
        for button in buttons:
            if not isinstance(button, Button):
                raise TypeError(f"not a button: {button!r}")
        return buttons

    def press(self, button: Button) -> None:
        """Hold a button down until it is released."""
        self._held.add(button)

    def release(self, button: Button) -> None:
        """Let go of a held button."""
        self._held.discard(button)

    def is_pressed(self, button: Button) -> bool:
        """Whether the button is down right now."""
        if button in self._held:
            return True
        return bool(self._frames) and button in self._frames[0]

    def set_led(self, on) -> None:
        """Switch the LED."""
        self.led_on = bool(on)
        self.led_history.append(self.led_on)

    def read_light(self) -> int:
        """Raw reading of the light sensor."""
        return self.light

    def delay(self, ms: int) -> None:
        """Let time pass, moving on to the next queued input frame."""
        if ms < 0:
            raise ValueError("delay must not be negative")
        self.elapsed_ms += ms
        if self._frames:
            self._frames.popleft()
            self._idle = 0
            return
        self._idle += 1
        if self._idle > self.idle_limit:
            raise TimeoutError("no scripted input left")