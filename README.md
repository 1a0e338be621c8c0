# pocketconsole

A small handheld game console that runs on a simulated board: four buttons
(up, down, left, right), one LED, a light sensor and a 128×32 monochrome
screen. The LED controls, the light meter, the games menu and four games
(Trivial, Snake, Pong and Reaction!) are all driven through a `Board`
object, so every screen and every button press can be scripted and
inspected from Python.

## The board

`pocketconsole.hardware` holds the pieces the rest of the package talks to:

- `Button`: the enum of the four buttons `UP`, `DOWN`, `LEFT`, `RIGHT`.
- `Display`: an in-memory screen that records text runs and rectangles.
  `clear`, `set_cursor`, `print`, `println`, `write`, `fill_rect` and
  `draw_rect` draw on it; `show` appends a `(text, rects)` snapshot to
  `frames` and returns it; `text()` returns all text currently drawn.
- `Board`: owns the display, the button states, the LED and the light
  sensor.
  - `queue(*frames)` lines up input frames. Each frame is `None`, a
    `Button`, or an iterable of buttons, and is held until the next
    `delay`.
  - `press`/`release` hold and let go of a button; `is_pressed` reports
    whether a button is down (held or in the current frame).
  - `set_led(on)` switches the LED and records it in `led_history`.
  - `read_light()` returns the `light` value given to the board.
  - `delay(ms)` adds to `elapsed_ms` and moves to the next frame. Once the
    queue is empty, more than `idle_limit` idle delays raise
    `TimeoutError`, so a loop waiting for input cannot hang.

```python
from pocketconsole.hardware import Board, Button
from pocketconsole.utils import get_player_name

board = Board()
board.queue(Button.RIGHT, Button.DOWN, Button.RIGHT, Button.RIGHT, Button.UP)
print(get_player_name(board))   # "ABB"
```

Shared records and menus live in `pocketconsole.config`: `MenuOption`,
`TrivialQuestion`, `State` (light reading, LED state, threshold, selected
option and player name) and the menu tuples `MAIN_MENU_OPTIONS`,
`LED_MENU_OPTIONS`, `LIGHT_MENU_OPTIONS` and `GAME_MENU_OPTIONS`.

## Menus and helpers

`pocketconsole.utils`:

- `clear_screen(board)` and `load_scene(board, text)`, a loading bar that
  fills the width of the screen.
- `menu_window(selected, size)` returns the up to three `(index, is_pointer)`
  entries shown around the selected one; `print_menu(board, options, title,
  selected, current_input)` draws them with a `>` pointer.
- `get_player_name(board)` lets the player pick a three-letter name from
  `A`–`Z` and a space (UP/DOWN to move, RIGHT to take a letter) and
  returns it.

## Leaderboards

Each game keeps its three best scores in a file named `leaderboard.<game>`
(`tr` for Trivial, `sn` for Snake) inside a directory you choose. Each line
is `name,score`, and the file always has three lines, empty places being
`,0`:

```
ABC,12
XY ,7
,0
```

```python
from pathlib import Path
from pocketconsole.utils import update_leaderboard, read_leaderboard

scores = Path("scores")
scores.mkdir(exist_ok=True)
update_leaderboard(scores, "ABC", 12, "sn")
print(read_leaderboard(scores, "sn"))   # [('ABC', 12), ('', 0), ('', 0)]
```

`parse_leaderboard_line(line)` reads one line (`None` when it has no
comma), `read_leaderboard` returns `[]` for a missing file, and
`display_leaderboard(board, directory, game)` shows and returns the entries
with a score above zero.

## LED and light

- `pocketconsole.led`: `LedController(board)` with `turn_on`, `turn_off`,
  `blink` (returns `False` if already blinking) and `blink_step`, which runs
  the next phase (on for 3000 ms, off for 1500 ms) and returns its length.
  `led_menu(board, controller)` shows the LED menu until LEFT, advancing a
  running blink as time passes; `led_menu_controller(controller, selected)`
  carries out entry 0 (on), 1 (off) or 2 (blink).
- `pocketconsole.light`: `light_percent(raw)` turns a 12-bit reading
  (clamped to 0–4095) into a percentage, higher readings giving lower
  percentages; `bar_width(percent)` scales it to the 128-pixel screen;
  `show_light_intensity(board)` draws the readout and returns the
  percentage; `light_menu(board, state)` keeps it live, storing the raw
  reading in `state.ldr_value`, until LEFT is pressed.

## Games

- **Trivial** (`pocketconsole.trivial`): questions come from a text file,
  one per line, as `question_option1,option2,option3-correct,id` or
  `question_option1,option2,option3,correct,id`, where `correct` is the
  0-based option index and the id is optional.
  `parse_trivial_question(line, index)` reads a line (`None` without an
  underscore), `load_trivial_questions(path, rng)` reads up to ten
  non-empty lines and shuffles them, `TrivialGame` tracks answers and
  score, `display_trivial_question` draws one question, and
  `play_trivial(board, questions_path, directory, rng)` plays until every
  question is answered (at most ten), records the score and returns it.
- **Snake** (`pocketconsole.snake`): a 16×4 grid with wrap-around edges.
  `SnakeGame` has `reset`, `steer` (refuses to reverse), `step` (returns
  whether the game is over) and `render`; `play_snake(board, directory, rng)`
  asks for a name, plays, records the score and returns it.
  `update_snake_leaderboard` and `display_snake_leaderboard` wrap the
  `sn` leaderboard.
- **Pong** (`pocketconsole.pong`): first to five points. `Pong` holds the
  ball, paddles and scores (`reset`, `reset_ball`, `move_player`, `step`,
  `render`); `ai_move(ball_y, ball_x, paddle_y, difficulty)` returns the
  computer paddle's new position for difficulty 1 (easy), 2 or 3 (hard);
  `play_pong(board)` asks for the difficulty with
  `select_pong_difficulty(board)` and returns 1 if the player wins, 2 if
  the computer does.
- **Reaction!** (`pocketconsole.reaction`): two players on LEFT and RIGHT,
  five rounds. Wait for the LED, then press first; pressing early costs a
  point. `ReactionGame` keeps the scores (`early_press`, `record_press`,
  `overall_winner`, where a tie goes to the right player), and
  `play_reaction(board, led, rng)` runs the match and returns 0 (left) or
  1 (right).

`pocketconsole.games` ties them together: `game_menu(board, directory, rng)`
shows the game list until LEFT, and `game_menu_controller(board, selected,
directory, rng)` shows the loading scene and starts game 0–3, reading
Trivial questions from `questions.tr` in `directory`.

Pass a `random.Random` with a fixed seed as `rng` to get repeatable games.

## What it does not do

- There is no command to run and no top-level main menu loop:
  `MAIN_MENU_OPTIONS` is only a list of entries. Start the LED menu, light
  meter or games menu yourself with a `Board`.
- The light meter shows only the intensity; the "ACTUAL DAY STATE" entry
  and `State.threshold` are not used by any screen.
- The board is a simulation only; nothing drives a real screen, LED or
  buttons.