import pytest

from pocketconsole.hardware import Board, Button, Display


def test_println_and_print_build_text():
    display = Display()
    display.println("Hello")
    display.print("World")
    assert display.text() == "Hello\nWorld"


def test_clear_erases_text_and_rects():
    display = Display()
    display.println("x")
    display.fill_rect(0, 22, 10, 8)
    display.clear()
    assert display.text() == ""
    assert display.rects == []


def test_set_cursor_starts_new_run():
    display = Display()
    display.print("a")
    display.set_cursor(32, 0)
    display.print("b")
    assert display.runs == [(0, 0, "a"), (32, 0, "b")]


def test_write_accepts_code_and_char():
    display = Display()
    display.write(65)
    display.write("B")
    assert display.text() == "AB"
    with pytest.raises(ValueError):
        display.write("too long")


def test_show_records_snapshot():
    display = Display()
    display.println("Luz")
    display.fill_rect(0, 22, 5, 8)
    display.draw_rect(0, 22, 128, 8)
    frame = display.show()
    assert display.frames[-1] == frame
    assert frame[0] == "Luz\n"
    assert frame[1] == ((0, 22, 5, 8, True), (0, 22, 128, 8, False))


def test_queue_frames_advance_on_delay():
    board = Board()
    board.queue(Button.UP, None, {Button.LEFT, Button.RIGHT})
    assert board.is_pressed(Button.UP)
    board.delay(200)
    assert not board.is_pressed(Button.UP)
    board.delay(200)
    assert board.is_pressed(Button.LEFT) and board.is_pressed(Button.RIGHT)
    board.delay(200)
    assert not board.is_pressed(Button.LEFT)
    assert board.elapsed_ms == 600


def test_queue_rejects_non_buttons():
    board = Board()
    with pytest.raises(TypeError):
        board.queue("UP")
    with pytest.raises(TypeError):
        board.queue([1, 2])


def test_press_and_release():
    board = Board()
    board.press(Button.DOWN)
    board.delay(10)
    assert board.is_pressed(Button.DOWN)
    board.release(Button.DOWN)
    assert not board.is_pressed(Button.DOWN)


def test_idle_limit_raises_timeout():
    board = Board(idle_limit=3)
    for _ in range(3):
        board.delay(1)
    with pytest.raises(TimeoutError):
        board.delay(1)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Board().delay(-1)


def test_led_and_light():
    board = Board(light=1234)
    board.set_led(True)
    board.set_led(False)
    assert board.led_history == [True, False]
    assert board.led_on is False
    assert board.read_light() == 1234