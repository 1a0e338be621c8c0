"""Trivia quiz: questions loaded from a file, answered with the buttons."""

from __future__ import annotations

import logging
import random
import re
from pathlib import Path

from pocketconsole.config import TRIVIAL_MAX_QUESTIONS, TrivialQuestion
from pocketconsole.hardware import Board, Button
from pocketconsole.utils import (
    POLL_MS,
    PRESS_DELAY_MS,
    clear_screen,
    display_leaderboard,
    get_player_name,
    menu_window,
    update_leaderboard,
)

logger = logging.getLogger(__name__)

ANSWER_OPTIONS = 3
MESSAGE_MS = 2000
RESULT_PAUSE_MS = 5000
LEADERBOARD_GAME = "tr"
MAX_TOKENS = 5

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _tokens(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split(",")
    if text.endswith(","):
        parts.pop()
    return parts[:MAX_TOKENS]


def parse_trivial_question(line: str, index: int) -> TrivialQuestion | None:
    """Parse ``question_a,b,c-answer[,id]`` or ``question_a,b,c,answer[,id]``.

    Returns None when the line has no underscore. A missing id defaults to
    ``index``.
    """
    question, underscore, rest = line.strip().partition("_")
    if not underscore:
        return None
    tokens = _tokens(rest)
    count = len(tokens)
    tokens += [""] * (MAX_TOKENS - count)
    head, hyphen, answer = tokens[2].rpartition("-")
    if hyphen:
        third = head
        correct = _to_int(answer)
        question_id = _to_int(tokens[3]) if count > 3 else index
    else:
        third = tokens[2]
        correct = _to_int(tokens[3]) if count > 3 else 0
        question_id = _to_int(tokens[4]) if count > 4 else index
    return TrivialQuestion(question, (tokens[0], tokens[1], third), correct, question_id)


def load_trivial_questions(path, rng=None) -> list[TrivialQuestion]:
    """Read up to ten non-empty lines, shuffle them and parse each one."""
    rng = rng if rng is not None else random.Random()
    path = Path(path)
    if not path.is_file():
        logger.debug("failed to open questions file %s", path)
        return []
    lines = [line for line in path.read_text(encoding="utf-8").split("\n") if line]
    lines = lines[:TRIVIAL_MAX_QUESTIONS]
    for i in range(len(lines) - 1, 0, -1):
        j = rng.randrange(0, i + 1)
        lines[i], lines[j] = lines[j], lines[i]
    questions = []
    for index, line in enumerate(lines):
        parsed = parse_trivial_question(line, index)
        questions.append(parsed if parsed is not None else TrivialQuestion())
    return questions


class TrivialGame:
    """Progress through a set of questions: score and what was answered."""

    def __init__(self, questions, rng=None):
        self.questions = list(questions)
        self.rng = rng if rng is not None else random.Random()
        self.answered: set[int] = set()
        self.score = 0
        self.question_count = 0
        self.game_over = False

    def random_question(self) -> int:
        """Index of a random question not yet answered."""
        if self.questions and len(self.answered) >= len(self.questions):
            raise LookupError("every question has been answered")
        max_range = len(self.questions) if self.questions else TRIVIAL_MAX_QUESTIONS
        while True:
            choice = self.rng.randrange(0, max_range)
            if choice not in self.answered:
                return choice

    def answer(self, question_index: int, option: int) -> bool:
        """Record an answer and return whether it was correct."""
        correct = option == self.questions[question_index].correct_answer
        if correct:
            self.score += 1
        self.answered.add(question_index)
        self.question_count += 1
        if self.question_count >= TRIVIAL_MAX_QUESTIONS or len(self.answered) >= len(self.questions):
            self.game_over = True
        return correct


def display_trivial_question(board: Board, question: TrivialQuestion, size: int, selected: int) -> bool:
    """Draw a question with a window of its options; False if there is nothing to show."""
    display = board.display
    if size <= 0:
        display.println("Error: No questions loaded")
        display.show()
        logger.debug("no questions available to display")
        return False
    display.println(question.question)
    for index, is_pointer in menu_window(selected, min(size, len(question.options))):
        prefix = " >  " if is_pointer else "    "
        display.println(prefix + question.options[index])
    display.show()
    return True


def _message(board: Board, text: str) -> None:
    clear_screen(board)
    board.display.println(text)
    board.display.show()


def play_trivial(board: Board, questions_path, directory, rng=None) -> int:
    """Play a quiz round, record the score and return it."""
    rng = rng if rng is not None else random.Random()
    questions = load_trivial_questions(questions_path, rng)
    clear_screen(board)
    if not questions:
        _message(board, "No questions found")
        return 0

    name = get_player_name(board)
    game = TrivialGame(questions, rng)
    option = 0
    last = ANSWER_OPTIONS - 1

    while not game.game_over:
        index = game.random_question()
        answered = False
        while not answered:
            clear_screen(board)
            display_trivial_question(board, questions[index], ANSWER_OPTIONS, option)
            if board.is_pressed(Button.UP):
                option = max(option - 1, 0)
                board.delay(PRESS_DELAY_MS)
            elif board.is_pressed(Button.DOWN):
                option = min(option + 1, last)
                board.delay(PRESS_DELAY_MS)
            elif board.is_pressed(Button.RIGHT):
                board.delay(PRESS_DELAY_MS)
                correct = game.answer(index, option)
                _message(board, "Correct!" if correct else "Incorrect!")
                board.delay(MESSAGE_MS)
                clear_screen(board)
                answered = True
            else:
                board.delay(POLL_MS)

    clear_screen(board)
    board.display.println("Game Over!")
    board.display.println(f"Score: {game.score}")
    board.display.println("\nPress any button to \ncontinue")
    board.display.show()
    while not any(board.is_pressed(b) for b in (Button.UP, Button.DOWN, Button.RIGHT)):
        board.delay(PRESS_DELAY_MS)

    update_leaderboard(directory, name, game.score, LEADERBOARD_GAME)
    display_leaderboard(board, directory, LEADERBOARD_GAME)
    board.delay(RESULT_PAUSE_MS)
    return game.score