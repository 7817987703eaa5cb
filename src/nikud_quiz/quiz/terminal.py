"""Line-oriented quiz loop driving a :class:`QuizSession` from a terminal."""

from __future__ import annotations

from pathlib import Path
import time
from typing import Callable

from nikud_quiz.models import ScoreState
from nikud_quiz.quiz.engine import ADVANCE_DELAY_SECONDS
from nikud_quiz.quiz.session import QuizSession

QUIT_INPUTS = {"q", "quit", "exit"}


def run_terminal_quiz(
    session: QuizSession,
    audio_dir: Path,
    rounds: int | None = None,
    delay: float = ADVANCE_DELAY_SECONDS,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    sleep_fn: Callable[[float], None] = time.sleep,
) -> ScoreState:
    """Play rounds until the learner quits or ``rounds`` are answered.

    Audio is not played here; the resolved file path is shown so an external
    player can be used.

    Args:
        session: Session with filters already applied.
        audio_dir: Directory the manifest file names are relative to.
        rounds: Number of rounds to play, or ``None`` for no limit; nothing is
            played when it is below 1.
        delay: Seconds to wait between a judged answer and the next round.
        input_fn: Prompt reader.
        output_fn: Line writer.
        sleep_fn: Delay function.

    Returns:
        Final session score.
    """

    if rounds is not None and rounds < 1:
        return session.score

    round_state = session.start()
    played = 0
    while True:
        output_fn("")
        output_fn(f"Listen: {audio_dir / session.audio_resource(round_state.correct_syllable)}")
        for number, option in enumerate(round_state.options, start=1):
            output_fn(f"  {number}. {option}")

        choice = _read_choice(len(round_state.options), input_fn, output_fn)
        if choice is None:
            session.exit_to_config()
            break

        result = session.answer(round_state.options[choice])
        if result.correct:
            output_fn("Correct!")
        else:
            output_fn(f"Wrong. You chose {result.chosen}, the answer was {result.correct_syllable}")
        output_fn(f"Score: {result.score.correct_count}/{result.score.total_count}")

        played += 1
        if rounds is not None and played >= rounds:
            break
        sleep_fn(delay)
        round_state = session.next_round()

    return session.score


def _read_choice(
    option_count: int,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
) -> int | None:
    """Prompt until a valid 1-based option number is given; ``None`` means quit."""

    while True:
        try:
            raw = input_fn(f"Your answer (1-{option_count}, q to quit): ").strip().lower()
        except EOFError:
            return None
        if raw in QUIT_INPUTS:
            return None
        if raw.isdigit() and 1 <= int(raw) <= option_count:
            return int(raw) - 1
        output_fn(f"Please enter a number between 1 and {option_count}.")
