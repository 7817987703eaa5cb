"""Quiz round sampling, answer judgement and scoring."""

from __future__ import annotations

import random
from typing import Collection

from nikud_quiz.models import AnswerResult, RoundState, ScoreState

DEFAULT_OPTION_COUNT = 4
# Pause between a judged answer and the next round, honored by callers.
ADVANCE_DELAY_SECONDS = 2.5


class InsufficientOptionsError(ValueError):
    """Raised when the allowed set cannot fill a round's option slots."""

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Need at least {required} syllables for a round, only {available} available "
            f"({self.shortfall} short)"
        )

    @property
    def shortfall(self) -> int:
        return self.required - self.available


def start_round(
    allowed: Collection[str],
    option_count: int = DEFAULT_OPTION_COUNT,
    rng: random.Random | None = None,
) -> RoundState:
    """Sample a multiple-choice round from the allowed syllables.

    Options are drawn without replacement, the correct syllable is drawn from
    the options, and the options are shuffled independently of that draw.

    Args:
        allowed: Allowed syllables for the current filters.
        option_count: Number of options to show.
        rng: Random source; a fresh unseeded one when omitted.

    Returns:
        New round state.

    Raises:
        ValueError: If ``allowed`` is empty or ``option_count`` is not positive.
        InsufficientOptionsError: If fewer than ``option_count`` syllables exist.
    """

    if option_count < 1:
        raise ValueError(f"option_count must be positive, got {option_count}")
    if not allowed:
        raise ValueError("Cannot start a round without allowed syllables")

    pool = sorted(set(allowed))
    if len(pool) < option_count:
        raise InsufficientOptionsError(available=len(pool), required=option_count)

    rng = rng or random.Random()
    options = rng.sample(pool, option_count)
    correct_syllable = rng.choice(options)
    rng.shuffle(options)
    return RoundState(options=tuple(options), correct_syllable=correct_syllable)


def submit_answer(chosen: str, round_state: RoundState, score: ScoreState) -> AnswerResult:
    """Judge one answer and return it with the updated score."""

    correct = chosen == round_state.correct_syllable
    return AnswerResult(
        chosen=chosen,
        correct_syllable=round_state.correct_syllable,
        correct=correct,
        score=score.record(correct),
    )


def reset_session() -> ScoreState:
    return ScoreState(correct_count=0, total_count=0)
