"""Unit tests for round sampling and scoring."""

from __future__ import annotations

import random

import pytest

from nikud_quiz.models import RoundState, ScoreState
from nikud_quiz.quiz.engine import (
    InsufficientOptionsError,
    reset_session,
    start_round,
    submit_answer,
)

FOUR = ["אָ", "אַ", "בָ", "בַ"]


def test_start_round_with_exactly_four_uses_all_syllables() -> None:
    round_state = start_round(set(FOUR), option_count=4, rng=random.Random(7))

    assert set(round_state.options) == set(FOUR)
    assert len(round_state.options) == 4
    assert round_state.options.count(round_state.correct_syllable) == 1


def test_start_round_samples_unique_options_from_larger_pool() -> None:
    pool = {f"{letter}ִ" for letter in "אגדהזחטילמנ"}

    for seed in range(20):
        round_state = start_round(pool, rng=random.Random(seed))
        assert len(set(round_state.options)) == 4
        assert set(round_state.options) <= pool
        assert round_state.correct_syllable in round_state.options


def test_start_round_is_independent_of_input_order() -> None:
    """Same seed and same set give the same round, whatever the input order."""

    forward = start_round(FOUR, rng=random.Random(3))
    backward = start_round(list(reversed(FOUR)), rng=random.Random(3))

    assert forward == backward


def test_start_round_eventually_picks_every_position() -> None:
    positions = {
        start_round(FOUR, rng=random.Random(seed)).options.index(FOUR[0]) for seed in range(50)
    }

    assert positions == {0, 1, 2, 3}


def test_start_round_rejects_too_few_syllables() -> None:
    with pytest.raises(InsufficientOptionsError) as excinfo:
        start_round(set(FOUR[:3]), option_count=4)

    assert excinfo.value.available == 3
    assert excinfo.value.required == 4
    assert excinfo.value.shortfall == 1


def test_start_round_singleton_set_is_insufficient() -> None:
    with pytest.raises(InsufficientOptionsError, match="3 short"):
        start_round({"אָ"})


def test_start_round_rejects_empty_set_and_bad_option_count() -> None:
    with pytest.raises(ValueError, match="without allowed syllables"):
        start_round(set())
    with pytest.raises(ValueError, match="option_count"):
        start_round(set(FOUR), option_count=0)


def test_submit_answer_scores_correct_and_wrong_choices() -> None:
    round_state = RoundState(options=tuple(FOUR), correct_syllable="בָ")

    right = submit_answer("בָ", round_state, ScoreState(2, 5))
    wrong = submit_answer("אַ", round_state, right.score)

    assert right.correct is True
    assert right.score == ScoreState(correct_count=3, total_count=6)
    assert wrong.correct is False
    assert wrong.chosen == "אַ"
    assert wrong.correct_syllable == "בָ"
    assert wrong.score == ScoreState(correct_count=3, total_count=7)


def test_reset_session_returns_zero_score() -> None:
    assert reset_session() == ScoreState(0, 0)
