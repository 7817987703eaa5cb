"""Session controller owning filters, allowed syllables, score and round state.

A :class:`QuizSession` is driven by explicit method calls from a UI collaborator
and notifies subscribed listeners after every transition::

    IDLE --start()--> ROUND_ACTIVE --answer()--> RESOLVED --next_round()--> ROUND_ACTIVE
      ^                    |                         |
      +---- exit_to_config() / update_filters() -----+

Options are interactive as soon as a round is rendered; interaction is not gated
on audio playback completion.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import random
from typing import Callable, Mapping

from nikud_quiz.catalog import resolve_vowels
from nikud_quiz.models import (
    AnswerResult,
    FilterSelection,
    FilterStatus,
    RoundState,
)
from nikud_quiz.quiz.engine import DEFAULT_OPTION_COUNT, reset_session, start_round, submit_answer
from nikud_quiz.syllables.generator import classify_selection, generate_allowed_syllables


class QuizPhase(Enum):
    IDLE = "idle"
    ROUND_ACTIVE = "round_active"
    RESOLVED = "resolved"


FILTER_STATUS_MESSAGES: dict[FilterStatus, str] = {
    FilterStatus.NO_VOWELS: "Select at least one vowel",
    FilterStatus.NO_AUDIO: "No syllables with available audio match the selected filters",
}


class QuizStartError(ValueError):
    """Raised when the current filters do not allow a quiz to start."""

    def __init__(self, status: FilterStatus) -> None:
        self.status = status
        super().__init__(FILTER_STATUS_MESSAGES.get(status, status.value))


@dataclass(frozen=True)
class SessionEvent:
    """Notification delivered to listeners after a session transition."""

    kind: str
    phase: QuizPhase
    status: FilterStatus
    round_state: RoundState | None = None
    result: AnswerResult | None = None


Listener = Callable[[SessionEvent], None]


class QuizSession:
    """Single-owner quiz state machine over an immutable audio index."""

    def __init__(
        self,
        audio_index: Mapping[str, str],
        option_count: int = DEFAULT_OPTION_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        self._audio_index = audio_index
        self._option_count = option_count
        self._rng = rng or random.Random()
        self._listeners: list[Listener] = []

        self.selection = FilterSelection()
        self.allowed: frozenset[str] = frozenset()
        self.status = FilterStatus.NO_VOWELS
        self.score = reset_session()
        self.phase = QuizPhase.IDLE
        self.round_state: RoundState | None = None
        self.last_result: AnswerResult | None = None

    @property
    def option_count(self) -> int:
        return self._option_count

    @property
    def can_start(self) -> bool:
        return self.status is FilterStatus.OK

    @property
    def options_interactive(self) -> bool:
        return self.phase is QuizPhase.ROUND_ACTIVE

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_filters(self, selection: FilterSelection) -> FilterStatus:
        """Recompute the allowed set for a new filter selection.

        Any in-flight round is discarded without scoring and the session goes
        back to ``IDLE``.

        Raises:
            ValueError: If the selection names an unknown vowel.
        """

        vowels = resolve_vowels(selection.vowels)
        self.selection = selection
        self.allowed = generate_allowed_syllables(vowels, selection.consonants, self._audio_index)
        self.status = classify_selection(vowels, self.allowed)
        self._discard_round()
        self._notify("filters")
        return self.status

    def start(self) -> RoundState:
        """Begin a session: reset the score and play the first round.

        Raises:
            RuntimeError: If a round is active or awaiting the next round.
            QuizStartError: If the filters select nothing playable.
            InsufficientOptionsError: If too few syllables fill a round; the
                session stays ``IDLE``.
        """

        if self.phase is not QuizPhase.IDLE:
            raise RuntimeError(f"Session already started (phase: {self.phase.value})")
        if not self.can_start:
            raise QuizStartError(self.status)
        round_state = start_round(self.allowed, self._option_count, self._rng)
        self.score = reset_session()
        return self._activate(round_state)

    def answer(self, chosen: str) -> AnswerResult:
        """Judge the learner's choice for the active round.

        Raises:
            RuntimeError: If no round is awaiting an answer.
            ValueError: If ``chosen`` is not one of the round's options.
        """

        if self.phase is not QuizPhase.ROUND_ACTIVE or self.round_state is None:
            raise RuntimeError(f"No round awaiting an answer (phase: {self.phase.value})")
        if chosen not in self.round_state.options:
            raise ValueError(f"'{chosen}' is not an option of the current round")

        result = submit_answer(chosen, self.round_state, self.score)
        self.score = result.score
        self.last_result = result
        self.phase = QuizPhase.RESOLVED
        self._notify("answer", result=result)
        return result

    def next_round(self) -> RoundState:
        """Start the following round once the current one is resolved.

        Raises:
            RuntimeError: If the current round has not been resolved.
        """

        if self.phase is not QuizPhase.RESOLVED:
            raise RuntimeError(
                f"Cannot advance before the round is resolved (phase: {self.phase.value})"
            )
        return self._activate(start_round(self.allowed, self._option_count, self._rng))

    def exit_to_config(self) -> None:
        self._discard_round()
        self._notify("exit")

    def audio_resource(self, syllable: str) -> str:
        """Return the audio resource for ``syllable``.

        Raises:
            KeyError: If the syllable has no audio entry.
        """

        return self._audio_index[syllable]

    def _activate(self, round_state: RoundState) -> RoundState:
        self.round_state = round_state
        self.last_result = None
        self.phase = QuizPhase.ROUND_ACTIVE
        self._notify("round")
        return round_state

    def _discard_round(self) -> None:
        self.round_state = None
        self.last_result = None
        self.phase = QuizPhase.IDLE

    def _notify(self, kind: str, result: AnswerResult | None = None) -> None:
        event = SessionEvent(
            kind=kind,
            phase=self.phase,
            status=self.status,
            round_state=self.round_state,
            result=result,
        )
        for listener in list(self._listeners):
            listener(event)
