"""Data models shared by the syllable generator and the quiz engine.

The models are immutable value objects so that each recomputation (a new
allowed-syllable set, a new round, a new score) produces a fresh instance and
no component can partially mutate state owned by another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


@dataclass(frozen=True)
class VowelMark:
    """A vowel diacritic from the fixed catalog.

    ``symbol`` is one or two code points. The two vav-embedded vowels
    (``holam_maleh`` and ``shuruk``) carry the vav letter inside the symbol and
    are complete syllables on their own.
    """

    symbol: str
    id: str
    display_label: str
    vav_embedded: bool = False


@dataclass(frozen=True)
class ConsonantToggles:
    """Three-switch consonant policy resolved against the fixed letter catalogs."""

    include_base: bool = True
    include_dagesh: bool = True
    include_final: bool = True


ConsonantPolicy = ConsonantToggles | Iterable[str]


@dataclass(frozen=True)
class FilterSelection:
    """User-selected vowel keys plus a consonant policy.

    Vowel keys may be vowel ids (``"kamatz"``) or vowel symbols.
    """

    vowels: tuple[str, ...] = ()
    consonants: ConsonantToggles | tuple[str, ...] = field(default_factory=ConsonantToggles)


class FilterStatus(Enum):
    """Outcome of evaluating a filter selection against the audio index."""

    OK = "ok"
    NO_VOWELS = "no_vowels"
    NO_AUDIO = "no_audio"


@dataclass(frozen=True)
class SyllableEntry:
    """One constructible syllable with its canonical audio file name."""

    syllable: str
    consonant: str
    vowel_id: str
    filename: str


@dataclass(frozen=True)
class RoundState:
    """Options shown for one quiz round and the syllable that was played."""

    options: tuple[str, ...]
    correct_syllable: str


@dataclass(frozen=True)
class ScoreState:
    """Running session score; both counters only grow within a session."""

    correct_count: int = 0
    total_count: int = 0

    def record(self, correct: bool) -> ScoreState:
        """Return the score after one more judged answer."""

        return ScoreState(
            correct_count=self.correct_count + (1 if correct else 0),
            total_count=self.total_count + 1,
        )


@dataclass(frozen=True)
class AnswerResult:
    """Judgement of one answer, with what the UI needs to lock and highlight options."""

    chosen: str
    correct_syllable: str
    correct: bool
    score: ScoreState
