"""Hebrew nikud audio quiz: syllable generation and quiz round engine."""

from .models import (
    AnswerResult,
    ConsonantToggles,
    FilterSelection,
    FilterStatus,
    RoundState,
    ScoreState,
    VowelMark,
)

__all__ = [
    "VowelMark",
    "ConsonantToggles",
    "FilterSelection",
    "FilterStatus",
    "RoundState",
    "ScoreState",
    "AnswerResult",
]
