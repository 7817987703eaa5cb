"""Full syllable inventory with canonical audio file names."""

from __future__ import annotations

from typing import Iterator

from nikud_quiz.catalog import LETTER_NAMES, VOWELS, all_letters
from nikud_quiz.models import SyllableEntry
from nikud_quiz.syllables.generator import iter_syllable_pairs

AUDIO_EXTENSION = ".wav"


def audio_filename(consonant: str, vowel_id: str, extension: str = AUDIO_EXTENSION) -> str:
    """Build the canonical file name such as ``aleph_kamatz.wav``.

    Raises:
        KeyError: If ``consonant`` is not a catalog letter.
    """

    return f"{LETTER_NAMES[consonant]}_{vowel_id}{extension}"


def iter_catalog_entries() -> Iterator[SyllableEntry]:
    """Yield every syllable the generator can build from the full catalog.

    Entries follow catalog order (letters, then vowels) and are unique by
    syllable.

    Yields:
        One :class:`SyllableEntry` per distinct syllable.
    """

    seen: set[str] = set()
    for syllable, consonant, vowel in iter_syllable_pairs(all_letters(), VOWELS):
        if syllable in seen:
            continue
        seen.add(syllable)
        yield SyllableEntry(
            syllable=syllable,
            consonant=consonant,
            vowel_id=vowel.id,
            filename=audio_filename(consonant, vowel.id),
        )
