"""Allowed-syllable generation from vowel and consonant filters.

The generator is a pure function of ``(selected_vowels, consonant_policy,
audio_index)``: it enumerates every orthographically valid consonant+vowel
pairing, adds the self-contained vav vowels, and keeps only syllables that have
an audio recording in the index.
"""

from __future__ import annotations

from typing import Collection, Iterable, Iterator, Mapping

from nikud_quiz.catalog import BASE_LETTERS, DAGESH_PAIRS, FINAL_LETTERS, VAV
from nikud_quiz.models import ConsonantPolicy, ConsonantToggles, FilterStatus, VowelMark


def resolve_consonants(policy: ConsonantPolicy) -> frozenset[str]:
    """Resolve a consonant policy into a deduplicated set of letter glyphs.

    Args:
        policy: Either explicit letter glyphs or :class:`ConsonantToggles`.

    Returns:
        Set of consonant glyphs. With ``include_dagesh`` disabled only the rafe
        form of each dagesh pair is included, so those letter sounds stay
        selectable.
    """

    if not isinstance(policy, ConsonantToggles):
        return frozenset(glyph for glyph in policy if glyph)

    consonants: set[str] = set()
    if policy.include_base:
        consonants.update(BASE_LETTERS)
    if policy.include_dagesh:
        consonants.update(letter for pair in DAGESH_PAIRS for letter in pair)
    else:
        consonants.update(rafe for rafe, _ in DAGESH_PAIRS)
        consonants.difference_update(dagesh for _, dagesh in DAGESH_PAIRS)
    if policy.include_final:
        consonants.update(FINAL_LETTERS)
    return frozenset(consonants)


def iter_syllable_pairs(
    consonants: Iterable[str],
    vowels: Collection[VowelMark],
) -> Iterator[tuple[str, str, VowelMark]]:
    """Yield ``(syllable, consonant, vowel)`` for every valid pairing.

    Vav only combines with the vav-embedded vowels, whose symbol is the whole
    syllable; those vowels never attach to any other consonant. After the cross
    product each selected vav-embedded vowel is yielded once more on its own so
    it is reachable even when vav is filtered out. Callers deduplicate.

    Args:
        consonants: Consonant glyphs to pair.
        vowels: Selected vowels.

    Yields:
        Syllable string with the consonant and vowel it was built from.
    """

    for consonant in consonants:
        for vowel in vowels:
            if consonant == VAV:
                if vowel.vav_embedded:
                    yield vowel.symbol, VAV, vowel
                continue
            if vowel.vav_embedded:
                continue
            yield consonant + vowel.symbol, consonant, vowel

    for vowel in vowels:
        if vowel.vav_embedded:
            yield vowel.symbol, VAV, vowel


def generate_allowed_syllables(
    selected_vowels: Iterable[VowelMark],
    consonant_policy: ConsonantPolicy,
    audio_index: Mapping[str, object],
) -> frozenset[str]:
    """Compute the allowed-syllable set for one filter selection.

    Syllables without an audio entry are dropped silently; a missing recording
    is never an error.

    Args:
        selected_vowels: Vowels chosen by the learner.
        consonant_policy: Explicit glyphs or :class:`ConsonantToggles`.
        audio_index: Syllable to audio resource mapping.

    Returns:
        Allowed syllables, always a subset of ``audio_index`` keys. Empty when
        no vowel is selected.
    """

    vowels = tuple(dict.fromkeys(selected_vowels))
    if not vowels:
        return frozenset()

    consonants = resolve_consonants(consonant_policy)
    generated = {syllable for syllable, _, _ in iter_syllable_pairs(consonants, vowels)}
    return frozenset(syllable for syllable in generated if syllable and syllable in audio_index)


def classify_selection(
    selected_vowels: Collection[VowelMark],
    allowed: Collection[str],
) -> FilterStatus:
    """Classify a selection so callers can report the right filter error.

    Args:
        selected_vowels: Vowels chosen by the learner.
        allowed: Result of :func:`generate_allowed_syllables` for the selection.

    Returns:
        ``NO_VOWELS`` when nothing is selected, ``NO_AUDIO`` when no generated
        syllable has a recording, otherwise ``OK``.
    """

    if not selected_vowels:
        return FilterStatus.NO_VOWELS
    if not allowed:
        return FilterStatus.NO_AUDIO
    return FilterStatus.OK
