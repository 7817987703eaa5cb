"""Unit tests for the vowel and letter catalogs."""

from __future__ import annotations

import pytest

from nikud_quiz.catalog import (
    BASE_LETTERS,
    FINAL_LETTERS,
    LETTER_NAMES,
    VOWELS,
    all_letters,
    dagesh_letters,
    rafe_letters,
    resolve_vowels,
)


def test_catalogs_are_disjoint_and_named() -> None:
    """Base, dagesh and final letters should not overlap and all have file names."""

    groups = [set(BASE_LETTERS), set(rafe_letters()) | set(dagesh_letters()), set(FINAL_LETTERS)]
    assert sum(len(group) for group in groups) == len(set().union(*groups))
    assert set(all_letters()) == set(LETTER_NAMES)


def test_only_holam_maleh_and_shuruk_are_vav_embedded() -> None:
    embedded = {vowel.id: vowel.symbol for vowel in VOWELS if vowel.vav_embedded}

    assert len(VOWELS) == 9
    assert embedded == {"holam_maleh": "וֹ", "shuruk": "וּ"}


def test_resolve_vowels_accepts_ids_and_symbols_in_catalog_order() -> None:
    """Ids and symbols may be mixed; output follows the catalog and drops repeats."""

    vowels = resolve_vowels(["shuruk", "ָ", "kamatz"])

    assert [vowel.id for vowel in vowels] == ["kamatz", "shuruk"]


def test_resolve_vowels_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown vowel keys: 'sheva'"):
        resolve_vowels(["kamatz", "sheva"])
