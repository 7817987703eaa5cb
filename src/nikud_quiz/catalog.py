"""Fixed vowel and letter catalogs."""

from __future__ import annotations

from typing import Iterable

from nikud_quiz.models import VowelMark

VAV = "ו"

VOWELS: tuple[VowelMark, ...] = (
    VowelMark("\u05b8", "kamatz", "קמץ (a)"),
    VowelMark("\u05b7", "patach", "פתח (a)"),
    VowelMark("\u05b6", "segol", "סגול (e)"),
    VowelMark("\u05b5", "tzere", "צירה (e)"),
    VowelMark("\u05b4", "chirik", "חיריק (i)"),
    VowelMark("\u05b9", "holam_chaser", "חולם חסר (o)"),
    VowelMark(VAV + "\u05b9", "holam_maleh", "חולם מלא (o)", vav_embedded=True),
    VowelMark("\u05bb", "kubutz", "קובוץ (u)"),
    VowelMark(VAV + "\u05bc", "shuruk", "שורוק (u)", vav_embedded=True),
)

BASE_LETTERS: tuple[str, ...] = (
    "א", "ג", "ד", "ה", "ו", "ז", "ח", "ט", "י", "ל",
    "מ", "נ", "ס", "ע", "צ", "ק", "ר", "ש", "ת",
)  # fmt: skip

# (rafe, dagesh) forms of the letters whose sound changes with a dagesh.
DAGESH_PAIRS: tuple[tuple[str, str], ...] = (
    ("ב", "ב\u05bc"),
    ("כ", "כ\u05bc"),
    ("פ", "פ\u05bc"),
)

FINAL_LETTERS: tuple[str, ...] = ("ך", "ם", "ן", "ף", "ץ")

LETTER_NAMES: dict[str, str] = {
    "א": "aleph",
    "ב": "bet_raphe",
    "ב\u05bc": "bet_dagesh",
    "ג": "gimel",
    "ד": "dalet",
    "ה": "he",
    "ו": "vav",
    "ז": "zain",
    "ח": "chet",
    "ט": "tet",
    "י": "yud",
    "כ": "kaf_raphe",
    "כ\u05bc": "kaf_dagesh",
    "ל": "lamed",
    "מ": "mem",
    "נ": "nun",
    "ס": "samech",
    "ע": "ayin",
    "פ": "pe_raphe",
    "פ\u05bc": "pe_dagesh",
    "צ": "tzadi",
    "ק": "kuf",
    "ר": "resh",
    "ש": "shin",
    "ת": "tav",
    "ך": "kaf_sofit",
    "ם": "mem_sofit",
    "ן": "nun_sofit",
    "ף": "pe_sofit",
    "ץ": "tzadi_sofit",
}

_VOWELS_BY_KEY: dict[str, VowelMark] = {
    **{vowel.id: vowel for vowel in VOWELS},
    **{vowel.symbol: vowel for vowel in VOWELS},
}


def rafe_letters() -> tuple[str, ...]:
    """Return the non-dagesh form of every dagesh pair."""

    return tuple(rafe for rafe, _ in DAGESH_PAIRS)


def dagesh_letters() -> tuple[str, ...]:
    """Return the dagesh form of every dagesh pair."""

    return tuple(dagesh for _, dagesh in DAGESH_PAIRS)


def all_letters() -> tuple[str, ...]:
    """Return every catalog letter in catalog order: base, dagesh pairs, finals."""

    pairs = tuple(letter for pair in DAGESH_PAIRS for letter in pair)
    return BASE_LETTERS + pairs + FINAL_LETTERS


def resolve_vowels(keys: Iterable[str]) -> tuple[VowelMark, ...]:
    """Map vowel ids or symbols to catalog vowels.

    Args:
        keys: Vowel ids (``"kamatz"``) or vowel symbols, in any mix.

    Returns:
        Matching vowels in catalog order, without duplicates.

    Raises:
        ValueError: If any key is not a known vowel id or symbol.
    """

    requested: set[str] = set()
    unknown: list[str] = []
    for key in keys:
        vowel = _VOWELS_BY_KEY.get(key.strip())
        if vowel is None:
            unknown.append(key)
            continue
        requested.add(vowel.id)

    if unknown:
        raise ValueError(f"Unknown vowel keys: {', '.join(repr(key) for key in unknown)}")

    return tuple(vowel for vowel in VOWELS if vowel.id in requested)
