"""Markdown report of audio coverage across the syllable inventory."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from nikud_quiz.catalog import LETTER_NAMES, VOWELS, all_letters
from nikud_quiz.models import SyllableEntry
from nikud_quiz.validation import collect_consonant_counts, collect_vowel_counts


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def _coverage_rows(
    keys: Sequence[str],
    labels: Mapping[str, str],
    totals: Mapping[str, int],
    covered: Mapping[str, int],
) -> list[tuple[str, str, str, str]]:
    rows: list[tuple[str, str, str, str]] = []
    for key in keys:
        total = totals.get(key, 0)
        if not total:
            continue
        count = covered.get(key, 0)
        rows.append((labels[key], str(count), str(total), f"{100 * count / total:.0f}%"))
    return rows


def build_coverage_report_md(
    entries: Sequence[SyllableEntry],
    audio_index: Mapping[str, str],
) -> str:
    """Build the audio coverage markdown report.

    Args:
        entries: Syllable inventory to measure against.
        audio_index: Syllable -> file name manifest.

    Returns:
        Full markdown content with per-vowel and per-consonant coverage, the
        inventory entries without audio, and manifest keys outside the inventory.
    """

    available = [entry for entry in entries if entry.syllable in audio_index]
    missing = [entry for entry in entries if entry.syllable not in audio_index]
    known = {entry.syllable for entry in entries}
    unknown = sorted(syllable for syllable in audio_index if syllable not in known)

    vowel_rows = _coverage_rows(
        [vowel.id for vowel in VOWELS],
        {vowel.id: vowel.id for vowel in VOWELS},
        collect_vowel_counts(entries),
        collect_vowel_counts(available),
    )
    consonant_rows = _coverage_rows(
        list(all_letters()),
        {letter: f"{letter} ({LETTER_NAMES[letter]})" for letter in all_letters()},
        collect_consonant_counts(entries),
        collect_consonant_counts(available),
    )
    missing_rows = [(entry.syllable, entry.vowel_id, entry.filename) for entry in missing]
    unknown_rows = [(syllable, audio_index[syllable]) for syllable in unknown]

    sections = [
        "# Audio Coverage Report",
        "",
        f"Syllables with audio: {len(available)} / {len(entries)}",
        "",
        "## Coverage per vowel",
        _markdown_table(["vowel", "with_audio", "total", "coverage"], vowel_rows),
        "",
        "## Coverage per consonant",
        _markdown_table(["consonant", "with_audio", "total", "coverage"], consonant_rows),
        "",
        "## Missing audio",
        _markdown_table(["syllable", "vowel", "expected_file"], missing_rows),
        "",
        "## Manifest entries outside catalog",
        _markdown_table(["syllable", "file"], unknown_rows),
    ]

    return "\n".join(sections) + "\n"
