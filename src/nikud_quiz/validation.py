"""Validation helpers for audio manifests, audio assets and inventory counts."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from nikud_quiz.audio.manifest import AUDIO_EXTENSIONS
from nikud_quiz.models import SyllableEntry


def _raise_if_errors(label: str, errors: Sequence[str]) -> None:
    """Raise one ``ValueError`` previewing the first 25 collected errors."""

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:25])
    rest = len(errors) - min(25, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_audio_index(index: Mapping[str, str]) -> None:
    """Validate manifest keys and file names.

    Args:
        index: Syllable -> file name mapping.

    Raises:
        ValueError: If any key is blank or any file name is blank or not a
            supported audio file.
    """

    errors: list[str] = []
    for idx, (syllable, filename) in enumerate(index.items(), start=1):
        if not syllable.strip():
            errors.append(f"Entry {idx}: empty syllable")
        if not filename.strip():
            errors.append(f"Entry {idx}: empty file name for '{syllable}'")
        elif not filename.lower().endswith(AUDIO_EXTENSIONS):
            errors.append(f"Entry {idx}: unsupported audio file '{filename}' for '{syllable}'")

    _raise_if_errors("Audio manifest", errors)


def validate_audio_assets(index: Mapping[str, str], audio_dir: Path) -> None:
    """Check that the audio directory holds every file the manifest references.

    Args:
        index: Syllable -> file name mapping.
        audio_dir: Directory the file names are relative to.

    Raises:
        ValueError: If the directory is missing or empty, or referenced files
            are absent.
    """

    if not audio_dir.is_dir():
        raise ValueError(f"Audio directory not found: {audio_dir}")

    present = {
        path.name
        for path in audio_dir.iterdir()
        if path.is_file() and path.suffix.lower() in AUDIO_EXTENSIONS
    }
    if not present:
        raise ValueError(f"No audio files found in {audio_dir}")

    errors = [
        f"Missing audio file '{filename}' for '{syllable}'"
        for syllable, filename in index.items()
        if filename not in present
    ]
    _raise_if_errors("Audio assets", errors)


def collect_vowel_counts(entries: Iterable[SyllableEntry]) -> dict[str, int]:
    """Count entries by vowel id.

    Args:
        entries: Inventory entries.

    Returns:
        Dictionary of vowel id to entry count.
    """

    counter: Counter[str] = Counter()
    for entry in entries:
        counter[entry.vowel_id] += 1
    return dict(counter)


def collect_consonant_counts(entries: Iterable[SyllableEntry]) -> dict[str, int]:
    """Count entries by consonant glyph.

    Args:
        entries: Inventory entries.

    Returns:
        Dictionary of consonant glyph to entry count.
    """

    counter: Counter[str] = Counter()
    for entry in entries:
        counter[entry.consonant] += 1
    return dict(counter)
