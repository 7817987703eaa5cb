"""Unit tests for manifest and audio asset validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from nikud_quiz.models import SyllableEntry
from nikud_quiz.validation import (
    collect_consonant_counts,
    collect_vowel_counts,
    validate_audio_assets,
    validate_audio_index,
)


def test_validate_audio_index_accepts_wav_and_mp3() -> None:
    validate_audio_index({"אָ": "aleph_kamatz.wav", "בָ": "bet_raphe_kamatz.MP3"})


def test_validate_audio_index_collects_all_errors() -> None:
    with pytest.raises(ValueError, match="failed with 3 errors") as excinfo:
        validate_audio_index({" ": "blank.wav", "אָ": "", "בָ": "bet.ogg"})

    message = str(excinfo.value)
    assert "empty syllable" in message
    assert "empty file name for 'אָ'" in message
    assert "unsupported audio file 'bet.ogg'" in message


def test_validate_audio_index_truncates_long_error_lists() -> None:
    index = {f"syllable-{idx}": "" for idx in range(30)}

    with pytest.raises(ValueError, match=r"\.\.\. and 5 more"):
        validate_audio_index(index)


def test_validate_audio_assets_reports_missing_files(tmp_path: Path) -> None:
    audio_dir = tmp_path / "audio"
    audio_dir.mkdir()
    (audio_dir / "aleph_kamatz.wav").write_bytes(b"")

    validate_audio_assets({"אָ": "aleph_kamatz.wav"}, audio_dir)
    with pytest.raises(ValueError, match="Missing audio file 'bet_raphe_kamatz.wav'"):
        validate_audio_assets(
            {"אָ": "aleph_kamatz.wav", "בָ": "bet_raphe_kamatz.wav"},
            audio_dir,
        )


def test_validate_audio_assets_requires_audio_files(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Audio directory not found"):
        validate_audio_assets({}, tmp_path / "audio")

    (tmp_path / "audio").mkdir()
    (tmp_path / "audio" / "notes.txt").write_text("x", encoding="utf-8")
    with pytest.raises(ValueError, match="No audio files found"):
        validate_audio_assets({}, tmp_path / "audio")


def test_collect_counts_group_by_vowel_and_consonant() -> None:
    entries = [
        SyllableEntry("אָ", "א", "kamatz", "aleph_kamatz.wav"),
        SyllableEntry("אַ", "א", "patach", "aleph_patach.wav"),
        SyllableEntry("בָ", "ב", "kamatz", "bet_raphe_kamatz.wav"),
    ]

    assert collect_vowel_counts(entries) == {"kamatz": 2, "patach": 1}
    assert collect_consonant_counts(entries) == {"א": 2, "ב": 1}
