"""Unit tests for audio manifest loading, building and writing."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nikud_quiz.audio.manifest import AudioIndexRepository, build_manifest, write_manifest
from nikud_quiz.models import SyllableEntry


def _write(path: Path, text: str) -> Path:
    """Write helper for fixture files in tmp directories."""

    path.write_text(text, encoding="utf-8")
    return path


def _entry(syllable: str, filename: str) -> SyllableEntry:
    return SyllableEntry(
        syllable=syllable, consonant=syllable[0], vowel_id="kamatz", filename=filename
    )


def test_repository_loads_manifest_in_order(tmp_path: Path) -> None:
    manifest = _write(
        tmp_path / "audio_manifest.json",
        '{\n  "בָ": "bet_raphe_kamatz.mp3",\n  "אָ": "aleph_kamatz.wav"\n}\n',
    )

    repo = AudioIndexRepository(manifest)

    assert list(repo.index.items()) == [
        ("בָ", "bet_raphe_kamatz.mp3"),
        ("אָ", "aleph_kamatz.wav"),
    ]


def test_repository_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Audio manifest not found"):
        AudioIndexRepository(tmp_path / "missing.json").index


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("{not json", "not valid JSON"),
        ('["אָ"]', "must be a JSON object"),
        ('{"אָ": 3}', "non-string file names"),
    ],
)
def test_repository_rejects_malformed_manifest(tmp_path: Path, text: str, message: str) -> None:
    manifest = _write(tmp_path / "audio_manifest.json", text)

    with pytest.raises(ValueError, match=message):
        AudioIndexRepository(manifest).index


def test_build_manifest_prefers_wav_then_mp3(tmp_path: Path) -> None:
    """Existing .wav files win over .mp3; entries with neither are reported missing."""

    audio_dir = tmp_path / "audio"
    audio_dir.mkdir()
    for name in ["aleph_kamatz.wav", "aleph_kamatz.mp3", "bet_raphe_kamatz.mp3"]:
        (audio_dir / name).write_bytes(b"")

    entries = [
        _entry("אָ", "aleph_kamatz.wav"),
        _entry("בָ", "bet_raphe_kamatz.wav"),
        _entry("גָ", "gimel_kamatz.wav"),
    ]
    result = build_manifest(audio_dir, entries)

    assert result.index == {"אָ": "aleph_kamatz.wav", "בָ": "bet_raphe_kamatz.mp3"}
    assert [entry.syllable for entry in result.missing] == ["גָ"]


def test_build_manifest_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Audio directory not found"):
        build_manifest(tmp_path / "nope")


def test_write_manifest_keeps_hebrew_readable(tmp_path: Path) -> None:
    output = tmp_path / "assets" / "audio_manifest.json"

    write_manifest({"וּ": "vav_shuruk.wav"}, output)
    text = output.read_text(encoding="utf-8")

    assert "וּ" in text
    assert json.loads(text) == {"וּ": "vav_shuruk.wav"}
    assert AudioIndexRepository(output).index == {"וּ": "vav_shuruk.wav"}
