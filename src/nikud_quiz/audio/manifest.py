"""Audio manifest loading, building and writing.

The manifest is a JSON object mapping each syllable to an audio file name
relative to the audio directory. It is the only source of truth for which
syllables can be played.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import json
from pathlib import Path
from typing import Iterable, Mapping

from nikud_quiz.models import SyllableEntry
from nikud_quiz.syllables.inventory import iter_catalog_entries

# Checked in order; the first existing file wins.
AUDIO_EXTENSIONS = (".wav", ".mp3")


@dataclass(frozen=True)
class AudioIndexRepository:
    """Read-only repository over one audio manifest file.

    The manifest is parsed once on first access. Instances are path-scoped, so a
    new repository must be created to pick up a rewritten file.
    """

    path: Path

    @cached_property
    def index(self) -> dict[str, str]:
        """Load and cache the syllable -> file name mapping.

        Returns:
            Mapping in manifest order.

        Raises:
            FileNotFoundError: If the manifest file does not exist.
            ValueError: If the file is not a JSON object of string pairs.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"Audio manifest not found: {self.path}")

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Audio manifest is not valid JSON: {self.path}: {exc}") from exc

        if not isinstance(payload, dict):
            raise ValueError(f"Audio manifest must be a JSON object: {self.path}")

        bad_keys = [key for key, value in payload.items() if not isinstance(value, str)]
        if bad_keys:
            preview = ", ".join(repr(key) for key in bad_keys[:10])
            raise ValueError(f"Audio manifest has non-string file names for: {preview}")
        return dict(payload)


@dataclass(frozen=True)
class ManifestBuildResult:
    """Outcome of scanning an audio directory against the syllable inventory.

    Attributes:
        index: Syllable -> file name for every entry with an audio file.
        missing: Inventory entries without any audio file.
    """

    index: dict[str, str]
    missing: tuple[SyllableEntry, ...]


def build_manifest(
    audio_dir: Path,
    entries: Iterable[SyllableEntry] | None = None,
) -> ManifestBuildResult:
    """Index already-present audio files for the syllable inventory.

    For each entry the canonical ``.wav`` file is preferred, then the ``.mp3``
    file with the same stem.

    Args:
        audio_dir: Directory containing generated audio files.
        entries: Inventory to index; the full catalog when omitted.

    Returns:
        Manifest mapping plus the entries that had no file.

    Raises:
        FileNotFoundError: If ``audio_dir`` does not exist.
    """

    if not audio_dir.is_dir():
        raise FileNotFoundError(f"Audio directory not found: {audio_dir}")

    index: dict[str, str] = {}
    missing: list[SyllableEntry] = []
    for entry in entries if entries is not None else iter_catalog_entries():
        stem = Path(entry.filename).stem
        for extension in AUDIO_EXTENSIONS:
            candidate = f"{stem}{extension}"
            if (audio_dir / candidate).is_file():
                index[entry.syllable] = candidate
                break
        else:
            missing.append(entry)

    return ManifestBuildResult(index=index, missing=tuple(missing))


def write_manifest(index: Mapping[str, str], output_path: Path) -> None:
    """Write a manifest as UTF-8 JSON, keeping Hebrew text unescaped.

    Args:
        index: Syllable -> file name mapping to serialize.
        output_path: Destination JSON path; parent directories are created.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(dict(index), handle, ensure_ascii=False, indent=2)
        handle.write("\n")
