"""CLI entrypoint for syllable listing, manifest building, reporting and the quiz."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Sequence

from nikud_quiz.audio.manifest import AudioIndexRepository, build_manifest, write_manifest
from nikud_quiz.catalog import VOWELS, resolve_vowels
from nikud_quiz.models import ConsonantToggles, FilterSelection, FilterStatus
from nikud_quiz.quiz.engine import (
    ADVANCE_DELAY_SECONDS,
    DEFAULT_OPTION_COUNT,
    InsufficientOptionsError,
)
from nikud_quiz.quiz.session import FILTER_STATUS_MESSAGES, QuizSession
from nikud_quiz.quiz.terminal import run_terminal_quiz
from nikud_quiz.reporting.report_md import build_coverage_report_md
from nikud_quiz.syllables.generator import classify_selection, generate_allowed_syllables
from nikud_quiz.syllables.inventory import iter_catalog_entries
from nikud_quiz.validation import (
    collect_vowel_counts,
    validate_audio_assets,
    validate_audio_index,
)


def _resolve_default_manifest_path() -> Path:
    """Resolve default manifest path from project layout.

    Returns:
        Preferred manifest path, favoring ``assets/audio_manifest.json`` when
        present and falling back to ``audio_manifest.json``.
    """

    assets_manifest = Path("assets") / "audio_manifest.json"
    if assets_manifest.exists():
        return assets_manifest
    return Path("audio_manifest.json")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--vowels",
        type=_split_csv,
        default=tuple(vowel.id for vowel in VOWELS),
        help="Comma-separated vowel ids or symbols (default: all).",
    )
    parser.add_argument(
        "--letters",
        type=_split_csv,
        default=None,
        help="Comma-separated consonant glyphs; overrides the include/exclude switches.",
    )
    parser.add_argument("--no-base", action="store_true", help="Exclude base letters.")
    parser.add_argument(
        "--no-dagesh",
        action="store_true",
        help="Exclude dagesh forms (rafe forms of those letters stay included).",
    )
    parser.add_argument("--no-final", action="store_true", help="Exclude final-form letters.")


def _add_manifest_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--manifest",
        type=Path,
        default=_resolve_default_manifest_path(),
        help="Path to audio_manifest.json.",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser with ``syllables``, ``manifest``, ``report`` and
        ``quiz`` subcommands.
    """

    parser = argparse.ArgumentParser(description="Hebrew nikud audio quiz tools.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    syllables = subparsers.add_parser("syllables", help="List syllables allowed by filters.")
    _add_manifest_argument(syllables)
    _add_filter_arguments(syllables)

    manifest = subparsers.add_parser("manifest", help="Build a manifest from existing audio files.")
    manifest.add_argument(
        "--audio-dir",
        type=Path,
        default=Path("assets") / "audio",
        help="Directory containing <letter>_<vowel>.wav/.mp3 files.",
    )
    manifest.add_argument(
        "--output",
        type=Path,
        default=Path("assets") / "audio_manifest.json",
        help="Destination manifest path.",
    )
    manifest.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional markdown coverage report path.",
    )

    report = subparsers.add_parser("report", help="Write an audio coverage report.")
    _add_manifest_argument(report)
    report.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to the manifest).",
    )

    quiz = subparsers.add_parser("quiz", help="Play the quiz in the terminal.")
    _add_manifest_argument(quiz)
    _add_filter_arguments(quiz)
    quiz.add_argument(
        "--audio-dir",
        type=Path,
        default=None,
        help="Audio directory (default: audio/ next to the manifest).",
    )
    quiz.add_argument(
        "--rounds", type=_positive_int, default=None, help="Stop after this many rounds."
    )
    quiz.add_argument(
        "--options", type=_positive_int, default=DEFAULT_OPTION_COUNT, help="Options per round."
    )
    quiz.add_argument("--seed", type=int, default=None, help="Random seed for reproducible rounds.")
    quiz.add_argument(
        "--delay",
        type=float,
        default=ADVANCE_DELAY_SECONDS,
        help="Seconds to wait before the next round.",
    )
    return parser


def _selection_from_args(args: argparse.Namespace) -> FilterSelection:
    if args.letters is not None:
        return FilterSelection(vowels=args.vowels, consonants=args.letters)
    return FilterSelection(
        vowels=args.vowels,
        consonants=ConsonantToggles(
            include_base=not args.no_base,
            include_dagesh=not args.no_dagesh,
            include_final=not args.no_final,
        ),
    )


def _load_audio_index(manifest_path: Path) -> dict[str, str]:
    """Load and validate the manifest, turning failures into a CLI exit."""

    try:
        index = AudioIndexRepository(manifest_path).index
        validate_audio_index(index)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"Cannot load audio manifest: {exc}") from exc
    return index


def _run_syllables(args: argparse.Namespace) -> int:
    audio_index = _load_audio_index(args.manifest)
    selection = _selection_from_args(args)
    try:
        vowels = resolve_vowels(selection.vowels)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    allowed = generate_allowed_syllables(vowels, selection.consonants, audio_index)
    status = classify_selection(vowels, allowed)
    if status is not FilterStatus.OK:
        print(FILTER_STATUS_MESSAGES[status])
        return 1

    entries = [entry for entry in iter_catalog_entries() if entry.syllable in allowed]
    print(f"Allowed syllables ({len(allowed)}):")
    print(" ".join(sorted(allowed)))

    vowel_counts = collect_vowel_counts(entries)
    vowel_rows = [
        [vowel.id, str(vowel_counts[vowel.id])] for vowel in vowels if vowel.id in vowel_counts
    ]
    print("\nSyllables per vowel:")
    print(_format_table(["vowel", "count"], vowel_rows))
    return 0


def _run_manifest(args: argparse.Namespace) -> int:
    entries = list(iter_catalog_entries())
    try:
        result = build_manifest(args.audio_dir, entries)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc

    write_manifest(result.index, args.output)
    print(f"Indexed {len(result.index)} of {len(entries)} syllables")
    print(f"Wrote manifest to {args.output}")
    if result.missing:
        print(f"WARNING: {len(result.missing)} syllables have no audio file")

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(build_coverage_report_md(entries, result.index), encoding="utf-8")
        print(f"Wrote report to {args.report}")
    return 0


def _run_report(args: argparse.Namespace) -> int:
    audio_index = _load_audio_index(args.manifest)
    report_path = args.output if args.output is not None else args.manifest.parent / "report.md"
    entries = list(iter_catalog_entries())
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_coverage_report_md(entries, audio_index), encoding="utf-8")
    print(f"Wrote report to {report_path}")
    return 0


def _run_quiz(args: argparse.Namespace) -> int:
    audio_index = _load_audio_index(args.manifest)
    audio_dir = args.audio_dir if args.audio_dir is not None else args.manifest.parent / "audio"
    try:
        validate_audio_assets(audio_index, audio_dir)
    except ValueError as exc:
        raise SystemExit(f"Audio files unavailable: {exc}") from exc
    rng = random.Random(args.seed) if args.seed is not None else None
    session = QuizSession(audio_index, option_count=args.options, rng=rng)

    try:
        status = session.update_filters(_selection_from_args(args))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if status is not FilterStatus.OK:
        raise SystemExit(FILTER_STATUS_MESSAGES[status])

    try:
        score = run_terminal_quiz(session, audio_dir, rounds=args.rounds, delay=args.delay)
    except InsufficientOptionsError as exc:
        raise SystemExit(
            f"Only {exc.available} syllables match the filters; "
            f"{exc.shortfall} more are needed to fill {exc.required} options."
        ) from exc

    print(f"\nFinal score: {score.correct_count}/{score.total_count}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected CLI subcommand.

    Returns:
        Process exit status.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    handlers = {
        "syllables": _run_syllables,
        "manifest": _run_manifest,
        "report": _run_report,
        "quiz": _run_quiz,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
