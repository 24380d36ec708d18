"""CLI entrypoint for pinyin segmentation, ruby annotation and word lookup."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import unicodedata
from typing import Sequence

from pinzi_ruby.cedict.repository import CedictRepository
from pinzi_ruby.dictionary.lookup import lookup_word
from pinzi_ruby.io.tsv_io import write_annotated_tsv
from pinzi_ruby.pinyin.segmenter import segment_pinyin
from pinzi_ruby.pinyin.tones import classify_tone, color_for_tone
from pinzi_ruby.pipeline import run_pipeline
from pinzi_ruby.reporting.report_md import build_report_md
from pinzi_ruby.validation import collect_tone_counts


def _resolve_default_cedict_path() -> Path:
    """Resolve default CC-CEDICT path from project layout.

    Returns:
        Preferred dictionary path, favoring ``data/cedict_ts.u8`` when present
        and falling back to project-root ``cedict_ts.u8``.
    """

    cwd_data = Path("data") / "cedict_ts.u8"
    if cwd_data.exists():
        return cwd_data
    return Path("cedict_ts.u8")


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


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser with ``segment``, ``annotate`` and ``lookup`` commands.
    """

    parser = argparse.ArgumentParser(
        description="Segment pinyin, annotate ruby text with tone colors, look up words."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    segment = subparsers.add_parser("segment", help="Split pinyin into tone-classified syllables.")
    segment.add_argument("pinyin", nargs="+", help="Pinyin strings, one per word.")
    segment.add_argument(
        "--delimiter-mode",
        action="store_true",
        help="Split on non-breaking spaces only, skipping boundary heuristics.",
    )

    annotate = subparsers.add_parser("annotate", help="Annotate a word/pinyin TSV file.")
    annotate.add_argument("--input", required=True, type=Path, help="Source word/pinyin TSV.")
    annotate.add_argument("--output", required=True, type=Path, help="Destination TSV path.")
    annotate.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to TSV).",
    )
    annotate.add_argument(
        "--hidden-words",
        type=Path,
        default=Path("data") / "hidden_words.txt",
        help="Words whose pinyin is hidden, one per line.",
    )
    annotate.add_argument(
        "--delimiter-mode",
        action="store_true",
        help="Input pinyin is pre-segmented with non-breaking spaces.",
    )
    annotate.add_argument("--no-header", action="store_true", help="Do not write TSV header.")

    lookup = subparsers.add_parser("lookup", help="Print dictionary content for words.")
    lookup.add_argument("words", nargs="+", help="Simplified or traditional Hanzi words.")
    lookup.add_argument(
        "--cedict",
        type=Path,
        default=_resolve_default_cedict_path(),
        help="Path to CC-CEDICT .u8 file.",
    )
    return parser


def _run_segment(args: argparse.Namespace) -> int:
    """Print one table of syllables, tones and colors per input string."""

    for pinyin in args.pinyin:
        pinyin = unicodedata.normalize("NFC", pinyin)
        syllables = segment_pinyin(pinyin, use_delimiter_mode=args.delimiter_mode)
        rows: list[list[str]] = []
        for syllable in syllables:
            tone = classify_tone(syllable)
            rows.append([syllable, str(tone), color_for_tone(tone) or "-"])
        print(f"{pinyin}: {len(syllables)} syllables")
        print(_format_table(["syllable", "tone", "color"], rows))
    return 0


def _run_annotate(args: argparse.Namespace) -> int:
    """Annotate a TSV file and write output plus markdown report."""

    if not args.input.exists():
        raise SystemExit(f"Input not found: {args.input}")

    report_path = args.report if args.report is not None else args.output.parent / "report.md"

    try:
        result = run_pipeline(
            input_path=args.input,
            hidden_words_path=args.hidden_words,
            use_delimiter_mode=args.delimiter_mode,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    write_annotated_tsv(result.rows, output_path=args.output, include_header=not args.no_header)
    report_path.write_text(build_report_md(result.rows), encoding="utf-8")

    print(f"Wrote {len(result.rows)} rows to {args.output}")
    print(f"Wrote report to {report_path}")
    if result.alignment_issues:
        print(f"WARNING: {len(result.alignment_issues)} rows have mismatched syllable counts")

    tone_counts = collect_tone_counts(result.rows)
    print("\nCharacters per tone:")
    print(
        _format_table(
            ["tone", "count"],
            [[str(tone), str(tone_counts[tone])] for tone in sorted(tone_counts)],
        )
    )
    return 0


def _run_lookup(args: argparse.Namespace) -> int:
    """Print every meaning of each requested word."""

    repo = CedictRepository(args.cedict)
    try:
        repo.entries
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc

    for word in args.words:
        word = unicodedata.normalize("NFC", word)
        data = lookup_word(word, repo)
        if data is None:
            print(f"{word}: no entry")
            continue
        title = data.simplified
        if data.traditional != data.simplified:
            title += f" ({data.traditional})"
        print(title)
        for idx, meaning in enumerate(data.meanings, start=1):
            print(f"  {idx}. [{meaning.pronunciation}] {meaning.definition}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow for the selected command.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "segment":
        return _run_segment(args)
    if args.command == "annotate":
        return _run_annotate(args)
    return _run_lookup(args)


if __name__ == "__main__":
    raise SystemExit(main())
