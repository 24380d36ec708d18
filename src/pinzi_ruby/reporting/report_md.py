"""Markdown report generation for annotation runs."""

from __future__ import annotations

from typing import Iterable, Sequence

from pinzi_ruby.models import AnnotatedRow
from pinzi_ruby.pinyin.tones import color_for_tone
from pinzi_ruby.validation import (
    collect_alignment_issues,
    collect_suspect_syllables,
    collect_tone_counts,
)

TONE_LABELS = {
    0: "neutral",
    1: "1 (high level)",
    2: "2 (rising)",
    3: "3 (dipping)",
    4: "4 (falling)",
}


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


def build_report_md(rows: Sequence[AnnotatedRow]) -> str:
    """Build the markdown report for one annotation run.

    Args:
        rows: Annotated rows.

    Returns:
        Full markdown content with summary tables.
    """

    tone_counts = collect_tone_counts(rows)
    tone_rows = [
        (TONE_LABELS[tone], color_for_tone(tone) or "-", str(tone_counts.get(tone, 0)))
        for tone in sorted(TONE_LABELS)
    ]

    alignment_rows = [
        (item.word, item.pinyin, " ".join(item.syllables), str(item.character_count))
        for item in collect_alignment_issues(rows)
    ]

    suspect_rows = [
        (item.word, item.pinyin, item.syllable) for item in collect_suspect_syllables(rows)
    ]

    hidden_rows = [(row.word,) for row in rows if row.hidden]

    sections = [
        "# Annotation Report",
        "",
        f"Rows annotated: {len(rows)}",
        "",
        "## Characters per tone",
        _markdown_table(["tone", "color", "count"], tone_rows),
        "",
        "## Syllable count mismatches",
        _markdown_table(["word", "pinyin", "syllables", "character_count"], alignment_rows),
        "",
        "## Syllables outside the pinyin inventory",
        _markdown_table(["word", "pinyin", "syllable"], suspect_rows),
        "",
        "## Hidden words",
        _markdown_table(["word"], hidden_rows),
    ]

    return "\n".join(sections) + "\n"
