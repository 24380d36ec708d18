"""Validation helpers for ruby input rows and annotation diagnostics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import re
from typing import Sequence

from pinzi_ruby.models import AnnotatedRow, RubyRow
from pinzi_ruby.pinyin.syllables import is_valid_syllable

HANZI_RE = re.compile(r"[㐀-鿿]")


@dataclass(frozen=True)
class AlignmentIssue:
    """Row whose syllable count does not match its Hanzi count."""

    word: str
    pinyin: str
    syllables: tuple[str, ...]
    character_count: int


@dataclass(frozen=True)
class SuspectSyllable:
    """Segmented syllable that is not a known Mandarin syllable."""

    word: str
    pinyin: str
    syllable: str


def validate_ruby_rows(rows: Sequence[RubyRow]) -> None:
    """Validate input rows before annotation.

    Args:
        rows: Ruby rows read from input.

    Raises:
        ValueError: If any row has an empty word or a word without any Hanzi.
            Mixed-script words such as ``卡拉OK`` are accepted.
    """

    errors: list[str] = []
    for idx, row in enumerate(rows, start=1):
        if not row.word:
            errors.append(f"Row {idx}: empty word")
        elif not HANZI_RE.search(row.word):
            errors.append(f"Row {idx}: no Hanzi in word '{row.word}'")

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Input validation failed with {len(errors)} errors:\n{preview}{more}")


def collect_alignment_issues(rows: Sequence[AnnotatedRow]) -> list[AlignmentIssue]:
    """List visible rows whose syllables do not pair one-to-one with Hanzi.

    Args:
        rows: Annotated rows.

    Returns:
        Issues in input order.
    """

    issues: list[AlignmentIssue] = []
    for row in rows:
        if row.is_aligned:
            continue
        issues.append(
            AlignmentIssue(
                word=row.word,
                pinyin=row.pinyin,
                syllables=tuple(item.syllable for item in row.syllables if item.syllable),
                character_count=row.character_count,
            )
        )
    return issues


def collect_suspect_syllables(rows: Sequence[AnnotatedRow]) -> list[SuspectSyllable]:
    """List segmented syllables that fall outside the known syllable inventory.

    These usually mark a fused or mis-split boundary.

    Args:
        rows: Annotated rows.

    Returns:
        Suspect syllables in input order.
    """

    suspects: list[SuspectSyllable] = []
    for row in rows:
        for item in row.syllables:
            if item.syllable and not is_valid_syllable(item.syllable):
                suspects.append(SuspectSyllable(row.word, row.pinyin, item.syllable))
    return suspects


def collect_tone_counts(rows: Sequence[AnnotatedRow]) -> dict[int, int]:
    """Count paired characters by tone across all visible rows.

    Args:
        rows: Annotated rows.

    Returns:
        Dictionary of tone number to character count.
    """

    counter: Counter[int] = Counter()
    for row in rows:
        for item in row.syllables:
            if item.char:
                counter[item.tone] += 1
    return dict(counter)
