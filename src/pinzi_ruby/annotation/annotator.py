"""Pair segmented pinyin with Hanzi and assign tone colors."""

from __future__ import annotations

import re
from typing import AbstractSet, Sequence

from pinzi_ruby.models import AnnotatedRow, AnnotatedSyllable, RubyRow, ToneRun
from pinzi_ruby.pinyin.segmenter import segment_pinyin
from pinzi_ruby.pinyin.tones import classify_tone, color_for_tone

CJK_RE = re.compile(r"[㐀-鿿]")


def extract_hanzi_chars(word: str) -> list[str]:
    """Extract the Hanzi of ``word``, dropping punctuation and latin suffixes.

    Args:
        word: Ruby base text.

    Returns:
        Ordered Hanzi used for positional pairing with syllables.
    """

    return [char for char in word if CJK_RE.fullmatch(char)]


def pair_syllables(chars: Sequence[str], syllables: Sequence[str]) -> list[AnnotatedSyllable]:
    """Pair characters with syllables by position.

    The longer sequence determines the result length; the missing side of a
    pair is left empty so nothing is silently dropped.

    Args:
        chars: Hanzi of the word.
        syllables: Segmented pinyin syllables.

    Returns:
        One annotated pair per position.
    """

    pairs: list[AnnotatedSyllable] = []
    for idx in range(max(len(chars), len(syllables))):
        char = chars[idx] if idx < len(chars) else ""
        syllable = syllables[idx] if idx < len(syllables) else ""
        tone = classify_tone(syllable)
        pairs.append(
            AnnotatedSyllable(char=char, syllable=syllable, tone=tone, color=color_for_tone(tone))
        )
    return pairs


def group_tone_runs(syllables: Sequence[AnnotatedSyllable]) -> list[ToneRun]:
    """Merge consecutive characters with the same tone into colored runs.

    Pairs without a character are skipped since there is nothing to render.

    Args:
        syllables: Annotated pairs in reading order.

    Returns:
        Runs in reading order.
    """

    runs: list[ToneRun] = []
    for item in syllables:
        if not item.char:
            continue
        if runs and runs[-1].tone == item.tone:
            last = runs[-1]
            runs[-1] = ToneRun(text=last.text + item.char, tone=last.tone, color=last.color)
            continue
        runs.append(ToneRun(text=item.char, tone=item.tone, color=item.color))
    return runs


def annotate_row(
    row: RubyRow,
    hidden_words: AbstractSet[str] = frozenset(),
    use_delimiter_mode: bool = False,
) -> AnnotatedRow:
    """Annotate one ruby row with per-character tones and colors.

    Args:
        row: Source ruby row.
        hidden_words: Words whose pinyin is suppressed.
        use_delimiter_mode: Split pinyin on non-breaking spaces instead of
            running the boundary heuristics.

    Returns:
        Annotated row; hidden words keep their text but lose their pinyin.
    """

    chars = extract_hanzi_chars(row.word)
    if row.word.strip() in hidden_words:
        return AnnotatedRow(
            word=row.word,
            pinyin="",
            syllables=(),
            runs=(ToneRun(text="".join(chars), tone=0, color=""),) if chars else (),
            syllable_count=0,
            character_count=len(chars),
            hidden=True,
        )

    syllables = segment_pinyin(row.pinyin, use_delimiter_mode=use_delimiter_mode)
    pairs = pair_syllables(chars, syllables)
    return AnnotatedRow(
        word=row.word,
        pinyin=row.pinyin,
        syllables=tuple(pairs),
        runs=tuple(group_tone_runs(pairs)),
        syllable_count=len(syllables),
        character_count=len(chars),
    )


def annotate_rows(
    rows: Sequence[RubyRow],
    hidden_words: AbstractSet[str] = frozenset(),
    use_delimiter_mode: bool = False,
) -> list[AnnotatedRow]:
    """Annotate every row in order. See :func:`annotate_row`."""

    return [annotate_row(row, hidden_words, use_delimiter_mode) for row in rows]
