"""TSV read/write helpers for ruby rows and annotated output."""

from __future__ import annotations

from pathlib import Path
import unicodedata
from typing import Sequence

from pinzi_ruby.models import AnnotatedRow, RubyRow

INPUT_HEADER = ["word", "pinyin"]

TSV_HEADER = [
    "word",
    "pinyin",
    "syllables",
    "tones",
    "colors",
    "hidden",
]


def read_ruby_tsv(input_path: Path) -> list[RubyRow]:
    """Read ``word<TAB>pinyin`` rows, skipping blanks, comments and the header.

    Text is NFC-normalized so combining tone marks compare equal to the
    precomposed vowels the segmenter matches on. Rows with only a word keep an
    empty pinyin field.

    Args:
        input_path: Source TSV path.

    Returns:
        Rows in file order.
    """

    rows: list[RubyRow] = []
    with input_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = unicodedata.normalize("NFC", line.rstrip("\n").rstrip("\r"))
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            cells = line.split("\t")
            if [cell.strip() for cell in cells[:2]] == INPUT_HEADER:
                continue
            word = cells[0].strip()
            pinyin = cells[1] if len(cells) > 1 else ""
            rows.append(RubyRow(word=word, pinyin=pinyin.strip(" ")))
    return rows


def write_annotated_tsv(
    rows: Sequence[AnnotatedRow], output_path: Path, include_header: bool = True
) -> None:
    """Write annotated rows to a TSV file using the canonical column order.

    Syllables, tones and colors are space-separated per character position;
    empty colors are written as ``-`` to keep positions aligned.

    Args:
        rows: Annotated rows to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for row in rows:
            handle.write(
                "\t".join(
                    [
                        row.word,
                        row.pinyin,
                        " ".join(item.syllable or "-" for item in row.syllables),
                        " ".join(str(item.tone) for item in row.syllables),
                        " ".join(item.color or "-" for item in row.syllables),
                        "1" if row.hidden else "0",
                    ]
                )
            )
            handle.write("\n")
