"""Top-level orchestration for ruby annotation runs."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from pinzi_ruby.annotation.annotator import annotate_rows
from pinzi_ruby.annotation.hidden_words import HiddenWordsRepository
from pinzi_ruby.io.tsv_io import read_ruby_tsv
from pinzi_ruby.models import AnnotatedRow
from pinzi_ruby.validation import AlignmentIssue, collect_alignment_issues, validate_ruby_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        rows: Annotated rows in input order.
        alignment_issues: Rows whose syllables did not pair one-to-one.
        hidden_words: Hidden-word set the run was configured with.
    """

    rows: tuple[AnnotatedRow, ...]
    alignment_issues: tuple[AlignmentIssue, ...]
    hidden_words: frozenset[str]


def run_pipeline(
    input_path: Path,
    hidden_words_path: Path,
    use_delimiter_mode: bool = False,
) -> PipelineResult:
    """Read, validate and annotate one ruby TSV file.

    Args:
        input_path: ``word<TAB>pinyin`` source file.
        hidden_words_path: Hide-pinyin word list; defaults apply when absent.
        use_delimiter_mode: Split pinyin on non-breaking spaces only.

    Returns:
        ``PipelineResult`` with annotated rows and alignment diagnostics.

    Raises:
        ValueError: If the input rows fail validation.
    """

    rows = read_ruby_tsv(input_path)
    validate_ruby_rows(rows)

    hidden_words = HiddenWordsRepository(hidden_words_path).load()
    logger.debug("Loaded %d hidden words from %s", len(hidden_words), hidden_words_path)

    annotated = annotate_rows(rows, hidden_words, use_delimiter_mode=use_delimiter_mode)
    issues = collect_alignment_issues(annotated)
    if issues:
        logger.warning("%d of %d rows have mismatched syllable counts", len(issues), len(annotated))

    return PipelineResult(
        rows=tuple(annotated),
        alignment_issues=tuple(issues),
        hidden_words=hidden_words,
    )
