"""Build definition-popup payloads for clicked words from CC-CEDICT."""

from __future__ import annotations

import logging

from pypinyin.contrib.tone_convert import to_tone

from pinzi_ruby.annotation.annotator import annotate_row
from pinzi_ruby.cedict.repository import CedictRepository
from pinzi_ruby.models import DictionaryData, Meaning, RubyRow

logger = logging.getLogger(__name__)


def numbered_to_marked(numbered: str) -> str:
    """Convert numbered pinyin such as ``xi1 wang4`` to ``xī wàng``.

    Neutral-tone syllables (``5``) lose their number and carry no mark.
    Tokens without a tone number, such as latin letters or ``·``, are kept
    unchanged.

    Args:
        numbered: Space-separated numbered syllables.

    Returns:
        Space-separated tone-marked syllables.
    """

    marked: list[str] = []
    for token in numbered.split():
        if not token[-1].isdigit():
            marked.append(token)
            continue
        if token.endswith("5"):
            token = token[:-1]
        marked.append(to_tone(token))
    return " ".join(marked)


def lookup_word(word: str, repo: CedictRepository) -> DictionaryData | None:
    """Return popup content for ``word``, or ``None`` when it is not listed.

    Each dictionary entry becomes one meaning whose pronunciation is also
    split into tone-colored syllables aligned with the simplified form.

    Args:
        word: Simplified or traditional Hanzi word.
        repo: Dictionary repository to query.

    Returns:
        ``DictionaryData`` with one meaning per entry, or ``None``.
    """

    word = word.strip()
    entries = repo.entries_for_word(word)
    if not entries:
        logger.debug("No dictionary entry for %r", word)
        return None

    meanings: list[Meaning] = []
    for entry in entries:
        pronunciation = numbered_to_marked(entry.pinyin_numbered)
        annotated = annotate_row(RubyRow(word=entry.simplified, pinyin=pronunciation))
        meanings.append(
            Meaning(
                definition=entry.definition,
                pronunciation=pronunciation,
                syllables=annotated.syllables,
            )
        )

    first = entries[0]
    return DictionaryData(
        simplified=first.simplified,
        traditional=first.traditional,
        meanings=tuple(meanings),
    )
