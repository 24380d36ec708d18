"""Parsing utilities for CC-CEDICT dictionary files."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable

CEDICT_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)\s+\[([^]]+)]\s*/(.*)/\s*$")
NUMBERED_SYLLABLE_RE = re.compile(r"[a-zü]+[1-5]")


@dataclass(frozen=True)
class CedictEntry:
    """One dictionary line with both written forms and its glosses.

    Unlike a word-keyed record, an entry keeps traditional and simplified
    together so a popup can show both, and the repository can index it under
    either form.
    """

    traditional: str
    simplified: str
    pinyin_tokens: tuple[str, ...]
    glosses: tuple[str, ...]

    @property
    def pinyin_numbered(self) -> str:
        """Return the space-separated numbered pinyin string."""

        return " ".join(self.pinyin_tokens)

    @property
    def definition(self) -> str:
        """Return glosses joined with ``; `` for single-line display."""

        return "; ".join(self.glosses)


def normalize_cedict_syllable(token: str) -> str | None:
    """Normalize one CC-CEDICT pinyin token to lowercase numbered format.

    CC-CEDICT writes ``ü`` as ``u:`` and some patch files use ``v``; both are
    rewritten before the token shape is checked.

    Args:
        token: Raw token from the bracketed pinyin field.

    Returns:
        A token such as ``lü4``, or ``None`` when the token is not a syllable
        (letters, proper-noun punctuation such as ``·``, or a missing tone).
    """

    token = token.strip()
    if not token:
        return None
    token = token.replace("u:", "ü").replace("U:", "ü")
    token = token.replace("v", "ü").replace("V", "ü")
    token = token.lower()
    if not NUMBERED_SYLLABLE_RE.fullmatch(token):
        return None
    return token


def _parse_pinyin_tokens(payload: str) -> tuple[str, ...] | None:
    """Parse the bracketed pinyin payload into normalized numbered tokens.

    Tokens that are not numbered syllables, such as the letters in ``T恤``
    or the ``·`` in transliterated names, are kept verbatim.

    Args:
        payload: Raw pinyin string inside ``[...]``.

    Returns:
        Tuple of tokens, or ``None`` when the payload is empty.
    """

    tokens: list[str] = []
    for token in payload.split():
        normalized = normalize_cedict_syllable(token)
        tokens.append(token if normalized is None else normalized)
    if not tokens:
        return None
    return tuple(tokens)


def parse_cedict_lines(lines: Iterable[str]) -> list[CedictEntry]:
    """Parse CC-CEDICT lines into entries.

    Comments, blank lines, malformed lines, and lines with an empty pinyin
    field are skipped.

    Args:
        lines: Raw dictionary lines.

    Returns:
        Entries in file order.
    """

    entries: list[CedictEntry] = []
    for line in lines:
        if not line.strip() or line.startswith("#"):
            continue
        match = CEDICT_ENTRY_RE.match(line.strip())
        if not match:
            continue

        trad, simp, pinyin_field, definition_payload = match.groups()
        tokens = _parse_pinyin_tokens(pinyin_field)
        if tokens is None:
            continue

        glosses = tuple(part.strip() for part in definition_payload.split("/") if part.strip())
        entries.append(
            CedictEntry(
                traditional=trad,
                simplified=simp,
                pinyin_tokens=tokens,
                glosses=glosses,
            )
        )

    return entries
