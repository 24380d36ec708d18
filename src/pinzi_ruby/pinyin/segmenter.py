"""Split a word's pinyin into one syllable per Hanzi.

Pinyin in ruby text is usually written without separators (``xīwàng``), so
boundaries are recovered heuristically with the rules in
:mod:`pinzi_ruby.pinyin.rules`. Some rules only fire once per pass, which is
why still-fused tokens are fed back through the pipeline a bounded number of
times. The result is best-effort and never raises.
"""

from __future__ import annotations

import logging

from pinzi_ruby.pinyin.rules import apply_boundary_rules
from pinzi_ruby.pinyin.tones import count_tone_marks

logger = logging.getLogger(__name__)

NBSP = "\xa0"
MAX_SYLLABLE_LENGTH = 4
MAX_REFINEMENT_PASSES = 2


def is_fused(token: str) -> bool:
    """Return whether ``token`` probably still holds more than one syllable.

    A token is treated as fused when it is longer than four characters or
    carries more than one tone mark.
    """

    return len(token) > MAX_SYLLABLE_LENGTH or count_tone_marks(token) > 1


def _split_tokens(text: str) -> list[str]:
    """Split rule output on spaces, trimming and dropping empty tokens.

    Dropping empties means whitespace-only input produces no syllables.
    """

    tokens: list[str] = []
    for part in text.split(" "):
        part = part.strip()
        if part:
            tokens.append(part)
    return tokens


def segment_pinyin(pinyin: str, use_delimiter_mode: bool = False) -> list[str]:
    """Segment pinyin for one word into syllables.

    Input is expected in NFC form: the rules match precomposed tone-marked
    vowels, and a decomposed combining mark would be treated as a consonant.
    Callers normalize at their input boundary.

    Whitespace-only input also yields ``[]`` rather than a single empty
    syllable, so every returned syllable in the default mode is non-empty.

    Args:
        pinyin: Pinyin text for a single word; may be empty.
        use_delimiter_mode: When true, the input is already segmented with
            non-breaking spaces and is split on them verbatim.

    Returns:
        Syllables in left-to-right order. Empty input yields ``[]``.
    """

    if not pinyin:
        return []

    if use_delimiter_mode:
        return pinyin.split(NBSP)

    tokens = _split_tokens(apply_boundary_rules(pinyin))
    for _ in range(MAX_REFINEMENT_PASSES):
        if not any(is_fused(token) for token in tokens):
            break
        refined: list[str] = []
        for token in tokens:
            if is_fused(token):
                refined.extend(_split_tokens(apply_boundary_rules(token)))
            else:
                refined.append(token)
        tokens = refined

    logger.debug("Segmented %r into %s", pinyin, tokens)
    return tokens
