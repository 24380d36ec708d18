"""Inventory of valid Mandarin syllables, used for segmentation diagnostics."""

from __future__ import annotations

import functools

from pypinyin import constants as pypinyin_constants

TONE_MARKS = {
    "ā": "a",
    "á": "a",
    "ǎ": "a",
    "à": "a",
    "ē": "e",
    "é": "e",
    "ě": "e",
    "è": "e",
    "ī": "i",
    "í": "i",
    "ǐ": "i",
    "ì": "i",
    "ō": "o",
    "ó": "o",
    "ǒ": "o",
    "ò": "o",
    "ū": "u",
    "ú": "u",
    "ǔ": "u",
    "ù": "u",
    "ǖ": "ü",
    "ǘ": "ü",
    "ǚ": "ü",
    "ǜ": "ü",
    "ń": "n",
    "ň": "n",
    "ǹ": "n",
    "ḿ": "m",
    "ê": "e",
}

EXTRA_VALID_SYLLABLES = {"m", "n", "ng", "hm", "hng", "r"}


def strip_tone_marks(syllable: str) -> str:
    """Normalize one pinyin syllable by removing tone marks and lowercasing.

    Args:
        syllable: Pinyin chunk that may contain tone-marked vowels.

    Returns:
        Tone-free lowercase pinyin where ``v`` is normalized to ``ü``.
    """

    chars: list[str] = []
    for ch in syllable.lower():
        if ch in TONE_MARKS:
            chars.append(TONE_MARKS[ch])
        elif ch == "v":
            chars.append("ü")
        else:
            chars.append(ch)
    return "".join(chars)


@functools.lru_cache(maxsize=None)
def valid_syllables() -> frozenset[str]:
    """Collect tone-free syllables known to pypinyin's character dictionary.

    Erhua forms (base syllable plus ``r``) and a few interjections are added
    because ruby text writes them as single syllables.

    Returns:
        Frozen set of lowercase tone-free syllables.
    """

    syllables: set[str] = set()
    for value in pypinyin_constants.PINYIN_DICT.values():
        for item in str(value).split(","):
            base = strip_tone_marks(item.strip())
            if base:
                syllables.add(base)

    syllables.update({s + "r" for s in syllables if not s.endswith("r")})
    syllables.update(EXTRA_VALID_SYLLABLES)
    return frozenset(syllables)


def is_valid_syllable(syllable: str) -> bool:
    """Return whether ``syllable`` is a known Mandarin syllable, ignoring tone."""

    base = strip_tone_marks(syllable.strip())
    return bool(base) and base in valid_syllables()
