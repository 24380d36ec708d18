"""Tone classification and tone colors for tone-marked pinyin."""

from __future__ import annotations

# Priority order matters: classify_tone returns the first class with a hit.
TONE_CLASSES: tuple[tuple[int, frozenset[str]], ...] = (
    (1, frozenset("āēīōūǖ")),
    (2, frozenset("áéíóúǘ")),
    (3, frozenset("ǎěǐǒǔǚ")),
    (4, frozenset("àèìòùǜ")),
)

TONE_MARK_CHARS = "āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜ"
VOWEL_CHARS = "aāáǎàeēéěèiīíǐìoōóǒòuūúǔùüǖǘǚǜ"

_TONE_MARK_SET = frozenset(TONE_MARK_CHARS)

TONE_COLORS = {
    1: "#3b82f6",
    2: "#a855f7",
    3: "#10b981",
    4: "#ef4444",
}


def classify_tone(syllable: str) -> int:
    """Return the tone number of a tone-marked pinyin syllable.

    Tone classes are tested in the order 1, 2, 3, 4 and the first class with
    any character present in ``syllable`` wins, regardless of where in the
    string that character occurs. Malformed input carrying marks from two
    classes is therefore resolved by class priority, not position.

    Args:
        syllable: Pinyin text, usually one syllable.

    Returns:
        Tone 1-4, or 0 when the input is empty or carries no tone mark.
    """

    if not syllable:
        return 0
    chars = set(syllable)
    for tone, marks in TONE_CLASSES:
        if chars & marks:
            return tone
    return 0


def count_tone_marks(text: str) -> int:
    """Count tone-marked vowels in ``text`` across all four tone classes."""

    return sum(1 for ch in text if ch in _TONE_MARK_SET)


def color_for_tone(tone: int) -> str:
    """Return the display color for a tone, or ``""`` to keep the page color."""

    return TONE_COLORS.get(tone, "")
