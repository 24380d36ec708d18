"""Unit tests for tone classification and tone colors."""

from __future__ import annotations

from pinzi_ruby.pinyin.tones import (
    TONE_MARK_CHARS,
    classify_tone,
    color_for_tone,
    count_tone_marks,
)


def test_classify_tone_recognizes_every_marked_vowel() -> None:
    """Each tone class should map all six of its marked vowels to its tone."""

    expected = {
        1: "āēīōūǖ",
        2: "áéíóúǘ",
        3: "ǎěǐǒǔǚ",
        4: "àèìòùǜ",
    }
    for tone, vowels in expected.items():
        for vowel in vowels:
            assert classify_tone(vowel) == tone, vowel


def test_classify_tone_returns_neutral_without_marks() -> None:
    assert classify_tone("") == 0
    assert classify_tone("ma") == 0
    assert classify_tone("lü") == 0
    assert classify_tone("de") == 0


def test_classify_tone_reads_full_syllables() -> None:
    assert classify_tone("zhōng") == 1
    assert classify_tone("guó") == 2
    assert classify_tone("nǚ") == 3
    assert classify_tone("wàng") == 4


def test_classify_tone_prefers_class_priority_over_position() -> None:
    """With marks from two classes, the lower tone class wins even if it comes later."""

    assert classify_tone("mǎmā") == 1
    assert classify_tone("hàohé") == 2
    assert classify_tone("xièxiě") == 3


def test_count_tone_marks_counts_across_classes() -> None:
    assert count_tone_marks("") == 0
    assert count_tone_marks("ma") == 0
    assert count_tone_marks("xīwàng") == 2
    assert count_tone_marks(TONE_MARK_CHARS) == 24


def test_color_for_tone_uses_fixed_palette() -> None:
    assert color_for_tone(1) == "#3b82f6"
    assert color_for_tone(2) == "#a855f7"
    assert color_for_tone(3) == "#10b981"
    assert color_for_tone(4) == "#ef4444"
    assert color_for_tone(0) == ""
    assert color_for_tone(7) == ""
