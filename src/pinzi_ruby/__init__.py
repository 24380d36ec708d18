"""Pinyin ruby-text segmentation, tone coloring and dictionary lookup."""

from .models import (
    AnnotatedRow,
    AnnotatedSyllable,
    DictionaryData,
    DictionaryWord,
    Example,
    Meaning,
    RubyRow,
    ToneRun,
)
from .pinyin.segmenter import segment_pinyin
from .pinyin.tones import classify_tone, color_for_tone

__all__ = [
    "RubyRow",
    "AnnotatedRow",
    "AnnotatedSyllable",
    "ToneRun",
    "DictionaryData",
    "Meaning",
    "DictionaryWord",
    "Example",
    "segment_pinyin",
    "classify_tone",
    "color_for_tone",
]
