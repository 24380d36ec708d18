"""Data models shared by segmentation, annotation and dictionary lookup.

Every record is an immutable value: rows are created once per ruby element and
consumed by the next stage, so downstream code can rely on stable fields and
never needs to copy defensively.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RubyRow:
    """One ruby element: a Hanzi word and the pinyin rendered above it."""

    word: str
    pinyin: str


@dataclass(frozen=True)
class AnnotatedSyllable:
    """One Hanzi paired positionally with its pinyin syllable.

    ``syllable`` is empty when the segmenter produced fewer syllables than the
    word has characters; ``char`` is empty in the opposite case.
    """

    char: str
    syllable: str
    tone: int
    color: str


@dataclass(frozen=True)
class ToneRun:
    """Consecutive characters sharing a tone, rendered with a single color."""

    text: str
    tone: int
    color: str


@dataclass(frozen=True)
class AnnotatedRow:
    """Ruby row after segmentation, tone classification and coloring.

    ``hidden`` rows carry no syllables: their pinyin is suppressed entirely.
    ``syllable_count`` and ``character_count`` are kept separately because a
    best-effort segmentation may not line up with the Hanzi.
    """

    word: str
    pinyin: str
    syllables: tuple[AnnotatedSyllable, ...]
    runs: tuple[ToneRun, ...]
    syllable_count: int
    character_count: int
    hidden: bool = False

    @property
    def is_aligned(self) -> bool:
        """Return whether every character received exactly one syllable."""

        return self.hidden or self.syllable_count == self.character_count


@dataclass(frozen=True)
class DictionaryWord:
    """Related word listed under a meaning (synonym, antonym, classifier)."""

    simplified: str
    traditional: str
    pinyin: str
    frequency: str = ""
    usage: str = ""


@dataclass(frozen=True)
class Example:
    """Example sentence or common expression with its translation."""

    simplified: str
    traditional: str
    pinyin: str
    translation: str


@dataclass(frozen=True)
class Meaning:
    """One dictionary sense as shown in the definition popup.

    Only ``definition``, ``pronunciation`` and ``syllables`` come from
    CC-CEDICT. The remaining fields mirror the richer popup payload and stay
    empty unless a source provides them. ``word_class`` holds the part of
    speech.
    """

    definition: str
    pronunciation: str
    syllables: tuple[AnnotatedSyllable, ...] = field(default_factory=tuple)
    word_class: str = ""
    frequency: str = ""
    usage: str = ""
    examples: tuple[Example, ...] = field(default_factory=tuple)
    synonyms: tuple[DictionaryWord, ...] = field(default_factory=tuple)
    antonyms: tuple[DictionaryWord, ...] = field(default_factory=tuple)
    classifiers: tuple[DictionaryWord, ...] = field(default_factory=tuple)
    common_expressions: tuple[Example, ...] = field(default_factory=tuple)
    notes: str = ""


@dataclass(frozen=True)
class DictionaryData:
    """Popup payload for a clicked word."""

    simplified: str
    traditional: str
    meanings: tuple[Meaning, ...] = field(default_factory=tuple)
