"""Ordered boundary-insertion rules for unseparated tone-marked pinyin.

Each rule is an independent ``str -> str`` transform that inserts a space
where a syllable boundary is likely. Rules run in a fixed order and later
rules depend on the spacing produced by earlier ones, so the order of
``BOUNDARY_RULES`` must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from pinzi_ruby.pinyin.tones import VOWEL_CHARS

V = VOWEL_CHARS


@dataclass(frozen=True)
class BoundaryRule:
    """One regex substitution in the segmentation pipeline.

    Attributes:
        name: Short label used in debug output.
        pattern: Compiled case-insensitive pattern.
        replacement: ``re.sub`` replacement template.
        count: Maximum substitutions per application; ``0`` means all.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str
    count: int = 1

    def apply(self, text: str) -> str:
        """Return ``text`` with this rule's boundary inserted."""

        return self.pattern.sub(self.replacement, text, count=self.count)


BOUNDARY_RULES: tuple[BoundaryRule, ...] = (
    # Bulk of the work: vowel followed by anything but another vowel, n or r.
    BoundaryRule(
        name="vowel_consonant",
        pattern=re.compile(f"([{V}])([^{V}nr])", re.IGNORECASE),
        replacement=r"\1 \2",
        count=0,
    ),
    BoundaryRule(
        name="w_double_initial",
        pattern=re.compile(r"(w)([csz]h)", re.IGNORECASE),
        replacement=r"\1 \2",
    ),
    BoundaryRule(
        name="n_final",
        pattern=re.compile(f"(n)([^{V}vg])", re.IGNORECASE),
        replacement=r"\1 \2",
    ),
    # Assumes no missing apostrophes in the source.
    BoundaryRule(
        name="vowel_initial_vowel",
        pattern=re.compile(f"([{V}v])([^{V}ws])([{V}v])", re.IGNORECASE),
        replacement=r"\1 \2\3",
    ),
    # changan = chang + an
    BoundaryRule(
        name="ng_vowel",
        pattern=re.compile(f"([{V}v])(ng)([{V}v])", re.IGNORECASE),
        replacement=r"\1\2 \3",
    ),
    BoundaryRule(
        name="g_r_final",
        pattern=re.compile(f"([gr])([^{V}])", re.IGNORECASE),
        replacement=r"\1 \2",
    ),
    BoundaryRule(
        name="collapse_spaces",
        pattern=re.compile(r"\s{2,}"),
        replacement=" ",
        count=0,
    ),
)


def apply_boundary_rules(text: str, rules: tuple[BoundaryRule, ...] = BOUNDARY_RULES) -> str:
    """Run ``text`` through every boundary rule, left to right.

    Args:
        text: Pinyin for one word, possibly with no separators at all.
        rules: Rule sequence to compose; defaults to the standard pipeline.

    Returns:
        The same characters with boundary spaces inserted.
    """

    for rule in rules:
        text = rule.apply(text)
    return text
