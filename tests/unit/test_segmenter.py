"""Unit tests for pinyin syllable segmentation."""

from __future__ import annotations

from pinzi_ruby.pinyin.rules import BOUNDARY_RULES, apply_boundary_rules
from pinzi_ruby.pinyin.segmenter import is_fused, segment_pinyin

SAMPLES = [
    "xīwàng",
    "chángān",
    "dǎdiànhuà",
    "míngtiān",
    "Zhōngguó",
    "zhōngguórén",
    "rénmínbì",
    "Běijīngdàxué",
    "wǒ xī wàng",
]


def test_segment_pinyin_empty_input_yields_nothing() -> None:
    assert segment_pinyin("") == []
    assert segment_pinyin("", use_delimiter_mode=True) == []


def test_segment_pinyin_keeps_already_separated_syllables() -> None:
    assert segment_pinyin("wǒ xī wàng", False) == ["wǒ", "xī", "wàng"]


def test_segment_pinyin_splits_vowel_consonant_boundary() -> None:
    assert segment_pinyin("xīwàng") == ["xī", "wàng"]


def test_segment_pinyin_keeps_ng_final_before_vowel_initial() -> None:
    assert segment_pinyin("chángān") == ["cháng", "ān"]


def test_segment_pinyin_handles_common_words() -> None:
    assert segment_pinyin("dǎdiànhuà") == ["dǎ", "diàn", "huà"]
    assert segment_pinyin("míngtiān") == ["míng", "tiān"]
    assert segment_pinyin("Zhōngguó") == ["Zhōng", "guó"]
    assert segment_pinyin("zhōngguórén") == ["zhōng", "guó", "rén"]
    assert segment_pinyin("Běijīngdàxué") == ["Běi", "jīng", "dà", "xué"]


def test_segment_pinyin_refines_fused_tokens() -> None:
    """``mínbì`` survives the first pass fused and is split on the second."""

    assert apply_boundary_rules("rénmínbì") == "rén mínbì"
    assert segment_pinyin("rénmínbì") == ["rén", "mín", "bì"]


def test_segment_pinyin_emits_unsplittable_long_tokens_as_is() -> None:
    assert segment_pinyin("zhuāng") == ["zhuāng"]


def test_segment_pinyin_delimiter_mode_skips_heuristics() -> None:
    assert segment_pinyin("xī\xa0wàng", use_delimiter_mode=True) == ["xī", "wàng"]
    assert segment_pinyin("xīwàng", use_delimiter_mode=True) == ["xīwàng"]
    assert segment_pinyin("wǒ xī\xa0wàng", use_delimiter_mode=True) == ["wǒ xī", "wàng"]


def test_segment_pinyin_trims_surrounding_whitespace() -> None:
    assert segment_pinyin("  xīwàng ") == ["xī", "wàng"]
    assert segment_pinyin("   ") == []


def test_segment_pinyin_is_lossless() -> None:
    """Joining syllables should give back the input minus whitespace."""

    for sample in SAMPLES:
        assert "".join(segment_pinyin(sample)) == "".join(sample.split()), sample


def test_segment_pinyin_is_idempotent_on_joined_output() -> None:
    for sample in SAMPLES:
        first = segment_pinyin(sample)
        assert segment_pinyin(" ".join(first)) == first, sample


def test_segment_pinyin_never_raises_on_odd_input() -> None:
    for sample in ["xyz", "123", "ā!?", "ngng", "\t\n", "aaaaaaaaaa"]:
        result = segment_pinyin(sample)
        assert "".join(result) == "".join(sample.split())


def test_is_fused_checks_length_and_tone_count() -> None:
    assert not is_fused("xī")
    assert not is_fused("wàng")
    assert is_fused("zhuāng")
    assert is_fused("xīwà")


def test_boundary_rules_run_in_fixed_order() -> None:
    assert [rule.name for rule in BOUNDARY_RULES] == [
        "vowel_consonant",
        "w_double_initial",
        "n_final",
        "vowel_initial_vowel",
        "ng_vowel",
        "g_r_final",
        "collapse_spaces",
    ]


def test_individual_boundary_rules() -> None:
    rules = {rule.name: rule for rule in BOUNDARY_RULES}

    assert rules["vowel_consonant"].apply("xīwàng") == "xī wàng"
    assert rules["vowel_consonant"].apply("ānrán") == "ānrán"
    assert rules["w_double_initial"].apply("wzhe") == "w zhe"
    assert rules["w_double_initial"].apply("WSHi") == "W SHi"
    assert rules["n_final"].apply("rénmín") == "rén mín"
    assert rules["n_final"].apply("fēngé") == "fēngé"
    assert rules["vowel_initial_vowel"].apply("guórén") == "guó rén"
    assert rules["vowel_initial_vowel"].apply("awa") == "awa"
    assert rules["ng_vowel"].apply("chángān") == "cháng ān"
    assert rules["g_r_final"].apply("zhōngguó") == "zhōng guó"
    assert rules["collapse_spaces"].apply("a   b  c") == "a b c"
