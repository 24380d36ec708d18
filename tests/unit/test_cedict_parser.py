"""Unit tests for CC-CEDICT parsing and repository indexing."""

from __future__ import annotations

from pathlib import Path

import pytest

from pinzi_ruby.cedict.parser import normalize_cedict_syllable, parse_cedict_lines
from pinzi_ruby.cedict.repository import CedictRepository


def test_parse_cedict_lines_keeps_both_forms_and_glosses() -> None:
    entries = parse_cedict_lines(
        iter(
            [
                "# comment\n",
                "籃 篮 [lan2] /basket (receptacle)/basket (in basketball)/\n",
                "not a dictionary line\n",
                "綠 绿 [lu:4] /green/\n",
                "A A [A] /letter/\n",
            ]
        )
    )

    assert len(entries) == 3
    assert entries[0].traditional == "籃"
    assert entries[0].simplified == "篮"
    assert entries[0].glosses == ("basket (receptacle)", "basket (in basketball)")
    assert entries[0].definition == "basket (receptacle); basket (in basketball)"
    assert entries[1].pinyin_tokens == ("lü4",)
    assert entries[2].pinyin_tokens == ("A",)


def test_parse_cedict_lines_keeps_letters_and_name_separators() -> None:
    entries = parse_cedict_lines(
        [
            "T恤 T恤 [T xu4] /T-shirt/",
            "卡拉OK 卡拉OK [ka3 la1 O K] /karaoke/",
            "約翰·克里斯 约翰·克里斯 [Yue1 han4 · Ke4 li3 si1] /John Chris/",
        ]
    )

    assert [entry.pinyin_tokens for entry in entries] == [
        ("T", "xu4"),
        ("ka3", "la1", "O", "K"),
        ("yue1", "han4", "·", "ke4", "li3", "si1"),
    ]


def test_normalize_cedict_syllable_rejects_untoned_tokens() -> None:
    assert normalize_cedict_syllable("Lu:4") == "lü4"
    assert normalize_cedict_syllable("nv3") == "nü3"
    assert normalize_cedict_syllable("ma") is None
    assert normalize_cedict_syllable("·") is None


def test_cedict_repository_indexes_simplified_and_traditional(tmp_path: Path) -> None:
    path = tmp_path / "mini.u8"
    path.write_text(
        "愛 爱 [ai4] /to love/\n愛 爱 [ai4] /to love/\n希望 希望 [xi1 wang4] /to hope/\n",
        encoding="utf-8",
    )
    repo = CedictRepository(path)

    assert len(repo.entries) == 2
    assert repo.entries_for_word("爱") == repo.entries_for_word("愛")
    assert len(repo.entries_for_word("希望")) == 1
    assert repo.entries_for_word("龘") == ()


def test_cedict_repository_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CedictRepository(tmp_path / "missing.u8").entries
