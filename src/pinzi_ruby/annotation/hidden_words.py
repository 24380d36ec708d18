"""Repository for words whose ruby pinyin should be suppressed."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_HIDDEN_WORDS = frozenset({"上帝", "最初"})


@dataclass(frozen=True)
class HiddenWordsRepository:
    """Lookup repository for the hide-pinyin word list.

    The list is plain text with one Hanzi word per line. Callers load it once
    and pass the resulting set to :func:`annotate_row`; reloading the
    repository is the refresh path when the file changes.
    """

    path: Path

    def load(self) -> frozenset[str]:
        """Load hidden words from the configured file.

        Blank lines and ``#`` comments are ignored. Only the first
        tab-separated cell of each line is used so the file can carry notes.

        Returns:
            Hidden words, or :data:`DEFAULT_HIDDEN_WORDS` when the file is absent.
        """

        if not self.path.exists():
            return DEFAULT_HIDDEN_WORDS

        words: set[str] = set()
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                word = line.split("\t", 1)[0].strip()
                if word:
                    words.add(word)
        return frozenset(words)
