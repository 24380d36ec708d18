"""Repository for querying CC-CEDICT entries by written form."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
from pathlib import Path

from pinzi_ruby.cedict.parser import CedictEntry, parse_cedict_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CedictRepository:
    """Read-only repository over one CC-CEDICT-compatible ``.u8`` file.

    The file is parsed on first access and indexed under both simplified and
    traditional forms. Instances are path-scoped; build a new one to pick up
    changes on disk.
    """

    path: Path

    @cached_property
    def entries(self) -> tuple[CedictEntry, ...]:
        """Load and cache entries from disk, dropping exact duplicates.

        Returns:
            Immutable tuple of parsed entries in file order.

        Raises:
            FileNotFoundError: If the configured CEDICT file does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"CC-CEDICT file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            parsed = parse_cedict_lines(handle)

        deduped = tuple(dict.fromkeys(parsed))
        logger.debug("Loaded %d CC-CEDICT entries from %s", len(deduped), self.path)
        return deduped

    @cached_property
    def entries_by_word(self) -> dict[str, tuple[CedictEntry, ...]]:
        """Build and cache a word-indexed entry map covering both forms.

        Returns:
            Dictionary mapping Hanzi words to entry tuples in file order.
        """

        mapping: dict[str, list[CedictEntry]] = {}
        for entry in self.entries:
            mapping.setdefault(entry.simplified, []).append(entry)
            if entry.traditional != entry.simplified:
                mapping.setdefault(entry.traditional, []).append(entry)
        return {word: tuple(items) for word, items in mapping.items()}

    def entries_for_word(self, word: str) -> tuple[CedictEntry, ...]:
        """Return entries for a simplified or traditional word.

        Args:
            word: Hanzi word key.

        Returns:
            Tuple of entries for ``word``; empty tuple when absent.
        """

        return self.entries_by_word.get(word, ())
