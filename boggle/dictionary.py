from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from boggle.board import QU_PLACEHOLDER, Board
from boggle.errors import DictionaryLoadError

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 4


def normalize_word(word: str) -> str:
    """Lower-case a dictionary word and collapse "qu" into the placeholder symbol."""
    return word.strip().lower().replace("qu", QU_PLACEHOLDER)


def display_length(word: str) -> int:
    """Letter count of a normalized word as a player would count it ("qu" is two)."""
    return len(word) + word.count(QU_PLACEHOLDER)


def load_words(path: str | Path, delimiter: str = ",") -> tuple[str, ...]:
    """Read and normalize the reference word list.

    Tokens are separated by ``delimiter`` (matched as a whole string) and by
    any whitespace, so both the comma-separated list and a one-word-per-line
    file load the same way. A leading byte-order mark is ignored.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except OSError as e:
        raise DictionaryLoadError(f"Could not read word list {path}: {e}") from e

    splitter = re.compile(rf"(?:{re.escape(delimiter)}|\s)+") if delimiter else re.compile(r"\s+")
    words = tuple(w for w in (normalize_word(tok) for tok in splitter.split(text)) if w)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def word_candidates(words: Iterable[str], board: Board) -> frozenset[str]:
    """Words spelled only with the board's letters, 4 to size² letters long.

    Length is counted as displayed, so a Qu tile contributes two letters.
    Letter counts are not compared; the search rejects words that would need
    a cell twice.
    """
    alphabet = board.alphabet
    max_length = board.size * board.size
    return frozenset(
        word for word in words
        if MIN_WORD_LENGTH <= display_length(word) <= max_length
        and all(ch in alphabet for ch in word)
    )


def word_prefixes(candidates: Iterable[str]) -> frozenset[str]:
    """Every non-empty prefix of every candidate, including the word itself."""
    prefixes: set[str] = set()
    for word in candidates:
        for i in range(1, len(word) + 1):
            prefixes.add(word[:i])
    return frozenset(prefixes)


class Dictionary:
    """Read-only reference word list, loaded once and shared across solves."""

    __slots__ = ("words", "_lookup")

    def __init__(self, words: Iterable[str]):
        self.words: tuple[str, ...] = tuple(words)
        self._lookup = frozenset(self.words)

    @classmethod
    def from_path(cls, path: str | Path, delimiter: str = ",") -> Dictionary:
        return cls(load_words(path, delimiter))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        """Build from raw words, normalizing them the same way a loaded file is."""
        return cls(w for w in (normalize_word(word) for word in words) if w)

    def candidates_for(self, board: Board) -> frozenset[str]:
        return word_candidates(self.words, board)

    def __len__(self):
        return len(self.words)

    def __contains__(self, word):
        return normalize_word(word) in self._lookup
