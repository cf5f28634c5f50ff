from __future__ import annotations

from boggle.board import QU_PLACEHOLDER, Point


def expand_qu(word: str) -> str:
    return word.replace(QU_PLACEHOLDER, "qu")


def _sort_key(word: str) -> tuple[int, str]:
    shown = expand_qu(word)
    return -len(shown), shown


class ResultCollector:
    """Deduplicates words found during the search.

    The same word is often reachable along several paths; it is kept once,
    together with the topmost-leftmost cell any of those paths starts from.
    """

    def __init__(self):
        self._starts: dict[str, Point] = {}

    def add(self, word: str, start: Point):
        known = self._starts.get(word)
        if known is None or (start.y, start.x) < (known.y, known.x):
            self._starts[word] = start

    def __contains__(self, word):
        return word in self._starts

    def __len__(self):
        return len(self._starts)

    def finalize(self) -> list[str]:
        """Found words, longest first, then alphabetical (as displayed)."""
        return sorted(self._starts, key=_sort_key)

    def display_words(self) -> list[str]:
        return [expand_qu(w) for w in self.finalize()]

    def positions(self) -> dict[str, tuple[int, int]]:
        """Display word -> (row, col) of its topmost-leftmost starting cell."""
        return {expand_qu(w): (p.y, p.x) for w, p in self._starts.items()}


def format_report(words: list[str], elapsed: float | None = None) -> str:
    if elapsed is None:
        header = f"{len(words)} word(s) found:"
    else:
        header = f"{len(words)} word(s) found in {elapsed:.3f} seconds:"
    return "\n".join([header, *words])
