from __future__ import annotations

from typing import Iterator, NamedTuple, Sequence

from boggle.errors import (
    InvalidLetterError,
    RowCountError,
    RowSizeMismatchError,
    TooSmallBoardError,
)

# Stands in for the two-letter "Qu" tile so every cell holds exactly one symbol
QU_PLACEHOLDER = "_"


class Point(NamedTuple):
    x: int
    y: int


def normalize_row(text: str) -> str:
    """Lower-case a typed row and swap each "q" (the Qu tile) for the placeholder."""
    row = text.strip().lower()
    for ch in row:
        if not ch.isalpha():
            raise InvalidLetterError(f"invalid letter {ch!r} in row {text.strip()!r}")
    return row.replace("q", QU_PLACEHOLDER)


class Board:
    """Square grid of single-symbol letters, stored flat in row-major order."""

    __slots__ = ("_letters", "_size", "_neighbors")

    def __init__(self, letters: str, size: int):
        if size < 2:
            raise TooSmallBoardError("board must be at least 2x2")
        if len(letters) != size * size:
            raise RowCountError(f"board of size {size} needs {size * size} letters, got {len(letters)}")
        self._letters = letters
        self._size = size

        # Precompute adjacency lists, indexed by cell id
        neighbors: list[frozenset[Point]] = []
        for idx in range(size * size):
            y, x = divmod(idx, size)
            adj = set()
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < size and 0 <= ny < size:
                        adj.add(Point(nx, ny))
            neighbors.append(frozenset(adj))
        self._neighbors = tuple(neighbors)

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def size(self) -> int:
        return self._size

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from typed rows; the first row fixes the size."""
        if not rows:
            raise TooSmallBoardError("board must be at least 2x2")

        first = normalize_row(rows[0])
        size = len(first)
        if size < 2:
            raise TooSmallBoardError("board must be at least 2x2")

        letters = [first]
        for row_index, text in enumerate(rows[1:], start=1):
            row = normalize_row(text)
            if len(row) != size:
                raise RowSizeMismatchError(row_index)
            letters.append(row)

        if len(letters) != size:
            raise RowCountError(f"board of size {size} needs {size} rows, got {len(letters)}")
        return cls("".join(letters), size)

    def cell_id(self, point: Point) -> int:
        return point.y * self.size + point.x

    def letter_at(self, point: Point) -> str:
        return self.letters[self.cell_id(point)]

    def adjacent_points(self, point: Point) -> frozenset[Point]:
        return self._neighbors[self.cell_id(point)]

    def points(self) -> Iterator[Point]:
        for y in range(self.size):
            for x in range(self.size):
                yield Point(x, y)

    @property
    def alphabet(self) -> frozenset[str]:
        return frozenset(self.letters)

    @property
    def rows(self) -> list[list[str]]:
        """Display rows, with the Qu tile shown as "qu"."""
        return [
            ["qu" if ch == QU_PLACEHOLDER else ch for ch in self.letters[y * self.size:(y + 1) * self.size]]
            for y in range(self.size)
        ]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.letters == other.letters

    def __repr__(self):
        return f"Board(letters={self.letters!r}, size={self.size})"
