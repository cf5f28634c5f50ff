from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from boggle.board import Board, Point
from boggle.dictionary import Dictionary, word_prefixes
from boggle.metrics import StageTimer
from boggle.results import ResultCollector

logger = logging.getLogger("boggle")


class SearchPath:
    """The path currently being traced, shared by every branch of the search.

    Branches extend it with ``push`` and retract with ``pop`` instead of
    copying; ``visited`` is indexed by cell id so membership checks are O(1).
    """

    __slots__ = ("board", "points", "letters", "visited")

    def __init__(self, board: Board, start: Point):
        self.board = board
        self.points: list[Point] = []
        self.letters: list[str] = []
        self.visited = [False] * (board.size * board.size)
        self.push(start)

    def push(self, point: Point):
        self.points.append(point)
        self.letters.append(self.board.letter_at(point))
        self.visited[self.board.cell_id(point)] = True

    def pop(self) -> Point:
        point = self.points.pop()
        self.letters.pop()
        self.visited[self.board.cell_id(point)] = False
        return point

    def __contains__(self, point):
        return self.visited[self.board.cell_id(point)]

    def __len__(self):
        return len(self.points)

    @property
    def string(self) -> str:
        return "".join(self.letters)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]


def continue_path(
    path: SearchPath,
    string: str,
    candidates: frozenset[str],
    prefixes: frozenset[str],
    results: ResultCollector,
):
    """Extend ``path`` along every unused neighbour of its last cell.

    ``string`` is the path's letters joined, passed along so it is not
    rebuilt at each step.
    """
    board = path.board
    for point in board.adjacent_points(path.last):
        if point in path:
            continue
        extended = string + board.letter_at(point)
        if extended not in prefixes:
            continue
        path.push(point)
        if extended in candidates:
            results.add(extended, path.start)
        continue_path(path, extended, candidates, prefixes, results)
        path.pop()


def search(
    board: Board,
    candidates: frozenset[str],
    prefixes: frozenset[str],
    results: ResultCollector | None = None,
) -> ResultCollector:
    """Trace paths from every cell, recording each candidate word reached."""
    if results is None:
        results = ResultCollector()
    for start in board.points():
        path = SearchPath(board, start)
        continue_path(path, path.string, candidates, prefixes, results)
    return results


@dataclass
class SolveResult:
    size: int
    board: list[list[str]]
    words: list[str]
    positions: dict[str, tuple[int, int]] = field(default_factory=dict)
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.words)


def solve(board: Board, dictionary: Dictionary, timer: StageTimer | None = None) -> SolveResult:
    """Find every dictionary word that can be traced on ``board``.

    Returns words longest first, then alphabetical, with the Qu tile shown
    as "qu".
    """
    if timer is None:
        timer = StageTimer()

    with timer.stage("filter"):
        candidates = dictionary.candidates_for(board)

    with timer.stage("prefixes"):
        prefixes = word_prefixes(candidates)

    logger.info("Board %dx%d: %d candidates, %d prefixes", board.size, board.size, len(candidates), len(prefixes))

    with timer.stage("search"):
        results = search(board, candidates, prefixes)

    with timer.stage("sort"):
        words = results.display_words()

    logger.info("Found %d words", len(words))
    return SolveResult(
        size=board.size,
        board=board.rows,
        words=words,
        positions=results.positions(),
        timings=timer.summary(),
    )


def solve_rows(rows: Sequence[str], dictionary: Dictionary, timer: StageTimer | None = None) -> SolveResult:
    """Validate typed rows and solve the resulting board.

    Raises :class:`boggle.errors.InvalidBoardError` for malformed rows.
    """
    return solve(Board.from_rows(rows), dictionary, timer)

