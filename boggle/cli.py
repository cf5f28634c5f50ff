"""Command-line front end: read a board row by row and print every word on it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from boggle.board import Board, normalize_row
from boggle.dictionary import Dictionary
from boggle.errors import BoggleError, RowSizeMismatchError, TooSmallBoardError
from boggle.metrics import StageTimer
from boggle.results import format_report
from boggle.settings import settings
from boggle.solver import solve

logger = logging.getLogger("boggle")

INSTRUCTIONS = 'Enter the letters of the board, row by row, without spaces (for "Qu" enter just "Q"):'


def prompt_rows(ask: Callable[[str], str] = input) -> list[str]:
    """Ask for rows until the board is square, checking each row as it arrives."""
    first = ask("R1: ")
    size = len(normalize_row(first))
    if size < 2:
        raise TooSmallBoardError("board must be at least 2x2")

    rows = [first]
    for row_index in range(1, size):
        row = ask(f"R{row_index + 1}: ")
        if len(normalize_row(row)) != size:
            raise RowSizeMismatchError(row_index)
        rows.append(row)
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find every word on a Boggle board")
    parser.add_argument(
        "--rows",
        nargs="+",
        metavar="ROW",
        help='Board rows, e.g. --rows cats repo bone digs (type "q" for the Qu tile). Prompts when omitted.',
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=settings.DICTIONARY_PATH,
        help="Word list file",
    )
    parser.add_argument(
        "--delimiter",
        default=settings.WORDS_DELIMITER,
        help="Separator between words in the word list (whitespace always separates)",
    )
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG, help="Verbose logging")
    return parser


def main(argv: list[str] | None = None, ask: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.rows:
            rows = args.rows
        else:
            print(INSTRUCTIONS)
            rows = prompt_rows(ask)
        board = Board.from_rows(rows)
        dictionary = Dictionary.from_path(args.dictionary, args.delimiter)
    except (BoggleError, EOFError) as e:
        print(f"Error: {e}" if str(e) else "Error: no board entered")
        return 1

    timer = StageTimer()
    result = solve(board, dictionary, timer)
    print(format_report(result.words, timer.elapsed))
    logger.debug("stage timings: %s", result.timings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
