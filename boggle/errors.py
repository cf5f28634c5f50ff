"""Exceptions raised while building a board or loading the word list."""


class BoggleError(Exception):
    """Base exception for solver failures."""


class InvalidBoardError(BoggleError):
    """Raised when typed rows cannot form a square board."""


class TooSmallBoardError(InvalidBoardError):
    """Raised when the first row has fewer than two letters."""


class RowSizeMismatchError(InvalidBoardError):
    """Raised when a row's length differs from the first row's."""

    def __init__(self, row_index: int):
        self.row_index = row_index
        super().__init__(f"incorrect size for R{row_index + 1}")


class RowCountError(InvalidBoardError):
    """Raised when the number of rows does not match the row length."""


class InvalidLetterError(InvalidBoardError):
    """Raised when a row contains something other than letters."""


class DictionaryLoadError(BoggleError):
    """Raised when the word list cannot be read."""
