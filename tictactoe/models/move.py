"""
Move model for tic-tac-toe game.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    A cell on the 3x3 board, addressed 0-based.

    Coordinates are not validated here; the board decides whether a move is
    in range so that bad input can still be represented and reported.

    Attributes:
        row: Row index (0-2 for a legal move)
        col: Column index (0-2 for a legal move)
    """
    row: int
    col: int

    @classmethod
    def from_user(cls, row: int, col: int) -> "Move":
        """Build a move from the 1-based coordinates a person types."""
        return cls(row - 1, col - 1)

    @classmethod
    def from_index(cls, index: int) -> "Move":
        """Build a move from a row-major cell index (0-8)."""
        return cls(index // 3, index % 3)

    @property
    def index(self) -> int:
        """Row-major cell index."""
        return self.row * 3 + self.col

    def to_user(self) -> tuple:
        """1-based (row, col) pair."""
        return self.row + 1, self.col + 1

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
