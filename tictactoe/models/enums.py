"""
Core enums for the tic-tac-toe game.
"""
from enum import Enum


class Token(Enum):
    """
    Content of a board cell.

    The values are line weights: a line sums to ``amount * token.value`` only
    when exactly ``amount`` of its cells hold ``token`` and the rest are empty.
    """
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 4

    @property
    def symbol(self) -> str:
        """Single character used in board strings."""
        return _SYMBOLS[self]

    def opponent(self) -> "Token":
        """Get the opposing token (EMPTY maps to itself)."""
        if self == Token.PLAYER_A:
            return Token.PLAYER_B
        if self == Token.PLAYER_B:
            return Token.PLAYER_A
        return Token.EMPTY

    @classmethod
    def from_symbol(cls, symbol: str) -> "Token":
        """Parse a board-string character."""
        for token, char in _SYMBOLS.items():
            if symbol.upper() == char:
                return token
        if symbol == '.':
            return cls.EMPTY
        raise ValueError(f"Invalid token symbol '{symbol}'. Use 'X', 'O', '_' or '.'")


_SYMBOLS = {
    Token.EMPTY: '_',
    Token.PLAYER_A: 'X',
    Token.PLAYER_B: 'O',
}


class GameOutcome(Enum):
    """Represents the current state of the game."""
    IN_PROGRESS = 'in_progress'
    PLAYER_A_WINS = 'player_a_wins'
    PLAYER_B_WINS = 'player_b_wins'
    DRAW = 'draw'


class MoveError(Enum):
    """Reasons a move is rejected by the board."""
    OUT_OF_RANGE = "out of range"
    OCCUPIED = "occupied"
    INVALID_TOKEN = "invalid token"
    BOARD_FULL = "board full"


class LineType(Enum):
    """Kinds of three-cell lines on the board."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
