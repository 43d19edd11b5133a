"""
3x3 board representation for tic-tac-toe game.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.enums import Token, GameOutcome, MoveError
from ..models.line import WIN_LINES
from ..models.move import Move

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class Board:
    """
    The tic-tac-toe board: a 3x3 grid of tokens and a count of empty cells.

    After construction the grid only changes through ``apply`` and ``undo``,
    which are exact inverses of each other. The search relies on this to
    backtrack without copying the board at every level.
    """

    SIZE = 3
    TOTAL_CELLS = SIZE * SIZE

    def __init__(self):
        """Initialize an empty board."""
        self.grid: List[List[Token]] = []
        self.left = self.TOTAL_CELLS
        self.clear()

    def clear(self):
        """Reset the board to the empty state."""
        self.grid = [[Token.EMPTY for _ in range(self.SIZE)] for _ in range(self.SIZE)]
        self.left = self.TOTAL_CELLS

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.grid = [list(row) for row in self.grid]
        new_board.left = self.left
        return new_board

    @staticmethod
    def opponent(token: Token) -> Token:
        """Map PLAYER_A to PLAYER_B and back; EMPTY stays EMPTY."""
        return token.opponent()

    @classmethod
    def is_in_range(cls, move: Move) -> bool:
        """Check that both coordinates lie in [0, 3)."""
        return 0 <= move.row < cls.SIZE and 0 <= move.col < cls.SIZE

    def is_empty(self, move: Move) -> bool:
        """
        Check if a cell is empty.

        The caller must range-check the move first.
        """
        return self.grid[move.row][move.col] == Token.EMPTY

    def is_draw(self) -> bool:
        """Check if no empty cells are left."""
        return self.left == 0

    def cell(self, move: Move) -> Token:
        """Get the token at a cell."""
        if not self.is_in_range(move):
            raise ValueError(f"Cell {move} is out of range")
        return self.grid[move.row][move.col]

    def empty_cells(self) -> List[Move]:
        """Get all empty cells in row-major order."""
        return [Move(row, col)
                for row in range(self.SIZE)
                for col in range(self.SIZE)
                if self.grid[row][col] == Token.EMPTY]

    def count_line(self, token: Token, amount: int) -> int:
        """
        Count lines holding exactly ``amount`` of ``token`` with the rest empty.

        With ``amount=3`` a positive count means ``token`` has won; with
        ``amount=2`` it counts open two-in-a-row threats.

        Args:
            token: Non-empty token to count
            amount: Number of cells of the line that must hold ``token`` (0-3)

        Returns:
            Number of matching lines among the 8 rows, columns and diagonals
        """
        if token == Token.EMPTY:
            raise ValueError("Cannot count lines for the empty token")
        if not (0 <= amount <= self.SIZE):
            raise ValueError(f"Amount must be between 0 and {self.SIZE}, got {amount}")

        count = 0
        for line in WIN_LINES:
            cells = [self.grid[c.row][c.col] for c in line.cells]
            if cells.count(token) == amount and cells.count(Token.EMPTY) == self.SIZE - amount:
                count += 1
        return count

    def validate_move(self, move: Move, token: Optional[Token] = None) -> ValidationResult:
        """
        Validate if a move is legal.

        Args:
            move: Move to validate
            token: Token that would be placed, or None to check the cell only

        Returns:
            ValidationResult indicating if move is valid
        """
        if not self.is_in_range(move):
            return ValidationResult(False, MoveError.OUT_OF_RANGE,
                                    f"Cell {move} is out of range")

        if not self.is_empty(move):
            return ValidationResult(False, MoveError.OCCUPIED,
                                    f"Cell {move} is already occupied by {self.cell(move).symbol}")

        if token is not None and token == Token.EMPTY:
            return ValidationResult(False, MoveError.INVALID_TOKEN,
                                    "Cannot place the empty token")

        if self.is_draw():
            return ValidationResult(False, MoveError.BOARD_FULL, "Board is full")

        return ValidationResult(True)

    def apply(self, move: Move, token: Token) -> bool:
        """
        Place a token on the board.

        Args:
            move: Cell to occupy
            token: Token to place

        Returns:
            True if the move was applied, False if it was rejected
        """
        result = self.validate_move(move, token)
        if not result.is_valid:
            if result.error in (MoveError.INVALID_TOKEN, MoveError.BOARD_FULL):
                logger.warning("Rejected move %s for %s: %s", move, token.name, result.error_message)
            else:
                logger.debug("Rejected move %s for %s: %s", move, token.name, result.error_message)
            return False

        self.grid[move.row][move.col] = token
        self.left -= 1
        return True

    def undo(self, move: Move) -> bool:
        """
        Empty a previously occupied cell.

        Returns:
            True if the cell was cleared, False if it was out of range or empty
        """
        if not self.is_in_range(move):
            return False
        if self.is_empty(move):
            return False

        self.grid[move.row][move.col] = Token.EMPTY
        self.left += 1
        return True

    def winner(self) -> Optional[Token]:
        """Get the token holding a full line, if any."""
        for token in (Token.PLAYER_A, Token.PLAYER_B):
            if self.count_line(token, 3) > 0:
                return token
        return None

    def outcome(self) -> GameOutcome:
        """Classify the current position."""
        winner = self.winner()
        if winner == Token.PLAYER_A:
            return GameOutcome.PLAYER_A_WINS
        if winner == Token.PLAYER_B:
            return GameOutcome.PLAYER_B_WINS
        if self.is_draw():
            return GameOutcome.DRAW
        return GameOutcome.IN_PROGRESS

    def is_game_over(self) -> bool:
        return self.outcome() != GameOutcome.IN_PROGRESS

    def to_string(self) -> str:
        """Row-major 9-character encoding of the board."""
        return ''.join(token.symbol for row in self.grid for token in row)

    @classmethod
    def from_string(cls, board_string: str) -> 'Board':
        """
        Parse a board string into a Board.

        Args:
            board_string: 9 symbols ('X', 'O', '_' or '.') in row-major order;
                whitespace and '|' separators are ignored

        Returns:
            Board with the given cells

        Raises:
            ValueError: If the string has the wrong length or bad characters
        """
        symbols = [ch for ch in board_string if not ch.isspace() and ch != '|']
        if len(symbols) != cls.TOTAL_CELLS:
            raise ValueError(
                f"Board string must contain exactly {cls.TOTAL_CELLS} cells, got {len(symbols)}")

        board = cls()
        for index, symbol in enumerate(symbols):
            token = Token.from_symbol(symbol)
            if token != Token.EMPTY:
                board.apply(Move.from_index(index), token)
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self.left == other.left

    def __str__(self) -> str:
        """String representation of the board."""
        rows = []
        for row in self.grid:
            rows.append(" " + " | ".join(
                ' ' if token == Token.EMPTY else token.symbol for token in row))
        return "\n---+---+---\n".join(rows)
