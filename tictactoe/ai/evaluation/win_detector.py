"""
Win detection system for tic-tac-toe.
"""
from dataclasses import dataclass
from typing import List, Optional

from ...models.enums import Token
from ...models.line import Line, WIN_LINES
from ...models.move import Move
from ...game.board import Board


@dataclass
class WinResult:
    """
    Represents the result of a winning condition check.

    Attributes:
        winner: Token that won
        line: The line that created the win
    """
    winner: Token
    line: Line

    def __post_init__(self):
        """Validate win result parameters."""
        if self.winner == Token.EMPTY:
            raise ValueError("Winner cannot be the empty token")

    def __str__(self) -> str:
        return f"{self.winner.symbol} wins on {self.line}"


class WinDetector:
    """
    Detects completed lines and one-move threats on the board.
    """

    def check_win(self, board: Board) -> Optional[WinResult]:
        """
        Check if the board has a winner.

        Args:
            board: Board to check

        Returns:
            WinResult for the first completed line, or None
        """
        for line in WIN_LINES:
            tokens = {board.cell(c) for c in line.cells}
            if len(tokens) == 1:
                token = tokens.pop()
                if token != Token.EMPTY:
                    return WinResult(winner=token, line=line)
        return None

    def find_immediate_wins(self, board: Board, token: Token) -> List[Move]:
        """
        Find empty cells that would complete a line for ``token``.

        Args:
            board: Current board state
            token: Token to find winning moves for

        Returns:
            Winning cells in row-major order
        """
        test_board = board.copy()
        wins = []
        for move in test_board.empty_cells():
            test_board.apply(move, token)
            if test_board.count_line(token, 3) > 0:
                wins.append(move)
            test_board.undo(move)
        return wins

    def find_forks(self, board: Board, token: Token) -> List[Move]:
        """
        Find empty cells that give ``token`` more than one open two-in-a-row.

        Args:
            board: Current board state
            token: Token to find forking moves for

        Returns:
            Forking cells in row-major order
        """
        test_board = board.copy()
        forks = []
        for move in test_board.empty_cells():
            test_board.apply(move, token)
            if test_board.count_line(token, 2) > 1:
                forks.append(move)
            test_board.undo(move)
        return forks
