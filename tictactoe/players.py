"""
Players for tic-tac-toe: a person at the console or the search engine.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .models.enums import Token
from .models.move import Move
from .game.board import Board
from .ai.engine import AIEngine

logger = logging.getLogger(__name__)


class Player(ABC):
    """
    A source of moves for one side of the match.

    A player owns its token and display name, never the board.
    """

    def __init__(self, token: Token, name: str):
        if token == Token.EMPTY:
            raise ValueError("A player cannot use the empty token")
        self.token = token
        self.name = name

    @abstractmethod
    def turn(self, board: Board) -> Move:
        """Produce the next move for the given board."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.token.name}, {self.name!r})"


class HumanPlayer(Player):
    """
    Reads 1-based row and column numbers and re-prompts until the move is legal.
    """

    def __init__(self, token: Token, name: str,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        super().__init__(token, name)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def turn(self, board: Board) -> Move:
        while True:
            move = self._read_move()
            if move is not None and self._check(board, move):
                return move

    def _read_number(self, prompt: str) -> Optional[int]:
        raw = self.input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            self.output_fn("Wrong input! Please enter a number.")
            return None

    def _read_move(self) -> Optional[Move]:
        row = self._read_number("Insert row: ")
        if row is None:
            return None
        col = self._read_number("Insert col: ")
        if col is None:
            return None
        return Move.from_user(row, col)

    def _check(self, board: Board, move: Move) -> bool:
        result = board.validate_move(move)
        if not result.is_valid:
            row, col = move.to_user()
            self.output_fn(f"Wrong input! Cell ({row}, {col}) is {result.error.value}.")
            return False
        return True


class ArtificialPlayer(Player):
    """Computer opponent backed by the heuristic search engine."""

    def __init__(self, token: Token, name: str, engine: Optional[AIEngine] = None):
        super().__init__(token, name)
        self.engine = engine or AIEngine()

    def turn(self, board: Board) -> Move:
        decision = self.engine.select_move(board, self.token)
        logger.debug("%s chose %s (%s)", self.name, decision.move, decision.reasoning)
        return decision.move
