"""
Match loop for tic-tac-toe.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .models.enums import GameOutcome, MoveError
from .models.move import Move
from .game.board import Board
from .players import Player

logger = logging.getLogger(__name__)


class MatchError(Exception):
    """Exception raised when a match cannot continue."""


@dataclass
class MatchResult:
    """
    Final state of a match.

    Attributes:
        outcome: How the match ended
        winner: The winning player, None for a draw
        turns: Number of moves applied
        moves: Applied moves with the name of the player who made them
    """
    outcome: GameOutcome
    winner: Optional[Player] = None
    turns: int = 0
    moves: List[Tuple[str, Move]] = field(default_factory=list)


class TicTacToe:
    """
    Alternates two players on one board until someone wins or the board fills.

    Game flow per turn:
    1. Ask the current player for a move
    2. Apply it (a rejected move is reported and the same player asks again)
    3. Check for a win, then for a draw
    4. Hand over to the other player
    """

    DEFAULT_MAX_REJECTIONS = 10

    def __init__(self, players: Sequence[Player], board: Optional[Board] = None,
                 output_fn: Callable[[str], None] = print,
                 show_board: bool = False,
                 max_rejections: int = DEFAULT_MAX_REJECTIONS):
        """
        Initialize the match.

        Args:
            players: Exactly two players; the first one moves first
            board: Starting board (default: empty board)
            output_fn: Sink for announcements
            show_board: Whether to print the board after every move
            max_rejections: Consecutive rejected moves tolerated from one player
        """
        if len(players) != 2:
            raise ValueError(f"A match needs exactly 2 players, got {len(players)}")
        if players[0].token == players[1].token:
            raise ValueError("Players must use different tokens")
        if max_rejections < 1:
            raise ValueError("Max rejections must be at least 1")

        self.players = list(players)
        self.board = board if board is not None else Board()
        self.output_fn = output_fn
        self.show_board = show_board
        self.max_rejections = max_rejections

    def check_winner(self, player: Player) -> bool:
        return self.board.count_line(player.token, 3) > 0

    def is_draw(self) -> bool:
        return self.board.is_draw()

    def run(self) -> MatchResult:
        """
        Play the match to the end.

        Returns:
            MatchResult describing how the match ended

        Raises:
            MatchError: If the board is already finished, a player keeps
                producing illegal moves, or a move fails a board guard that a
                player cannot trip by itself
        """
        if self.board.is_game_over():
            raise MatchError(f"Game is already over: {self.board.outcome().value}")

        result = MatchResult(outcome=GameOutcome.IN_PROGRESS)
        player_index = 0
        rejections = 0

        while True:
            player = self.players[player_index]
            move = player.turn(self.board)

            validation = self.board.validate_move(move, player.token)
            if not validation.is_valid:
                if validation.error in (MoveError.INVALID_TOKEN, MoveError.BOARD_FULL):
                    raise MatchError(f"{player.name}: {validation.error_message}")

                rejections += 1
                logger.warning("%s played an illegal move: %s", player.name, validation.error_message)
                self.output_fn(f"{player.name}: cell {move} is {validation.error.value}.")
                if rejections > self.max_rejections:
                    raise MatchError(
                        f"{player.name} made {rejections} illegal moves in a row")
                continue

            rejections = 0
            self.board.apply(move, player.token)
            result.turns += 1
            result.moves.append((player.name, move))
            if self.show_board:
                self.output_fn(str(self.board))
                self.output_fn("")

            if self.check_winner(player):
                result.outcome = self.board.outcome()
                result.winner = player
                self.output_fn(f"{player.name} won!")
                logger.info("%s won after %d turns", player.name, result.turns)
                return result

            if self.is_draw():
                result.outcome = GameOutcome.DRAW
                self.output_fn("Game ends in draw!")
                logger.info("Draw after %d turns", result.turns)
                return result

            player_index = (player_index + 1) % 2
