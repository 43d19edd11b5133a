"""
Heuristic negamax search for the tic-tac-toe AI.

Every empty cell is tried in row-major order. After a hypothetical move the
static evaluator scores the position; only when it reports nothing decisive
(and the board is not full) does the search recurse for the opponent and
negate the result. The scores are therefore heuristic-tinted, not the exact
game-theoretic values a full minimax would produce.
"""
import time
from dataclasses import dataclass
from typing import Optional

from ...models.enums import Token
from ...models.move import Move
from ...game.board import Board
from ..evaluation.heuristic import HeuristicEvaluator


@dataclass
class SearchNode:
    """
    A candidate move and its score from the mover's perspective.

    Attributes:
        move: The candidate move, None if the board had no empty cell
        value: Score of the move
    """
    move: Optional[Move]
    value: int


@dataclass
class SearchResult:
    """
    Result of a top-level search.

    Attributes:
        best_move: The move chosen by the search
        score: Score of the chosen move
        nodes_evaluated: Number of hypothetical moves applied
        heuristic_cutoffs: Number of branches stopped by a non-zero evaluation
        time_elapsed: Time taken for the search in seconds
    """
    best_move: Optional[Move]
    score: int
    nodes_evaluated: int
    heuristic_cutoffs: int
    time_elapsed: float


class HeuristicSearch:
    """
    Recursive negamax search using the heuristic evaluator as a cutoff.
    """

    # Below every attainable score
    NO_MOVE_VALUE = -10000

    def __init__(self, evaluator: Optional[HeuristicEvaluator] = None):
        """Initialize the search algorithm."""
        self.evaluator = evaluator or HeuristicEvaluator()

        # Search statistics
        self.nodes_evaluated = 0
        self.heuristic_cutoffs = 0

    def search(self, board: Board, token: Token) -> SearchResult:
        """
        Find the best move for ``token`` on a private copy of ``board``.

        Args:
            board: Current board state (left untouched)
            token: Token to move

        Returns:
            SearchResult with the chosen move and search statistics
        """
        start_time = time.time()
        self.nodes_evaluated = 0
        self.heuristic_cutoffs = 0

        node = self.best_move(board.copy(), token)

        return SearchResult(
            best_move=node.move,
            score=node.value,
            nodes_evaluated=self.nodes_evaluated,
            heuristic_cutoffs=self.heuristic_cutoffs,
            time_elapsed=time.time() - start_time,
        )

    def best_move(self, board: Board, token: Token) -> SearchNode:
        """
        Negamax step over every empty cell.

        ``board`` is explored in place through apply/undo and is restored
        before returning. Among moves with the same score the first one in
        row-major order is kept.

        Args:
            board: Board to explore
            token: Token to move

        Returns:
            SearchNode with the best move and its score
        """
        node = SearchNode(move=None, value=self.NO_MOVE_VALUE)

        for row in range(Board.SIZE):
            for col in range(Board.SIZE):
                move = Move(row, col)
                if not board.is_empty(move):
                    continue

                board.apply(move, token)
                self.nodes_evaluated += 1

                value = self.evaluator.evaluate(board, token)
                if value == HeuristicEvaluator.NEUTRAL_SCORE and not board.is_draw():
                    value = -self.best_move(board, board.opponent(token)).value
                elif value != HeuristicEvaluator.NEUTRAL_SCORE:
                    self.heuristic_cutoffs += 1

                board.undo(move)

                if value > node.value:
                    node = SearchNode(move=move, value=value)

        return node
