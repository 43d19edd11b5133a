"""
AI Engine controller for tic-tac-toe.

This module wraps the heuristic search: it validates the request, searches on
a private copy of the board, explains the chosen move and keeps performance
statistics.
"""
import time
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass

from ..models.enums import Token
from ..models.move import Move
from ..game.board import Board
from .search.negamax import HeuristicSearch, SearchResult
from .evaluation.win_detector import WinDetector

PACKAGE_LOGGER = 'tictactoe'


class AIDecisionError(Exception):
    """Exception raised when AI fails to make a decision."""

    def __init__(self, message: str, board: Optional[Board]):
        super().__init__(message)
        self.board = board


@dataclass
class AIPerformanceMetrics:
    """
    Performance metrics for AI decision making.

    Attributes:
        move_time: Time taken to select the move (seconds)
        nodes_evaluated: Number of hypothetical moves applied
        heuristic_cutoffs: Number of branches stopped by the evaluator
        evaluation_score: Final score of the selected move
    """
    move_time: float
    nodes_evaluated: int
    heuristic_cutoffs: int
    evaluation_score: int


@dataclass
class AIDecision:
    """
    Complete AI decision with move and metadata.

    Attributes:
        move: Selected move
        token: Token the move is for
        score: Search score of the move
        metrics: Performance metrics for this decision
        reasoning: Human-readable explanation of the decision
    """
    move: Move
    token: Token
    score: int
    metrics: AIPerformanceMetrics
    reasoning: str


class AIEngine:
    """
    Main AI controller for the search-driven player.

    The live board is never touched: every search runs on a copy.
    """

    def __init__(self, enable_logging: bool = False, track_history: bool = True):
        """
        Initialize the AI engine.

        Args:
            enable_logging: Whether to attach a console handler for decision logging
            track_history: Whether to keep every decision in decision_history
        """
        self.enable_logging = enable_logging
        self.track_history = track_history

        # Initialize components
        self.search_algorithm = HeuristicSearch()
        self.win_detector = WinDetector()

        # Performance tracking
        self.decision_history: List[AIDecision] = []
        self.total_decisions = 0
        self.total_time = 0.0
        self.total_nodes = 0

        self.logger = logging.getLogger(__name__)
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up logging for AI performance monitoring."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.INFO)

        # Create console handler if none exists
        if not package_logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)

    def select_move(self, board: Board, token: Token) -> AIDecision:
        """
        Select the best move for the given token and board state.

        Args:
            board: Current board state
            token: Token to select a move for

        Returns:
            AIDecision with the selected move and performance metrics

        Raises:
            AIDecisionError: If no move can be chosen
        """
        start_time = time.time()

        if board is None:
            raise AIDecisionError("Board cannot be None", board)

        if not isinstance(token, Token) or token == Token.EMPTY:
            raise AIDecisionError(f"Invalid token: {token!r}", board)

        win_result = self.win_detector.check_win(board)
        if win_result:
            raise AIDecisionError(f"Game is already over, winner: {win_result.winner.symbol}", board)

        if board.is_draw():
            raise AIDecisionError("No legal moves available", board)

        search_result = self.search_algorithm.search(board, token)
        if search_result.best_move is None:
            raise AIDecisionError("Search returned no move", board)

        move_time = time.time() - start_time
        metrics = AIPerformanceMetrics(
            move_time=move_time,
            nodes_evaluated=search_result.nodes_evaluated,
            heuristic_cutoffs=search_result.heuristic_cutoffs,
            evaluation_score=search_result.score,
        )

        decision = AIDecision(
            move=search_result.best_move,
            token=token,
            score=search_result.score,
            metrics=metrics,
            reasoning=self._generate_reasoning(search_result, board, token),
        )

        self.total_decisions += 1
        self.total_time += move_time
        self.total_nodes += metrics.nodes_evaluated
        if self.track_history:
            self.decision_history.append(decision)
        self._log_decision(decision)
        return decision

    def _generate_reasoning(self, search_result: SearchResult, board: Board, token: Token) -> str:
        """
        Generate human-readable reasoning for the AI decision.

        Args:
            search_result: Result from the search algorithm
            board: Board the move was chosen for
            token: Token making the move

        Returns:
            Human-readable explanation of the decision
        """
        move = search_result.best_move

        if move in self.win_detector.find_immediate_wins(board, token):
            reason = "Winning move"
        elif move in self.win_detector.find_immediate_wins(board, token.opponent()):
            reason = "Blocking opponent's win"
        elif move in self.win_detector.find_forks(board, token):
            reason = "Creates a fork"
        else:
            reason = "Positional move"

        return f"{reason}, score {search_result.score}"

    def _log_decision(self, decision: AIDecision):
        """Log AI decision for performance monitoring."""
        self.logger.info(
            "Move: %s, Token: %s, Time: %.3fs, Nodes: %d, Cutoffs: %d, Score: %d",
            decision.move,
            decision.token.symbol,
            decision.metrics.move_time,
            decision.metrics.nodes_evaluated,
            decision.metrics.heuristic_cutoffs,
            decision.metrics.evaluation_score,
        )

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of AI performance statistics.

        Returns:
            Dictionary with performance metrics
        """
        if self.total_decisions == 0:
            return {
                'total_decisions': 0,
                'average_time': 0.0,
                'average_nodes': 0.0,
                'total_nodes': 0
            }

        return {
            'total_decisions': self.total_decisions,
            'average_time': self.total_time / self.total_decisions,
            'average_nodes': self.total_nodes / self.total_decisions,
            'total_nodes': self.total_nodes
        }

    def reset_performance_tracking(self):
        """Reset all performance tracking data."""
        self.decision_history.clear()
        self.total_decisions = 0
        self.total_time = 0.0
        self.total_nodes = 0
