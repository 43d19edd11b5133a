"""
Tic-Tac-Toe Engine
==================
A 3x3 tic-tac-toe board with a heuristic negamax opponent, a console match
loop, and a gymnasium environment for training agents against the engine.
"""

from .models import Token, Move, GameOutcome, MoveError
from .game.board import Board
from .ai.engine import AIEngine, AIDecisionError
from .players import Player, HumanPlayer, ArtificialPlayer
from .match import TicTacToe, MatchResult, MatchError

__version__ = "1.0.0"
