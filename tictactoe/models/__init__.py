# Data models and enums
from .enums import Token, GameOutcome, MoveError, LineType
from .move import Move
from .line import Line, WIN_LINES

__all__ = ['Token', 'GameOutcome', 'MoveError', 'LineType', 'Move', 'Line', 'WIN_LINES']
