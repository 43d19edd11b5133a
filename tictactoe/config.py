"""
Match configuration for tic-tac-toe.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .models.enums import Token
from .ai.engine import AIEngine
from .players import Player, HumanPlayer, ArtificialPlayer
from .match import TicTacToe


class PlayerKind(Enum):
    """Who controls a side."""
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass
class GameConfig:
    """
    Settings for one match.

    Attributes:
        player_a_name: Display name of the side moving first (X)
        player_b_name: Display name of the side moving second (O)
        player_a_kind: Who controls player A
        player_b_kind: Who controls player B
        show_board: Print the board after every move
        max_rejections: Consecutive illegal moves tolerated from one player
        verbose: Enable decision logging
    """
    player_a_name: str = "Player A"
    player_b_name: str = "Player B"
    player_a_kind: PlayerKind = PlayerKind.HUMAN
    player_b_kind: PlayerKind = PlayerKind.COMPUTER
    show_board: bool = True
    max_rejections: int = TicTacToe.DEFAULT_MAX_REJECTIONS
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if not self.player_a_name.strip() or not self.player_b_name.strip():
            raise ValueError("Player names cannot be empty")
        if self.player_a_name == self.player_b_name:
            raise ValueError(f"Player names must differ, both are '{self.player_a_name}'")
        if self.max_rejections < 1:
            raise ValueError("Max rejections must be at least 1")


def _make_player(kind: PlayerKind, token: Token, name: str,
                 input_fn: Callable[[str], str],
                 output_fn: Callable[[str], None],
                 engine: AIEngine) -> Player:
    if kind == PlayerKind.HUMAN:
        return HumanPlayer(token, name, input_fn=input_fn, output_fn=output_fn)
    return ArtificialPlayer(token, name, engine=engine)


def build_players(config: GameConfig,
                  input_fn: Callable[[str], str] = input,
                  output_fn: Callable[[str], None] = print,
                  engine: Optional[AIEngine] = None) -> List[Player]:
    """
    Create both players described by a configuration.

    Args:
        config: Match configuration
        input_fn: Prompt-and-read function for human players
        output_fn: Message sink for human players
        engine: Engine shared by computer players (default: a new AIEngine)

    Returns:
        [player A, player B]
    """
    engine = engine or AIEngine(enable_logging=config.verbose)
    return [
        _make_player(config.player_a_kind, Token.PLAYER_A, config.player_a_name,
                     input_fn, output_fn, engine),
        _make_player(config.player_b_kind, Token.PLAYER_B, config.player_b_name,
                     input_fn, output_fn, engine),
    ]


def build_match(config: GameConfig,
                input_fn: Callable[[str], str] = input,
                output_fn: Callable[[str], None] = print) -> TicTacToe:
    """Create a ready-to-run match from a configuration."""
    players = build_players(config, input_fn=input_fn, output_fn=output_fn)
    return TicTacToe(players, output_fn=output_fn, show_board=config.show_board,
                     max_rejections=config.max_rejections)
