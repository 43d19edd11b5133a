"""
Command line interface for tic-tac-toe.

Usage:
    tictactoe play [--computer-first | --human-vs-human | --computer-vs-computer]
    tictactoe suggest <board_string> <current_player> [--format human|json|simple]

Board String Format:
    9 characters for the cells in row-major order, where:
    - 'X' = player A (moves first)
    - 'O' = player B
    - '_' or '.' = empty cell
    Spaces and '|' separators are ignored.

Example:
    tictactoe suggest "XX_|OO_|___" X --format json
"""

import sys
import argparse
import json
from typing import List, Optional, Tuple

from .models.enums import Token
from .game.board import Board
from .ai.engine import AIEngine, AIDecision, AIDecisionError
from .config import GameConfig, PlayerKind, build_match
from .match import MatchError


def parse_board_string(board_string: str) -> Tuple[Board, Token]:
    """
    Parse a board string into a Board and the side to move.

    Args:
        board_string: 9-cell board representation

    Returns:
        The board and the token whose turn it is

    Raises:
        ValueError: If the board string is malformed or not a reachable position
    """
    board = Board.from_string(board_string)

    cells = board.to_string()
    x_count = cells.count(Token.PLAYER_A.symbol)
    o_count = cells.count(Token.PLAYER_B.symbol)

    # X moves first, so X has as many moves as O or one more
    if x_count < o_count or x_count > o_count + 1:
        raise ValueError(f"Invalid move count: X has {x_count} moves, O has {o_count} moves")

    winner = board.winner()
    if winner is not None:
        raise ValueError(f"Game is already over, {winner.symbol} has won")
    if board.is_draw():
        raise ValueError("Game is already over, the board is full")

    to_move = Token.PLAYER_A if x_count == o_count else Token.PLAYER_B
    return board, to_move


def format_output(decision: AIDecision, format_type: str = 'human') -> str:
    """
    Format the AI decision output.

    Args:
        decision: AIDecision object
        format_type: Output format ('human', 'json', 'simple')

    Returns:
        Formatted output string
    """
    row, col = decision.move.to_user()

    if format_type == 'json':
        output = {
            'suggested_move': {'row': row, 'col': col},
            'player': decision.token.symbol,
            'score': decision.score,
            'reasoning': decision.reasoning,
            'metrics': {
                'move_time': decision.metrics.move_time,
                'nodes_evaluated': decision.metrics.nodes_evaluated,
                'heuristic_cutoffs': decision.metrics.heuristic_cutoffs,
                'evaluation_score': decision.metrics.evaluation_score
            }
        }
        return json.dumps(output, indent=2)

    elif format_type == 'simple':
        return f"{row} {col}"

    else:  # human format
        output = []
        output.append(f"AI Suggested Move: row {row}, col {col}")
        output.append(f"Player: {decision.token.symbol}")
        output.append(f"Reasoning: {decision.reasoning}")
        output.append("")
        output.append("Performance Metrics:")
        output.append(f"  Time taken: {decision.metrics.move_time:.3f}s")
        output.append(f"  Nodes evaluated: {decision.metrics.nodes_evaluated}")
        output.append(f"  Heuristic cutoffs: {decision.metrics.heuristic_cutoffs}")
        output.append(f"  Evaluation score: {decision.metrics.evaluation_score}")
        return "\n".join(output)


def run_suggest(args: argparse.Namespace) -> int:
    board, to_move = parse_board_string(args.board_string)
    current = Token.from_symbol(args.current_player)

    if current != to_move:
        print(f"Error: Board indicates it's {to_move.symbol}'s turn, but you specified {current.symbol}",
              file=sys.stderr)
        return 1

    engine = AIEngine(enable_logging=args.verbose)
    decision = engine.select_move(board, current)
    print(format_output(decision, args.format))
    return 0


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Translate ``play`` arguments into a GameConfig."""
    if args.human_vs_human:
        kinds = (PlayerKind.HUMAN, PlayerKind.HUMAN)
    elif args.computer_vs_computer:
        kinds = (PlayerKind.COMPUTER, PlayerKind.COMPUTER)
    elif args.computer_first:
        kinds = (PlayerKind.COMPUTER, PlayerKind.HUMAN)
    else:
        kinds = (PlayerKind.HUMAN, PlayerKind.COMPUTER)

    return GameConfig(
        player_a_kind=kinds[0],
        player_b_kind=kinds[1],
        show_board=not args.no_board,
        verbose=args.verbose,
    )


def run_play(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    match = build_match(config)

    print("=== Tic-Tac-Toe ===")
    print(f"{config.player_a_name} ({config.player_a_kind.value}) plays X, "
          f"{config.player_b_name} ({config.player_b_kind.value}) plays O.")
    print("Enter rows and columns as numbers from 1 to 3.\n")

    try:
        match.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe or get an AI move suggestion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play against the computer, you move first
  tictactoe play

  # Let the computer open
  tictactoe play --computer-first

  # Get move for O after X played the center
  tictactoe suggest "____X____" O

  # Simple output (just "row col", 1-based)
  tictactoe suggest "XX_OO____" X --format simple
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    play = subparsers.add_parser('play', help='Play a match on the console')
    mode = play.add_mutually_exclusive_group()
    mode.add_argument(
        '--computer-first',
        action='store_true',
        help='Let the computer play first (as X)'
    )
    mode.add_argument(
        '--human-vs-human',
        action='store_true',
        help='Two people share the console'
    )
    mode.add_argument(
        '--computer-vs-computer',
        action='store_true',
        help='Watch the engine play itself'
    )
    play.add_argument(
        '--no-board',
        action='store_true',
        help='Do not print the board after each move'
    )
    play.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    play.set_defaults(handler=run_play)

    suggest = subparsers.add_parser('suggest', help='Suggest a move for a position')
    suggest.add_argument(
        'board_string',
        help='9-cell board representation (X/O/_ for each cell, row-major)'
    )
    suggest.add_argument(
        'current_player',
        choices=['X', 'O'],
        help='Current player to move (X or O)'
    )
    suggest.add_argument(
        '--format',
        choices=['human', 'json', 'simple'],
        default='human',
        help='Output format (default: human)'
    )
    suggest.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    suggest.set_defaults(handler=run_suggest)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``tictactoe`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.handler(args)
    except (ValueError, AIDecisionError, MatchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
