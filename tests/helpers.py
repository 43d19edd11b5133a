from typing import Iterable, Iterator, List

from tictactoe.models.enums import Token
from tictactoe.models.move import Move
from tictactoe.game.board import Board
from tictactoe.players import Player


class ScriptedPlayer(Player):
    """Plays a fixed list of moves, ignoring the board."""

    def __init__(self, token: Token, name: str, moves: Iterable[Move]):
        super().__init__(token, name)
        self.moves = list(moves)
        self.calls = 0

    def turn(self, board: Board) -> Move:
        move = self.moves[self.calls]
        self.calls += 1
        return move


def scripted_input(answers: Iterable[str]):
    """Build an input function that replays answers and records prompts."""
    answers = iter(answers)
    prompts: List[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError("no more input")

    read.prompts = prompts
    return read


def reachable_boards() -> Iterator[Board]:
    """Every position reachable in play, each once."""
    seen = set()
    stack = [(Board(), Token.PLAYER_A)]
    while stack:
        board, token = stack.pop()
        key = board.to_string()
        if key in seen:
            continue
        seen.add(key)
        yield board
        if board.is_game_over():
            continue
        for move in board.empty_cells():
            child = board.copy()
            child.apply(move, token)
            stack.append((child, token.opponent()))
