"""
Static single-ply evaluation used to cut off the tic-tac-toe search.
"""
from ...models.enums import Token
from ...game.board import Board


class HeuristicEvaluator:
    """
    Scores a board right after ``token`` has moved.

    The checks run in a fixed order and the first one that fires decides
    the score:

    1. ``token`` completed a line                      -> WIN_SCORE (2)
    2. the opponent still has an open two-in-a-row     -> THREAT_SCORE (-1)
    3. ``token`` now has more than one open two        -> FORK_SCORE (1)
    4. otherwise                                       -> NEUTRAL_SCORE (0)

    Only a zero score lets the search recurse further.
    """

    WIN_SCORE = 2
    THREAT_SCORE = -1
    FORK_SCORE = 1
    NEUTRAL_SCORE = 0

    def evaluate(self, board: Board, token: Token) -> int:
        """
        Evaluate a position from the perspective of the side that just moved.

        Args:
            board: Board after the hypothetical move
            token: Token that made the move

        Returns:
            One of WIN_SCORE, THREAT_SCORE, FORK_SCORE, NEUTRAL_SCORE
        """
        if board.count_line(token, 3) > 0:
            return self.WIN_SCORE
        if board.count_line(board.opponent(token), 2) > 0:
            return self.THREAT_SCORE
        if board.count_line(token, 2) > 1:
            return self.FORK_SCORE
        return self.NEUTRAL_SCORE
