from typing import List, Optional
import numpy as np
import gymnasium as gym

from ..models.enums import Token
from ..models.move import Move
from ..game.board import Board
from ..ai.engine import AIEngine


CELLS = Board.TOTAL_CELLS
OPPONENTS = ("heuristic", "random")


class TicTacToeEnv(gym.Env):
    """
    Single-agent tic-tac-toe against a built-in opponent.

    The observation is the board from the agent's point of view: +1 for the
    agent's cells, -1 for the opponent's, 0 for empty. Actions are row-major
    cell indices; the opponent replies inside ``step``.
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, opponent: str = "heuristic", agent_token: Token = Token.PLAYER_A,
                 render_mode: Optional[str] = None):
        super().__init__()
        if opponent not in OPPONENTS:
            raise ValueError(f"Unknown opponent '{opponent}', expected one of {OPPONENTS}")
        if agent_token == Token.EMPTY:
            raise ValueError("The agent cannot play the empty token")

        self.opponent = opponent
        self.agent_token = agent_token
        self.opponent_token = agent_token.opponent()
        self.render_mode = render_mode
        self.engine = AIEngine(track_history=False)

        self.action_space = gym.spaces.Discrete(CELLS)
        self.observation_space = gym.spaces.Box(low=-1, high=1, shape=(CELLS,), dtype=np.int8)
        self.board = Board()
        self.reward_win = 100
        self.reward_draw = 0
        self.reward_lose = -100

    def action_mask(self) -> List[int]:
        mask = [1 if self.board.is_empty(Move.from_index(i)) else 0 for i in range(CELLS)]
        return mask

    def _info(self):
        return {"action_mask": self.action_mask()}

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        self.board.clear()
        self.engine.reset_performance_tracking()
        # X always opens
        if self.agent_token == Token.PLAYER_B:
            self._opponent_move()
        return self._get_obs(), self._info()

    def _get_obs(self):
        obs = np.zeros(CELLS, dtype=np.int8)
        for i in range(CELLS):
            token = self.board.cell(Move.from_index(i))
            if token == self.agent_token:
                obs[i] = 1
            elif token == self.opponent_token:
                obs[i] = -1
        return obs

    def _is_valid_action(self, action):
        return 0 <= action < CELLS and self.board.is_empty(Move.from_index(int(action)))

    def _opponent_move(self):
        if self.opponent == "heuristic":
            move = self.engine.select_move(self.board, self.opponent_token).move
        else:
            empty = self.board.empty_cells()
            move = empty[int(self.np_random.integers(len(empty)))]
        self.board.apply(move, self.opponent_token)

    def step(self, action):
        if not self._is_valid_action(action):
            raise ValueError(f"Invalid action: {action}")

        self.board.apply(Move.from_index(int(action)), self.agent_token)
        if self.board.count_line(self.agent_token, 3) > 0:
            return self._get_obs(), self.reward_win, True, False, self._info()
        if self.board.is_draw():
            return self._get_obs(), self.reward_draw, True, False, self._info()

        self._opponent_move()
        if self.board.count_line(self.opponent_token, 3) > 0:
            return self._get_obs(), self.reward_lose, True, False, self._info()
        if self.board.is_draw():
            return self._get_obs(), self.reward_draw, True, False, self._info()

        return self._get_obs(), 0, False, False, self._info()

    def render(self):
        text = str(self.board)
        if self.render_mode == "ansi":
            return text
        print(text)
        print()
