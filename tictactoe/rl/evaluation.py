"""
Play a trained policy against the built-in opponent and count results.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .environment import TicTacToeEnv


@dataclass
class EvaluationReport:
    """Results of an evaluation run, from the agent's point of view."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws

    def __str__(self) -> str:
        return f"win: {self.wins}\nlose: {self.losses}\ndraw: {self.draws}"


def evaluate_agent(policy, num_games: int = 100, env: Optional[TicTacToeEnv] = None,
                   debug: bool = False) -> EvaluationReport:
    """
    Play ``num_games`` games with ``policy`` as the agent.

    Args:
        policy: Object with ``predict(obs, action_masks=...)`` returning
            ``(action, state)``, e.g. a MaskablePPO model
        num_games: Number of games to play
        env: Environment to play in (default: a new TicTacToeEnv)
        debug: Render the board after every agent step

    Returns:
        EvaluationReport with the win/loss/draw tally
    """
    if num_games < 1:
        raise ValueError("Number of games must be at least 1")

    env = env or TicTacToeEnv()
    report = EvaluationReport()

    for _ in range(num_games):
        obs, info = env.reset()
        done = False
        reward = 0
        while not done:
            masks = np.asarray(info["action_mask"], dtype=bool)
            action, _ = policy.predict(obs, action_masks=masks)
            obs, reward, done, truncated, info = env.step(int(action))
            done = done or truncated
            if debug:
                env.render()

        if reward == env.reward_win:
            report.wins += 1
        elif reward == env.reward_lose:
            report.losses += 1
        else:
            report.draws += 1

    return report
