import importlib.util
import tempfile
import unittest
from pathlib import Path

import numpy as np
from gymnasium.utils.env_checker import check_env

from tictactoe.models.enums import Token
from tictactoe.game.board import Board
from tictactoe.rl.environment import TicTacToeEnv
from tictactoe.rl.evaluation import evaluate_agent, EvaluationReport


class FirstFreeCellPolicy:
    """Always picks the lowest legal cell index."""

    def predict(self, obs, action_masks=None):
        return int(np.flatnonzero(action_masks)[0]), None


class TicTacToeEnvTests(unittest.TestCase):
    def setUp(self) -> None:
        self.env = TicTacToeEnv()

    def test_passes_gymnasium_checks(self) -> None:
        check_env(TicTacToeEnv(), skip_render_check=True)

    def test_reset(self) -> None:
        obs, info = self.env.reset(seed=0)
        self.assertEqual(obs.shape, (9,))
        self.assertEqual(obs.dtype, np.int8)
        self.assertFalse(obs.any())
        self.assertEqual(info["action_mask"], [1] * 9)

    def test_opponent_opens_when_agent_plays_second(self) -> None:
        env = TicTacToeEnv(agent_token=Token.PLAYER_B)
        obs, info = env.reset(seed=0)
        self.assertEqual(list(obs).count(-1), 1)
        self.assertEqual(sum(info["action_mask"]), 8)

    def test_illegal_action_raises(self) -> None:
        self.env.reset(seed=0)
        self.env.step(4)
        with self.assertRaises(ValueError):
            self.env.step(4)
        with self.assertRaises(ValueError):
            self.env.step(9)

    def test_agent_win(self) -> None:
        self.env.reset(seed=0)
        self.env.board = Board.from_string("XX_|OO_|___")
        obs, reward, done, truncated, _ = self.env.step(2)
        self.assertEqual(reward, self.env.reward_win)
        self.assertTrue(done)
        self.assertFalse(truncated)
        self.assertEqual(list(obs[:3]), [1, 1, 1])

    def test_agent_loss(self) -> None:
        self.env.reset(seed=0)
        self.env.board = Board.from_string("_X_|OO_|X__")
        obs, reward, done, _, _ = self.env.step(0)
        self.assertEqual(reward, self.env.reward_lose)
        self.assertTrue(done)
        self.assertEqual(list(obs[3:6]), [-1, -1, -1])

    def test_draw(self) -> None:
        self.env.reset(seed=0)
        self.env.board = Board.from_string("XOX|XOO|OX_")
        _, reward, done, _, info = self.env.step(8)
        self.assertEqual(reward, self.env.reward_draw)
        self.assertTrue(done)
        self.assertEqual(info["action_mask"], [0] * 9)

    def test_unknown_opponent(self) -> None:
        with self.assertRaises(ValueError):
            TicTacToeEnv(opponent="perfect")

    def test_opponent_keeps_no_history_across_episodes(self) -> None:
        env = TicTacToeEnv(opponent="heuristic")
        policy = FirstFreeCellPolicy()
        for episode in range(200):
            obs, info = env.reset(seed=episode)
            self.assertEqual(env.engine.total_decisions, 0)
            done = False
            while not done:
                action, _ = policy.predict(obs, action_masks=np.asarray(info["action_mask"], dtype=bool))
                obs, _, done, _, info = env.step(action)
            self.assertLessEqual(env.engine.total_decisions, 4)
        self.assertEqual(env.engine.decision_history, [])

    def test_ansi_render(self) -> None:
        env = TicTacToeEnv(render_mode="ansi")
        env.reset(seed=0)
        env.step(0)
        self.assertIn("X", env.render())


class EvaluateAgentTests(unittest.TestCase):
    def test_counts_every_game(self) -> None:
        report = evaluate_agent(FirstFreeCellPolicy(), num_games=3)
        self.assertEqual(report.games, 3)

    def test_random_opponent(self) -> None:
        env = TicTacToeEnv(opponent="random")
        env.reset(seed=7)
        report = evaluate_agent(FirstFreeCellPolicy(), num_games=5, env=env)
        self.assertEqual(report.wins + report.losses + report.draws, 5)

    def test_report_text(self) -> None:
        self.assertEqual(str(EvaluationReport(wins=1, losses=2, draws=3)), "win: 1\nlose: 2\ndraw: 3")

    def test_needs_a_game(self) -> None:
        with self.assertRaises(ValueError):
            evaluate_agent(FirstFreeCellPolicy(), num_games=0)


@unittest.skipUnless(importlib.util.find_spec("sb3_contrib"), "sb3-contrib is not installed")
class TrainAgentTests(unittest.TestCase):
    def test_saves_checkpoints(self) -> None:
        from tictactoe.rl.training import train_agent

        with tempfile.TemporaryDirectory() as model_dir:
            train_agent(64, 32, model_dir, n_steps=32, batch_size=16, n_epochs=1)
            saved = sorted(p.name for p in Path(model_dir).iterdir())
        self.assertEqual(saved, ["ppo_tictactoe_maskable_32.zip", "ppo_tictactoe_maskable_64.zip"])


if __name__ == "__main__":
    unittest.main()
