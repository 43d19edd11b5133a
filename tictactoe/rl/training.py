"""
Train a MaskablePPO agent against the tic-tac-toe engine.
"""
import argparse
import logging
from pathlib import Path

from sb3_contrib import MaskablePPO
from sb3_contrib.common.wrappers import ActionMasker

from ..models.enums import Token
from .environment import TicTacToeEnv
from .evaluation import evaluate_agent

logger = logging.getLogger(__name__)

MODEL_PREFIX = "ppo_tictactoe_maskable"


def masking(env):
    return env.action_mask()


def make_env(opponent: str = "heuristic", agent_token: Token = Token.PLAYER_A) -> ActionMasker:
    return ActionMasker(TicTacToeEnv(opponent=opponent, agent_token=agent_token), masking)


def train_agent(total_timesteps: int, save_every: int, model_dir, opponent: str = "heuristic",
                learning_rate: float = 0.001, verbose: int = 0, **ppo_kwargs) -> MaskablePPO:
    """
    Train a fresh agent, saving a checkpoint every ``save_every`` steps.

    Args:
        total_timesteps: Training budget
        save_every: Steps between checkpoints
        model_dir: Directory for checkpoints
        opponent: Built-in opponent ("heuristic" or "random")
        learning_rate: PPO learning rate
        verbose: Stable-baselines verbosity
        **ppo_kwargs: Extra MaskablePPO arguments (n_steps, batch_size, ...)

    Returns:
        The trained model
    """
    if total_timesteps < 1 or save_every < 1:
        raise ValueError("Timestep counts must be positive")

    model_dir = Path(model_dir)
    model_dir.mkdir(parents=True, exist_ok=True)

    model = MaskablePPO("MlpPolicy", make_env(opponent), verbose=verbose,
                        learning_rate=learning_rate, **ppo_kwargs)

    iteration = 0
    while iteration < total_timesteps:
        steps = min(save_every, total_timesteps - iteration)
        model.learn(total_timesteps=steps, reset_num_timesteps=False)
        iteration += steps
        path = model_dir / f"{MODEL_PREFIX}_{iteration}"
        model.save(path)
        logger.info("Saved checkpoint %s", path)

    return model


def main():
    parser = argparse.ArgumentParser(description="Train a MaskablePPO tic-tac-toe agent")
    parser.add_argument('--timesteps', type=int, default=200000, help='Training budget (default: 200000)')
    parser.add_argument('--save-every', type=int, default=50000, help='Steps between checkpoints (default: 50000)')
    parser.add_argument('--model-dir', default='models', help='Checkpoint directory (default: models)')
    parser.add_argument('--opponent', choices=['heuristic', 'random'], default='heuristic',
                        help='Built-in opponent (default: heuristic)')
    parser.add_argument('--eval-games', type=int, default=100, help='Evaluation games after training')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    try:
        model = train_agent(args.timesteps, args.save_every, args.model_dir,
                            opponent=args.opponent, verbose=1)
    except KeyboardInterrupt:
        return

    report = evaluate_agent(model, args.eval_games, env=TicTacToeEnv(opponent=args.opponent))
    print(report)


if __name__ == "__main__":
    main()
