import argparse
import os

import torch as th
from sb3_contrib import MaskablePPO
from sb3_contrib.common.wrappers import ActionMasker
from gymnasium.utils.env_checker import check_env

from .environment import ShiftingTicTacToe


def masking(env):
    return env.action_mask()


def main():
    parser = argparse.ArgumentParser(description="Train a MaskablePPO agent against the shifting tic-tac-toe bot")
    parser.add_argument('--total-timesteps', type=int, default=2000000)
    parser.add_argument('--save-every', type=int, default=100000)
    parser.add_argument('--model-dir', default='models')
    parser.add_argument('--resume', default=None, help='Checkpoint to continue training from')
    parser.add_argument('--learning-rate', type=float, default=0.001)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--check-env', action='store_true', help='Run the gymnasium env checker and exit')
    args = parser.parse_args()

    # Create the agent
    env = ShiftingTicTacToe(seed=args.seed)
    if args.check_env:
        check_env(env)
        return

    masked_env = ActionMasker(env, masking)
    if args.resume:
        model = MaskablePPO.load(args.resume, env=masked_env, verbose=1)
    else:
        model = MaskablePPO(
            "MlpPolicy",
            masked_env,
            verbose=1,
            learning_rate=args.learning_rate,
            seed=args.seed,
            policy_kwargs=dict(activation_fn=th.nn.ReLU, net_arch=[64, 64]),
        )

    os.makedirs(args.model_dir, exist_ok=True)

    # Train the agent
    iteration = args.save_every
    while iteration <= args.total_timesteps:
        try:
            model.learn(total_timesteps=args.save_every, reset_num_timesteps=False)
            model.save(os.path.join(args.model_dir, f"ppo_shifting_tic_tac_toe_maskable_{iteration}"))
            iteration += args.save_every
        except KeyboardInterrupt:
            break


if __name__ == "__main__":
    main()
