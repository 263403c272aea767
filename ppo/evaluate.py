import argparse

from sb3_contrib import MaskablePPO
from sb3_contrib.common.wrappers import ActionMasker

from .environment import ShiftingTicTacToe


def masking(env):
    return env.action_mask()


def main():
    parser = argparse.ArgumentParser(description="Play a trained agent against the shifting tic-tac-toe bot")
    parser.add_argument('model', help='Path of a saved MaskablePPO model')
    parser.add_argument('--games', type=int, default=100)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args()

    env = ActionMasker(ShiftingTicTacToe(seed=args.seed), masking)
    model = MaskablePPO.load(args.model, env=env)

    win = 0
    lose = 0
    draw = 0
    for _ in range(args.games):
        obs, _ = env.reset()
        done = False
        reward = 0
        while not done:
            action, _ = model.predict(obs, action_masks=env.action_masks())
            obs, reward, terminated, truncated, _ = env.step(action)
            done = terminated or truncated
            if args.debug:
                print("action:", action)
                print("reward:", reward)
                env.render()

        if reward == env.unwrapped.reward_win:
            win += 1
        elif reward == env.unwrapped.reward_lose:
            lose += 1
        else:
            draw += 1

    print("win:", win)
    print("lose:", lose)
    print("draw:", draw)


if __name__ == "__main__":
    main()
