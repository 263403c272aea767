from typing import Optional
import numpy as np
import gymnasium as gym

from tictacshift.game.state import GameState
from tictacshift.models.enums import GameMode, Player
from tictacshift.ai.evaluation.win_detector import WinDetector


CELLS = 9
BOARD_SIZE = 3


class ShiftingTicTacToe(gym.Env):
    """
    Agent plays X against the heuristic bot playing O.

    Observation: 9 cells (1 agent, -1 bot, 0 empty) followed by 9 flags
    marking the move that fades with the next placement.
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self.cells = CELLS

        self.action_space = gym.spaces.Discrete(self.cells)
        self.observation_space = gym.spaces.Box(low=-1, high=1, shape=(2 * self.cells,), dtype=np.int8)
        self.game = GameState(mode=GameMode.VS_BOT, seed=seed)
        self.agent = Player.X
        self.win_detector = WinDetector()
        self.reward_win = 100
        self.reward_draw = 0
        self.reward_lose = -100
        self.reset(seed=seed)

    def action_mask(self) -> list[int]:
        mask = [int(self.game.can_place_move(*divmod(cell, BOARD_SIZE))) for cell in range(self.cells)]
        return mask

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        if seed is not None:
            self.game.bot.reseed(seed)
        self.game.reset_game()
        info = {}
        info["action_mask"] = self.action_mask()
        return self._get_obs(), info

    def _get_obs(self):
        obs = np.zeros(2 * self.cells, dtype=np.int8)
        board = self.game.board_state()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                occupant = board[row][col]
                if occupant is not None:
                    obs[row * BOARD_SIZE + col] = 1 if occupant == self.agent else -1
        for move in self.game.moves_about_to_fade():
            obs[self.cells + move.cell] = 1
        return obs

    def _is_valid_action(self, action):
        return 0 <= action < self.cells and self.game.can_place_move(*divmod(action, BOARD_SIZE))

    def calculate_intermediate_reward(self):
        board = self.game.board_state()
        own_threats = len(self.win_detector.find_immediate_wins(board, self.agent))
        opponent_threats = len(self.win_detector.find_immediate_wins(board, self.agent.opposite()))
        time_penalty = self.game.move_counter / GameState.DRAW_MOVE_LIMIT
        return own_threats - 2 * opponent_threats - time_penalty

    def _final_reward(self):
        result = self.game.result
        if result.is_win:
            return self.reward_win if result.winner == self.agent else self.reward_lose
        return self.reward_draw

    def step(self, action):
        action = int(action)
        if not self._is_valid_action(action):
            raise ValueError(f"Invalid action: {action}")

        self.game.place_move(*divmod(action, BOARD_SIZE))

        if self.game.result.is_ongoing:
            self.game.make_bot_move()

        info = {}
        info["action_mask"] = self.action_mask()
        if not self.game.result.is_ongoing:
            return self._get_obs(), self._final_reward(), True, False, info

        return self._get_obs(), self.calculate_intermediate_reward(), False, False, info

    def render(self, mode="human"):
        print(self.game)


if __name__ == "__main__":
    env = ShiftingTicTacToe()
    obs, info = env.reset()
    action = int(np.random.choice(np.flatnonzero(info["action_mask"])))
    print(env.step(action))
    env.render()
