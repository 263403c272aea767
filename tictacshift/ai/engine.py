"""
Bot controller for shifting tic-tac-toe.

This module implements the bot opponent: a fixed-priority greedy heuristic
(win, block, center, corner, any) evaluated against the visible board,
with a seedable random source for the corner choice and decision logging.
"""
import time
import random
import logging
from typing import Dict, List, Optional, Any, Tuple, TYPE_CHECKING
from dataclasses import dataclass

from ..models.enums import Player, BotStrategy
from .evaluation.win_detector import WinDetector

if TYPE_CHECKING:
    from ..game.state import GameState


class BotDecisionError(Exception):
    """Exception raised when the bot cannot pick a move."""

    def __init__(self, message: str, state: 'GameState'):
        super().__init__(message)
        self.state = state


@dataclass
class BotDecision:
    """
    A move chosen by the bot.

    Attributes:
        row: Row of the chosen cell
        column: Column of the chosen cell
        player: Player the bot is playing
        strategy: Heuristic rule that selected the cell
        reasoning: Human-readable explanation of the decision
        move_time: Time taken to select the move (seconds)
    """
    row: int
    column: int
    player: Player
    strategy: BotStrategy
    reasoning: str
    move_time: float = 0.0

    @property
    def cell(self) -> int:
        return self.row * 3 + self.column


class BotEngine:
    """
    Greedy one-ply bot.

    Rules, first applicable wins:
    1. Win now if a free cell completes a line for the bot
    2. Block a free cell that would complete a line for the opponent
    3. Take the center
    4. Take a corner, tried in shuffled order
    5. Take the first free cell in row-major order
    """

    CENTER = (1, 1)
    CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]

    def __init__(self, player: Player = Player.O, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None, enable_logging: bool = True):
        """
        Initialize the bot.

        Args:
            player: Which player the bot controls
            seed: Seed for the corner shuffle
            rng: Random source to use instead of a seeded one
            enable_logging: Whether to log decisions
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random(seed)
        self.enable_logging = enable_logging
        self.win_detector = WinDetector()

        self.decision_history: List[BotDecision] = []
        self.total_time = 0.0

        self.logger = logging.getLogger('tictacshift.bot')
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up logging for bot decisions."""
        self.logger.setLevel(logging.INFO)

        # Create console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def reseed(self, seed: Optional[int]):
        """Reset the random source used for the corner shuffle."""
        self.rng.seed(seed)

    def select_move(self, state: 'GameState') -> BotDecision:
        """
        Select the bot's move for the given game.

        Args:
            state: Current game

        Returns:
            BotDecision with the chosen cell

        Raises:
            BotDecisionError: If the game is over or no cell is free
        """
        start_time = time.time()

        if not state.result.is_ongoing:
            raise BotDecisionError(f"Game is already over: {state.result}", state)

        board = state.board_state()
        if not state.empty_cells():
            raise BotDecisionError("No legal moves available", state)

        cell, strategy, reasoning = self._choose_cell(board)

        decision = BotDecision(
            row=cell[0],
            column=cell[1],
            player=self.player,
            strategy=strategy,
            reasoning=reasoning,
            move_time=time.time() - start_time,
        )
        self.decision_history.append(decision)
        self.total_time += decision.move_time
        self._log_decision(decision)
        return decision

    def _choose_cell(self, board) -> Tuple[Tuple[int, int], BotStrategy, str]:
        """Apply the heuristic rules in priority order."""
        win = self.win_detector.find_winning_move(board, self.player)
        if win is not None:
            return win, BotStrategy.WIN, "Winning move"

        blocks = self.win_detector.find_blocking_moves(board, self.player)
        if blocks:
            return blocks[0], BotStrategy.BLOCK, "Blocking opponent's win"

        row, col = self.CENTER
        if board[row][col] is None:
            return self.CENTER, BotStrategy.CENTER, "Center is free"

        corners = list(self.CORNERS)
        self.rng.shuffle(corners)
        for row, col in corners:
            if board[row][col] is None:
                return (row, col), BotStrategy.CORNER, "Free corner"

        for row in range(3):
            for col in range(3):
                if board[row][col] is None:
                    return (row, col), BotStrategy.ANY, "First free cell"

        # select_move checks for a free cell before getting here
        raise RuntimeError("No free cell on the board")

    def _log_decision(self, decision: BotDecision):
        """Log bot decision."""
        if not self.enable_logging:
            return

        self.logger.info(
            f"{decision.strategy.value.upper()} - Move: ({decision.row}, {decision.column}), "
            f"Player: {decision.player.value}, "
            f"Time: {decision.move_time:.3f}s"
        )

        if decision.strategy == BotStrategy.ANY:
            self.logger.warning("No tactical or positional move, fell back to first free cell")

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of bot decisions.

        Returns:
            Dictionary with decision counts and timing
        """
        total = len(self.decision_history)
        strategy_counts = {strategy.value: 0 for strategy in BotStrategy}
        for decision in self.decision_history:
            strategy_counts[decision.strategy.value] += 1

        return {
            'total_decisions': total,
            'average_time': self.total_time / total if total else 0.0,
            'strategy_counts': strategy_counts,
        }

    def reset_performance_tracking(self):
        """Reset all decision tracking data."""
        self.decision_history.clear()
        self.total_time = 0.0
