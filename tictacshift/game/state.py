"""
Game state for shifting tic-tac-toe.

A 3x3 board where only the six most recent moves stay on the board: once
a seventh move is placed the oldest one fades and its cell is free again.
The full move history is kept for display; the board itself is always
rebuilt from the visible window.
"""
import logging
import numbers
from typing import List, Optional, Tuple

from ..models.enums import Player, GameMode
from ..models.move import Move
from ..models.result import GameResult
from ..models.winning_line import WinningLine
from ..ai.engine import BotEngine, BotDecisionError
from ..ai.evaluation.win_detector import WinDetector

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the moves of one game and enforces the rules on them.

    Attributes:
        moves: Every move placed this game, in placement order
        current_player: Player whose turn it is
        move_counter: Number of moves placed this game
        result: Ongoing, win or draw, recomputed after every move
        mode: Local, vs bot or network; fixed for the life of the state
        is_waiting_for_bot: Set while the bot is choosing its move
    """

    BOARD_SIZE = 3
    VISIBLE_MOVE_LIMIT = 6
    DRAW_MOVE_LIMIT = 20
    BOT_PLAYER = Player.O

    _win_detector = WinDetector()

    def __init__(self, mode: GameMode = GameMode.LOCAL, seed: Optional[int] = None,
                 bot: Optional[BotEngine] = None):
        """
        Initialize an empty game.

        Args:
            mode: How the game is played
            seed: Seed for the bot's corner choice (vs bot mode)
            bot: Bot engine to use instead of a freshly seeded one; must
                play BOT_PLAYER

        Raises:
            ValueError: If the given bot plays for X
        """
        if bot is not None and bot.player != self.BOT_PLAYER:
            raise ValueError(
                f"Bot must play {self.BOT_PLAYER.value}, got {bot.player.value}"
            )

        self.mode = mode
        self.bot = bot if bot is not None else BotEngine(
            player=self.BOT_PLAYER, seed=seed, enable_logging=False
        )
        self.moves: List[Move] = []
        self.current_player: Player = Player.X
        self.move_counter = 0
        self.result = GameResult.ongoing()
        self.is_waiting_for_bot = False

    def visible_moves(self) -> List[Move]:
        """Get the moves still on the board (the last six placed)."""
        if len(self.moves) <= self.VISIBLE_MOVE_LIMIT:
            return list(self.moves)
        return self.moves[-self.VISIBLE_MOVE_LIMIT:]

    def faded_moves(self) -> List[Move]:
        """Get the moves that have already left the board."""
        return self.moves[:len(self.moves) - len(self.visible_moves())]

    def board_state(self) -> List[List[Optional[Player]]]:
        """Build the 3x3 grid from the visible moves."""
        board: List[List[Optional[Player]]] = [
            [None] * self.BOARD_SIZE for _ in range(self.BOARD_SIZE)
        ]
        for move in self.visible_moves():
            board[move.row][move.column] = move.player
        return board

    def moves_about_to_fade(self) -> List[Move]:
        """
        Get the move that leaves the board when the next move is placed.

        Returns:
            The oldest visible move once six are visible, else an empty list
        """
        visible = self.visible_moves()
        if len(visible) >= self.VISIBLE_MOVE_LIMIT:
            return [visible[0]]
        return []

    def will_fade(self, row: int, column: int) -> bool:
        """Check if the move on a cell fades with the next placement."""
        return any(m.row == row and m.column == column for m in self.moves_about_to_fade())

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Get all free cells of the visible board in row-major order."""
        board = self.board_state()
        return [
            (row, col)
            for row in range(self.BOARD_SIZE)
            for col in range(self.BOARD_SIZE)
            if board[row][col] is None
        ]

    def can_place_move(self, row: int, column: int) -> bool:
        """Check if the current player may place a symbol on a cell."""
        if not self.result.is_ongoing:
            return False

        # bool is Integral too; True/False are not coordinates
        for value in (row, column):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                return False

        if not (0 <= row < self.BOARD_SIZE and 0 <= column < self.BOARD_SIZE):
            return False

        return self.board_state()[row][column] is None

    def place_move(self, row: int, column: int) -> bool:
        """
        Place the current player's symbol on a cell.

        Local, bot and remote moves all go through here.

        Args:
            row: Row index (0-2)
            column: Column index (0-2)

        Returns:
            True if the move was accepted, False otherwise
        """
        if not self.can_place_move(row, column):
            logger.debug("Rejected move (%s, %s) for %s", row, column, self.current_player.value)
            return False

        move = Move(row=int(row), column=int(column), player=self.current_player,
                    move_number=self.move_counter)
        self.moves.append(move)

        self.move_counter += 1
        self.current_player = self.current_player.opposite()
        self.is_waiting_for_bot = False

        self._check_game_result()
        return True

    def _check_game_result(self):
        """Recompute the result from the visible board."""
        winner = self._win_detector.check_winner(self.board_state())

        if winner is not None:
            self.result = GameResult.win(winner)
        elif self.move_counter >= self.DRAW_MOVE_LIMIT:
            self.result = GameResult.draw()
        else:
            self.result = GameResult.ongoing()

        if not self.result.is_ongoing:
            logger.debug("Game over after %d moves: %s", self.move_counter, self.result)

    def winning_line(self) -> Optional[WinningLine]:
        """Get the completed line while the game is won, None otherwise."""
        if not self.result.is_win:
            return None
        win = self._win_detector.check_win(self.board_state())
        return win.winning_line if win else None

    def make_bot_move(self) -> bool:
        """
        Let the bot play O's turn in vs bot mode.

        Returns:
            True if the bot placed a move, False if it was not its turn,
            the mode is not vs bot, the game is over or no cell is free
        """
        if (self.mode != GameMode.VS_BOT
                or self.current_player != self.BOT_PLAYER
                or not self.result.is_ongoing):
            return False

        self.is_waiting_for_bot = True

        try:
            decision = self.bot.select_move(self)
        except BotDecisionError as e:
            logger.warning("Bot could not move: %s", e)
            self.is_waiting_for_bot = False
            return False

        return self.place_move(decision.row, decision.column)

    def reset_game(self):
        """Reset the game to its initial state, keeping the mode."""
        self.moves.clear()
        self.current_player = Player.X
        self.move_counter = 0
        self.result = GameResult.ongoing()
        self.is_waiting_for_bot = False

    def __str__(self) -> str:
        """String representation of the board."""
        board = self.board_state()
        lines = [f"Shifting Board - Current Player: {self.current_player.value}"]
        lines.append(f"Moves played: {self.move_counter} ({self.result})")
        lines.append("")

        for row in range(self.BOARD_SIZE):
            cells = []
            for col in range(self.BOARD_SIZE):
                occupant = board[row][col]
                symbol = occupant.value if occupant else '_'
                # Lowercase marks the move that fades next
                cells.append(symbol.lower() if self.will_fade(row, col) else symbol)
            lines.append("  " + " ".join(cells))

        return "\n".join(lines)
