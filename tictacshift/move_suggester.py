#!/usr/bin/env python3
"""
Bot Move Suggester Script

This script takes a game's move history and returns the bot's suggested
move for the player whose turn it is.

Usage:
    tictacshift-suggest <moves> [options]

Moves Format:
    Comma separated cell indices (0-8, row * 3 + column) in the order they
    were played, X first. The whole history is needed because only the
    six most recent moves are still on the board.

Example:
    tictacshift-suggest "4"
    tictacshift-suggest "0,3,1" --format json
"""

import sys
import argparse
import json
from typing import List, Optional

from .game.state import GameState
from .ai.engine import BotEngine, BotDecision, BotDecisionError


def parse_moves(moves_string: str) -> GameState:
    """
    Replay a move history into a GameState.

    Args:
        moves_string: Comma separated cell indices in placement order

    Returns:
        GameState after all moves

    Raises:
        ValueError: If the history is malformed or contains an illegal move
    """
    state = GameState()
    moves_string = moves_string.strip()
    if not moves_string:
        return state

    for index, token in enumerate(moves_string.split(',')):
        token = token.strip()
        if not token.isdigit():
            raise ValueError(f"Invalid cell '{token}' at move {index}. Use 0-8")

        cell = int(token)
        if cell > 8:
            raise ValueError(f"Cell {cell} at move {index} is out of range. Use 0-8")

        row, column = divmod(cell, 3)
        player = state.current_player
        if not state.place_move(row, column):
            raise ValueError(f"Illegal move {index}: cell {cell} for player {player.value}")

    return state


def format_output(decision: BotDecision, state: GameState, format_type: str = 'human') -> str:
    """
    Format the bot decision output.

    Args:
        decision: BotDecision object
        state: Game the decision was made for
        format_type: Output format ('human', 'json', 'simple')

    Returns:
        Formatted output string
    """
    if format_type == 'json':
        output = {
            'suggested_move': decision.cell,
            'row': decision.row,
            'column': decision.column,
            'player': decision.player.value,
            'strategy': decision.strategy.value,
            'reasoning': decision.reasoning,
            'will_fade': [m.cell for m in state.moves_about_to_fade()],
            'move_time': decision.move_time,
        }
        return json.dumps(output, indent=2)

    elif format_type == 'simple':
        return str(decision.cell)

    else:  # human format
        output = []
        output.append(f"Bot Suggested Move: {decision.cell} (row {decision.row}, column {decision.column})")
        output.append(f"Player: {decision.player.value}")
        output.append(f"Strategy: {decision.strategy.value}")
        output.append(f"Reasoning: {decision.reasoning}")
        fading = state.moves_about_to_fade()
        if fading:
            output.append(f"Fades next: cell {fading[0].cell}")
        output.append("")
        output.append(str(state))
        return "\n".join(output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to handle command line arguments and run bot move suggestion."""
    parser = argparse.ArgumentParser(
        description="Get bot move suggestion for shifting tic-tac-toe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Get move for X on empty board
  tictacshift-suggest ""

  # Get move for O after X played the center
  tictacshift-suggest "4"

  # JSON output with a fixed corner shuffle
  tictacshift-suggest "4,0,8" --seed 7 --format json

  # Simple output (just the cell number)
  tictacshift-suggest "0,3,1" --format simple
        """
    )

    parser.add_argument(
        'moves',
        help='Comma separated cell indices (0-8) in placement order'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the corner choice (default: random)'
    )

    parser.add_argument(
        '--format',
        choices=['human', 'json', 'simple'],
        default='human',
        help='Output format (default: human)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    try:
        state = parse_moves(args.moves)

        if not state.result.is_ongoing:
            print(f"Error: Game is already over ({state.result})", file=sys.stderr)
            return 1

        bot = BotEngine(
            player=state.current_player,
            seed=args.seed,
            enable_logging=args.verbose
        )

        decision = bot.select_move(state)

        print(format_output(decision, state, args.format))

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BotDecisionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
