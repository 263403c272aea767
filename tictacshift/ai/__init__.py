from .engine import BotEngine, BotDecision, BotDecisionError

__all__ = ['BotEngine', 'BotDecision', 'BotDecisionError']
