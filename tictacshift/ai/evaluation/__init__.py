from .win_detector import WinDetector

__all__ = ['WinDetector']
