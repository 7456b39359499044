"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GuessResult, Phase, DailyWord, LetterCell, GameSession, new_session
from .stats import AggregateStats
from .user import User

__all__ = [
    'GuessResult', 'Phase', 'DailyWord', 'LetterCell', 'GameSession', 'new_session',
    'AggregateStats', 'User'
]
