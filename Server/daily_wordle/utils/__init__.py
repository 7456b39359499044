"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_allowed_origin, is_origin_allowed
from .helpers import (
    get_user_identity, get_date_str, get_time_until_next_word,
    calculate_win_percentage, round_half_up
)
from .game_logger import game_logger

__all__ = [
    'require_allowed_origin', 'is_origin_allowed',
    'get_user_identity', 'get_date_str', 'get_time_until_next_word',
    'calculate_win_percentage', 'round_half_up',
    'game_logger'
]
