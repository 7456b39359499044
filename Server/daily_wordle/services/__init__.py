"""
Services Package

Contains all business logic and service classes.
"""

from .storage_service import (
    DocumentStore, MongoDocumentStore, MemoryDocumentStore,
    get_storage_service, initialize_storage_service
)
from .dictionary_service import DictionaryService, get_dictionary_service
from .daily_word_service import DailyWordService, get_daily_word_service
from .game_service import GameService, score_guess, get_game_service
from .leaderboard_service import LeaderboardService, compute_leaderboard, redact_display_name, get_leaderboard_service
from .stats_service import StatsService, apply_game_result
from .achievement_service import check_achievements, get_achievement_progress

__all__ = [
    'DocumentStore', 'MongoDocumentStore', 'MemoryDocumentStore',
    'get_storage_service', 'initialize_storage_service',
    'DictionaryService', 'get_dictionary_service',
    'DailyWordService', 'get_daily_word_service',
    'GameService', 'score_guess', 'get_game_service',
    'LeaderboardService', 'compute_leaderboard', 'redact_display_name', 'get_leaderboard_service',
    'StatsService', 'apply_game_result',
    'check_achievements', 'get_achievement_progress'
]
