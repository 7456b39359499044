"""
Stats Service

Folds finished games into a user's aggregate statistics, at most once per
user per day.
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Tuple

from .achievement_service import check_achievements
from .storage_service import DocumentStore, USERS_COLLECTION
from ..config.game_settings import NUM_ATTEMPTS
from ..models.stats import AggregateStats
from ..models.user import User
from ..utils.helpers import round_half_up
from ..utils.game_logger import game_logger


def apply_game_result(stats: AggregateStats,
                      won: bool,
                      attempts: int,
                      date_key: str,
                      earned_at: Optional[datetime] = None) -> Tuple[AggregateStats, bool]:
    """
    Fold one finished game into `stats`.

    Args:
        stats: Statistics before the game
        won: Whether the game was won
        attempts: Rows used, 1..NUM_ATTEMPTS
        date_key: Day the game belongs to
        earned_at: Timestamp for any achievements earned

    Returns:
        Tuple of (new statistics, whether anything changed). A game for a
        day that was already recorded leaves the statistics untouched.
    """
    if not 1 <= attempts <= NUM_ATTEMPTS:
        raise ValueError(f"attempts must be between 1 and {NUM_ATTEMPTS}, got {attempts}")

    if stats.last_recorded_date == date_key:
        return stats, False

    games_played = stats.games_played + 1
    distribution = list(stats.guess_distribution)

    if won:
        games_won = stats.games_won + 1
        current_streak = stats.current_streak + 1
        distribution[attempts - 1] += 1
        total_guesses = stats.total_guesses + attempts
    else:
        games_won = stats.games_won
        current_streak = 0
        # A loss costs the full set of attempts
        total_guesses = stats.total_guesses + NUM_ATTEMPTS

    updated = replace(
        stats,
        games_played=games_played,
        games_won=games_won,
        current_streak=current_streak,
        max_streak=max(stats.max_streak, current_streak),
        total_guesses=total_guesses,
        average_guesses=round_half_up(total_guesses / games_played, 1),
        guess_distribution=tuple(distribution),
        last_recorded_date=date_key
    )

    new_achievements = check_achievements(updated, attempts, won, earned_at)
    if new_achievements:
        updated = replace(updated, achievements=updated.achievements + tuple(new_achievements))

    return updated, True


class StatsService:
    """Reads and writes the `stats` field of user profile documents."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get_user(self, user_id: str) -> User:
        return User.from_dict(user_id, self.store.get(USERS_COLLECTION, user_id))

    def get_stats(self, user_id: str) -> AggregateStats:
        return self.get_user(user_id).stats

    def save_profile(self, user_id: str, profile: Dict) -> User:
        """
        Refresh the identity fields of a profile, keeping its statistics.

        Args:
            user_id: Opaque id from the identity provider
            profile: displayName, photoURL, email and createdAt as provided
        """
        user = self.get_user(user_id)
        user.display_name = profile.get('displayName', user.display_name)
        user.photo_url = profile.get('photoURL', user.photo_url)
        user.email = profile.get('email', user.email)
        user.created_at = profile.get('createdAt', user.created_at)
        self.store.set(USERS_COLLECTION, user_id, user.to_dict())
        return user

    def record_game_end(self, user_id: str, won: bool, attempts: int, date_key: str) -> Tuple[AggregateStats, bool]:
        """
        Record a finished game for `user_id`.

        Returns:
            Tuple of (current statistics, whether this call recorded the game)
        """
        user = self.get_user(user_id)
        stats, recorded = apply_game_result(user.stats, won, attempts, date_key)

        if not recorded:
            game_logger.logger.warning(
                f"Game for {date_key} already recorded for user {user_id}; skipping stats update"
            )
            return stats, False

        user.stats = stats
        self.store.set(USERS_COLLECTION, user_id, user.to_dict())

        game_logger.log_game_event(
            date_key, 'stats_recorded', user_id,
            won=won, attempts=attempts,
            games_played=stats.games_played, current_streak=stats.current_streak
        )
        return stats, True
