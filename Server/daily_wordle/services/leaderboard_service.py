"""
Leaderboard Service

Computes derived metrics from every user's stored statistics and returns
the top entries for a selectable metric.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .storage_service import DocumentStore, USERS_COLLECTION
from ..utils.helpers import calculate_win_percentage, round_half_up

DEFAULT_METRIC = 'winRate'
DEFAULT_LIMIT = 50

# Metric name -> sort descending?
LEADERBOARD_METRICS: Dict[str, bool] = {
    'winRate': True,
    'maxStreak': True,
    'currentStreak': True,
    'gamesPlayed': True,
    'averageGuesses': False,  # fewer guesses is better
}


def resolve_metric(metric: Optional[str]) -> str:
    """Unknown or missing metrics fall back to winRate."""
    return metric if metric in LEADERBOARD_METRICS else DEFAULT_METRIC


def redact_display_name(display_name: Optional[str]) -> str:
    """
    First name plus the initial of the last name, e.g. "Jane Q Doe" -> "Jane D.".
    """
    if not display_name or not display_name.strip():
        return 'Anonymous'

    tokens = display_name.split()
    if len(tokens) == 1:
        return tokens[0]
    return f"{tokens[0]} {tokens[-1][0]}."


def _derived_stats(stats: Dict) -> Dict:
    games_played = stats.get('gamesPlayed') or 0
    games_won = stats.get('gamesWon') or 0

    derived = dict(stats)
    derived['winRate'] = calculate_win_percentage(games_played, games_won)
    if derived.get('averageGuesses') is None:
        total_guesses = stats.get('totalGuesses') or 0
        derived['averageGuesses'] = round_half_up(total_guesses / games_played, 1) if games_played else 0
    return derived


def compute_leaderboard(users: Iterable[Dict],
                        metric: Optional[str] = DEFAULT_METRIC,
                        limit: int = DEFAULT_LIMIT) -> Tuple[List[Dict], int]:
    """
    Rank users by a metric.

    Args:
        users: Records of {id, displayName, photoURL, stats}
        metric: One of LEADERBOARD_METRICS; anything else ranks by winRate
        limit: Maximum number of entries returned

    Returns:
        Tuple of (top entries, number of users with at least one game)
    """
    metric = resolve_metric(metric)
    descending = LEADERBOARD_METRICS[metric]

    eligible = []
    for user in users:
        stats = user.get('stats') or {}
        if not stats.get('gamesPlayed'):
            continue
        eligible.append({
            'id': user.get('id'),
            'displayName': redact_display_name(user.get('displayName')),
            'photoURL': user.get('photoURL'),
            'stats': _derived_stats(stats)
        })

    # Users without a value for the metric rank last in either direction
    missing = 0 if descending else float('inf')

    def sort_key(entry):
        value = entry['stats'].get(metric)
        return value if value else missing

    # sorted() is stable in both directions, so ties keep input order
    ranked = sorted(eligible, key=sort_key, reverse=descending)

    return ranked[:max(limit, 0)], len(eligible)


class LeaderboardService:
    """Reads all user profiles from the store and ranks them on demand."""

    def __init__(self, store: DocumentStore, max_limit: int = DEFAULT_LIMIT):
        self.store = store
        self.max_limit = max_limit

    def get_leaderboard(self, metric: Optional[str] = DEFAULT_METRIC, limit: Optional[int] = None) -> Dict:
        """
        Returns:
            dict: leaderboard entries, the metric actually used and totalUsers
        """
        if limit is None:
            limit = self.max_limit
        limit = min(max(limit, 1), self.max_limit)

        users = ({'id': user_id, **document} for user_id, document in self.store.scan(USERS_COLLECTION))
        leaderboard, total_users = compute_leaderboard(users, metric, limit)

        return {
            'leaderboard': leaderboard,
            'metric': resolve_metric(metric),
            'totalUsers': total_users
        }


# Global service instance
_leaderboard_service = None


def get_leaderboard_service() -> Optional[LeaderboardService]:
    """Get the global leaderboard service instance."""
    return _leaderboard_service


def initialize_leaderboard_service(store: DocumentStore, max_limit: int = DEFAULT_LIMIT) -> LeaderboardService:
    """Initialize the global leaderboard service instance."""
    global _leaderboard_service
    _leaderboard_service = LeaderboardService(store, max_limit)
    return _leaderboard_service
