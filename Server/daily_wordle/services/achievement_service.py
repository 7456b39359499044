"""
Achievement Service

Milestone badges awarded from a user's aggregate statistics.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..models.stats import AggregateStats

ACHIEVEMENTS: Dict[str, Dict[str, str]] = {
    'FIRST_WIN': {
        'title': 'First Victory',
        'description': 'Win your first game',
        'category': 'milestone'
    },
    'FIRST_STREAK': {
        'title': 'Getting Started',
        'description': 'Start your first winning streak',
        'category': 'streak'
    },
    'STREAK_3': {
        'title': 'On Fire',
        'description': 'Maintain a 3-day winning streak',
        'category': 'streak'
    },
    'STREAK_7': {
        'title': 'Week Warrior',
        'description': 'Maintain a 7-day winning streak',
        'category': 'streak'
    },
    'STREAK_30': {
        'title': 'Month Master',
        'description': 'Maintain a 30-day winning streak',
        'category': 'streak'
    },
    'STREAK_100': {
        'title': 'Century Club',
        'description': 'Maintain a 100-day winning streak',
        'category': 'streak'
    },
    'PERFECT_GAME': {
        'title': 'Perfect Score',
        'description': 'Solve the word in 1 guess',
        'category': 'performance'
    },
    'GAMES_10': {
        'title': 'Getting the Hang of It',
        'description': 'Play 10 games',
        'category': 'milestone'
    },
    'GAMES_50': {
        'title': 'Veteran',
        'description': 'Play 50 games',
        'category': 'milestone'
    },
    'GAMES_100': {
        'title': 'Master',
        'description': 'Play 100 games',
        'category': 'milestone'
    },
}

STREAK_MILESTONES = [3, 7, 30, 100]
GAME_MILESTONES = [10, 50, 100, 365]


def _earned(stats: AggregateStats, guesses: Optional[int], won: bool) -> List[str]:
    earned = []
    if stats.games_won == 1:
        earned.append('FIRST_WIN')
    if stats.current_streak == 1:
        earned.append('FIRST_STREAK')
    for milestone in STREAK_MILESTONES:
        if stats.current_streak >= milestone:
            earned.append(f'STREAK_{milestone}')
    if won and guesses == 1:
        earned.append('PERFECT_GAME')
    for milestone in GAME_MILESTONES[:3]:
        if stats.games_played >= milestone:
            earned.append(f'GAMES_{milestone}')
    return earned


def check_achievements(stats: AggregateStats,
                       guesses: Optional[int] = None,
                       won: bool = False,
                       earned_at: Optional[datetime] = None) -> List[Dict]:
    """
    New badge records earned by `stats` (already updated for the finished
    game). Badges the user already holds are never returned again.
    """
    earned_at = earned_at or datetime.now(timezone.utc)
    held = set(stats.achievement_ids)

    return [
        {'id': achievement_id, **ACHIEVEMENTS[achievement_id], 'earnedAt': earned_at.isoformat()}
        for achievement_id in _earned(stats, guesses, won)
        if achievement_id not in held
    ]


def _progress(current: int, milestones: List[int]) -> Dict:
    next_milestone = next((m for m in milestones if m > current), None)
    if next_milestone is None:
        return {'current': current, 'next': None, 'percentage': 100}

    previous = max((m for m in milestones if m <= current), default=0)
    percentage = min(100.0, (current - previous) / (next_milestone - previous) * 100)
    return {'current': current, 'next': next_milestone, 'percentage': percentage}


def get_achievement_progress(stats: AggregateStats) -> Dict[str, Dict]:
    """Progress toward the next streak and games-played milestones."""
    return {
        'streak': _progress(stats.current_streak, STREAK_MILESTONES),
        'games': _progress(stats.games_played, GAME_MILESTONES)
    }
