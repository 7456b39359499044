"""
Statistics Data Models

Contains the per-user aggregate statistics that survive across days.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import NUM_ATTEMPTS


def _empty_distribution() -> Tuple[int, ...]:
    return tuple(0 for _ in range(NUM_ATTEMPTS))


@dataclass(frozen=True)
class AggregateStats:
    """
    Lifetime statistics for one user.

    guess_distribution[k] counts wins in exactly k + 1 guesses.
    last_recorded_date is the date key of the last game folded in, so a
    finished game can never be counted twice.
    """
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    total_guesses: int = 0
    average_guesses: float = 0.0
    guess_distribution: Tuple[int, ...] = field(default_factory=_empty_distribution)
    achievements: Tuple[Dict, ...] = ()
    last_recorded_date: Optional[str] = None

    @property
    def achievement_ids(self) -> List[str]:
        return [achievement.get('id') for achievement in self.achievements]

    def to_dict(self) -> Dict:
        return {
            'gamesPlayed': self.games_played,
            'gamesWon': self.games_won,
            'currentStreak': self.current_streak,
            'maxStreak': self.max_streak,
            'totalGuesses': self.total_guesses,
            'averageGuesses': self.average_guesses,
            'guessDistribution': list(self.guess_distribution),
            'achievements': [dict(achievement) for achievement in self.achievements],
            'lastRecordedDate': self.last_recorded_date
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> 'AggregateStats':
        if not data:
            return cls()

        distribution = list(data.get('guessDistribution') or [])[:NUM_ATTEMPTS]
        distribution += [0] * (NUM_ATTEMPTS - len(distribution))

        return cls(
            games_played=int(data.get('gamesPlayed') or 0),
            games_won=int(data.get('gamesWon') or 0),
            current_streak=int(data.get('currentStreak') or 0),
            max_streak=int(data.get('maxStreak') or 0),
            total_guesses=int(data.get('totalGuesses') or 0),
            average_guesses=float(data.get('averageGuesses') or 0),
            guess_distribution=tuple(int(count) for count in distribution),
            achievements=tuple(dict(achievement) for achievement in data.get('achievements') or []),
            last_recorded_date=data.get('lastRecordedDate')
        )
