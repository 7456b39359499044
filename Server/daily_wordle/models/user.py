"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .stats import AggregateStats


@dataclass
class User:
    """
    Profile document stored under the user's opaque identity id.

    The identity provider owns these fields; the game only reads them and
    keeps `stats` current.
    """
    id: str
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    stats: AggregateStats = field(default_factory=AggregateStats)

    def to_dict(self) -> Dict:
        return {
            'displayName': self.display_name,
            'photoURL': self.photo_url,
            'email': self.email,
            'createdAt': self.created_at,
            'stats': self.stats.to_dict()
        }

    @classmethod
    def from_dict(cls, user_id: str, data: Optional[Dict]) -> 'User':
        data = data or {}
        return cls(
            id=user_id,
            display_name=data.get('displayName'),
            photo_url=data.get('photoURL'),
            email=data.get('email'),
            created_at=data.get('createdAt'),
            stats=AggregateStats.from_dict(data.get('stats'))
        )
