"""
Daily Word Service

Picks and persists the one secret word shared by every client on a given
UTC calendar day.
"""

import random
import re
from datetime import datetime
from typing import List, Optional

from .storage_service import DocumentStore, STATE_COLLECTION
from ..config.game_settings import ANSWER_WORDS
from ..models.game import DailyWord
from ..utils.helpers import get_date_str
from ..utils.game_logger import game_logger

DATE_KEY_PATTERN = re.compile(r'^\d{8}$')


class DailyWordService:
    """
    Create-if-absent accessor for the date -> word record.

    Nothing is cached in process: every call consults the store, so any
    number of server instances agree on the word. Creation is a plain
    read, write, re-read sequence. Two first requests of a day racing each
    other may both write; the word read back after the write is the one
    returned, and the last write is the one that sticks.
    """

    def __init__(self, store: DocumentStore, word_list: Optional[List[str]] = None, rng: Optional[random.Random] = None):
        self.store = store
        self.word_list = list(word_list if word_list is not None else ANSWER_WORDS)
        self.rng = rng or random.Random()

        if not self.word_list:
            raise ValueError("Word list cannot be empty")

    def ensure_word_for_date(self, date_key: str) -> str:
        """
        Return the word for `date_key`, creating it on first use.

        Args:
            date_key: UTC date in YYYYMMDD form

        Returns:
            str: The lowercase secret word
        """
        if not DATE_KEY_PATTERN.match(date_key):
            raise ValueError(f"Invalid date key: {date_key!r}")

        document = self.store.get(STATE_COLLECTION, date_key)

        if document is None:
            new_word = self.rng.choice(self.word_list).lower()
            self.store.set(STATE_COLLECTION, date_key, DailyWord(date=date_key, word=new_word).to_dict())
            game_logger.log_game_event(date_key, 'daily_word_created', 'server')

            # The stored record is the source of truth from here on
            document = self.store.get(STATE_COLLECTION, date_key)
            if document is None:
                raise RuntimeError(f"Daily word for {date_key} missing right after it was written")

        return document['word'].lower()

    def get_word_for_today(self, now: Optional[datetime] = None) -> DailyWord:
        """Resolve the word for the current UTC day."""
        date_key = get_date_str(now)
        return DailyWord(date=date_key, word=self.ensure_word_for_date(date_key))


# Global service instance
_daily_word_service = None


def get_daily_word_service() -> Optional[DailyWordService]:
    """Get the global daily word service instance."""
    return _daily_word_service


def initialize_daily_word_service(store: DocumentStore) -> DailyWordService:
    """Initialize the global daily word service instance."""
    global _daily_word_service
    _daily_word_service = DailyWordService(store)
    return _daily_word_service
