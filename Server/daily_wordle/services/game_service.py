"""
Game Service

Contains the guess scoring algorithm and the guess evaluation flow used by
the word check endpoint.
"""

from collections import Counter
from datetime import datetime
from typing import List, Optional, Tuple

from .daily_word_service import DailyWordService
from .dictionary_service import DictionaryService
from ..config.game_settings import WORD_LENGTH
from ..models.game import GuessResult

INVALID_REQUEST = 'INVALID_REQUEST'
INVALID_WORD = 'INVALID_WORD'
INTERNAL_SERVER_ERROR = 'INTERNAL_SERVER_ERROR'


def score_guess(secret_word: str, guess: str) -> List[GuessResult]:
    """
    Score a guess against the secret word, letter by letter.

    Exact matches are reserved first, so a repeated letter in the guess is
    only credited PRESENT as many times as it is still unaccounted for in
    the secret word.

    Args:
        secret_word: The answer
        guess: The guessed word, same length as the answer

    Returns:
        List[GuessResult]: One code per position
    """
    secret = secret_word.lower()
    guessed = guess.lower()
    if len(secret) != WORD_LENGTH or len(guessed) != WORD_LENGTH:
        raise ValueError(f"Both words must be {WORD_LENGTH} letters long")

    result = [GuessResult.MISSING] * WORD_LENGTH
    remaining = Counter(secret)

    # First pass: exact matches
    for i, (s, g) in enumerate(zip(secret, guessed)):
        if g == s:
            result[i] = GuessResult.CORRECT
            remaining[g] -= 1

    # Second pass: misplaced letters, left to right
    for i, g in enumerate(guessed):
        if result[i] == GuessResult.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = GuessResult.PRESENT
            remaining[g] -= 1

    return result


class GameService:
    """
    Composes the dictionary, the daily word and the scorer into one
    request/response cycle. Holds no per-request state.
    """

    def __init__(self, dictionary: DictionaryService, daily_words: DailyWordService):
        self.dictionary = dictionary
        self.daily_words = daily_words

    def is_valid_guess(self, guess) -> Tuple[bool, Optional[str], str]:
        """
        Validates a guess. The first failing check wins.

        Args:
            guess: The raw `word` query parameter

        Returns:
            Tuple of (is_valid, error_code, error_message)
        """
        if not guess or not isinstance(guess, str) or len(guess) != WORD_LENGTH:
            return False, INVALID_REQUEST, f"A {WORD_LENGTH}-letter word must be provided as a query parameter."

        # Any dictionary word is a valid guess, whether or not it is today's word
        if not self.dictionary.contains(guess):
            return False, INVALID_WORD, "The guessed word is not in our dictionary."

        return True, None, ""

    def make_guess(self, guess: str, now: Optional[datetime] = None) -> Tuple[str, List[GuessResult]]:
        """
        Scores a validated guess against today's word, creating the word if
        this is the first guess of the day.

        Returns:
            Tuple of (date_key, result codes)
        """
        daily_word = self.daily_words.get_word_for_today(now)
        return daily_word.date, score_guess(daily_word.word, guess.lower())


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: DictionaryService, daily_words: DailyWordService) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, daily_words)
    return _game_service
