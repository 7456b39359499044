"""
Dictionary Service

Answers whether a 5-letter string is an accepted guess.
"""

from typing import Iterable, Optional

from .storage_service import DocumentStore, WORDS_COLLECTION
from ..config.game_settings import DICTIONARY_WORDS


class DictionaryService:
    """
    Set-membership oracle for guesses.

    Backed either by an in-memory word set (the bundled dictionary) or by
    the `words` collection of the document store, one document per word.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, store: Optional[DocumentStore] = None):
        if words is None and store is None:
            raise ValueError("DictionaryService needs a word list or a document store")
        self.words = frozenset(word.lower() for word in words) if words is not None else None
        self.store = store

    def contains(self, word: str) -> bool:
        """Case-insensitive membership check."""
        normalized = word.strip().lower()
        if self.words is not None:
            return normalized in self.words
        return self.store.get(WORDS_COLLECTION, normalized) is not None

    def seed_store(self, store: DocumentStore, words: Iterable[str] = DICTIONARY_WORDS) -> int:
        """Copy a word list into the store's `words` collection. Returns the count written."""
        count = 0
        for word in sorted(words):
            store.set(WORDS_COLLECTION, word.lower(), {'word': word.lower()})
            count += 1
        return count


# Global service instance
_dictionary_service = None


def get_dictionary_service() -> Optional[DictionaryService]:
    """Get the global dictionary service instance."""
    return _dictionary_service


def initialize_dictionary_service(config_class, store: Optional[DocumentStore] = None) -> DictionaryService:
    """Initialize the global dictionary service instance."""
    global _dictionary_service
    if config_class.DICTIONARY_SOURCE == 'store':
        _dictionary_service = DictionaryService(store=store)
    else:
        _dictionary_service = DictionaryService(words=DICTIONARY_WORDS)
    return _dictionary_service
