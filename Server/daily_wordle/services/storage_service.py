"""
Storage Service

Document-style key/value storage used for the daily word, the dictionary,
user profiles with their statistics, and saved game sessions.
"""

import copy
import threading
from typing import Dict, Iterator, Optional, Tuple

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..utils.game_logger import game_logger

STATE_COLLECTION = 'state'
WORDS_COLLECTION = 'words'
USERS_COLLECTION = 'users'
GAMES_COLLECTION = 'games'


class DocumentStore:
    """
    Interface of the storage collaborator.

    Documents are plain dicts addressed by (collection, key). `set` fully
    overwrites; there is no partial update and no locking.
    """

    def get(self, collection: str, key: str) -> Optional[Dict]:
        raise NotImplementedError

    def set(self, collection: str, key: str, document: Dict) -> None:
        raise NotImplementedError

    def scan(self, collection: str) -> Iterator[Tuple[str, Dict]]:
        raise NotImplementedError

    def close_connection(self) -> None:
        pass


class MongoDocumentStore(DocumentStore):
    """
    MongoDB-backed store. The document key is stored as `_id`.
    """

    def __init__(self, mongo_uri: str, db_name: str = 'daily_wordle'):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the game collections
        """
        self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.db = self.client[db_name]

        # Test connection
        try:
            self.client.admin.command('ping')
            game_logger.logger.info("Successfully connected to MongoDB")
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

    def get(self, collection: str, key: str) -> Optional[Dict]:
        document = self.db[collection].find_one({'_id': key})
        if document is None:
            return None
        document.pop('_id', None)
        return document

    def set(self, collection: str, key: str, document: Dict) -> None:
        self.db[collection].replace_one({'_id': key}, dict(document), upsert=True)

    def scan(self, collection: str) -> Iterator[Tuple[str, Dict]]:
        for document in self.db[collection].find({}):
            key = document.pop('_id')
            yield str(key), document

    def close_connection(self) -> None:
        self.client.close()


class MemoryDocumentStore(DocumentStore):
    """
    In-process store for development and tests. Callers always receive
    copies, so mutating a returned document never changes stored state.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict]] = {}
        self._lock = threading.Lock()

    def get(self, collection: str, key: str) -> Optional[Dict]:
        with self._lock:
            document = self._collections.get(collection, {}).get(key)
            return copy.deepcopy(document) if document is not None else None

    def set(self, collection: str, key: str, document: Dict) -> None:
        with self._lock:
            self._collections.setdefault(collection, {})[key] = copy.deepcopy(document)

    def scan(self, collection: str) -> Iterator[Tuple[str, Dict]]:
        with self._lock:
            snapshot = copy.deepcopy(self._collections.get(collection, {}))
        yield from snapshot.items()


# Global service instance
_storage_service = None


def get_storage_service() -> Optional[DocumentStore]:
    """Get the global document store instance."""
    return _storage_service


def initialize_storage_service(config_class) -> DocumentStore:
    """Initialize the global document store from configuration."""
    global _storage_service
    if config_class.STORE_BACKEND == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("STORE_BACKEND is 'mongo' but MONGO_URI is not configured")
        _storage_service = MongoDocumentStore(config_class.MONGO_URI, config_class.MONGO_DB_NAME)
    elif config_class.STORE_BACKEND == 'memory':
        _storage_service = MemoryDocumentStore()
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {config_class.STORE_BACKEND}")
    return _storage_service
