import os
import tempfile

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily_wordle_logs_'))

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.services.storage_service import MemoryDocumentStore, get_storage_service, STATE_COLLECTION
from daily_wordle.utils.helpers import get_date_str


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def app_store(app):
    return get_storage_service()


@pytest.fixture
def set_todays_word(app_store):
    def _set(word):
        date_key = get_date_str()
        app_store.set(STATE_COLLECTION, date_key, {'date': date_key, 'word': word})
    return _set


@pytest.fixture
def store():
    return MemoryDocumentStore()


class ScriptedChecker:
    """Returns queued outcomes in order and remembers the words it was asked about."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.words = []

    def check_word(self, word):
        self.words.append(word)
        return self.outcomes.pop(0)


@pytest.fixture
def scripted_checker():
    return ScriptedChecker

