from datetime import datetime, timezone

import pytest

from daily_wordle.client import KEY_ENTER, KEY_BACKSPACE, GameClient, GuessOutcome, NETWORK_ERROR, WordCheckClient
from daily_wordle.models import GameSession, new_session
from daily_wordle.services import StatsService
from daily_wordle.services.storage_service import GAMES_COLLECTION, USERS_COLLECTION

TODAY = '20240517'
ALL_CORRECT = GuessOutcome(result=(2, 2, 2, 2, 2))
ALL_MISSING = GuessOutcome(result=(0, 0, 0, 0, 0))


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class CountingStatsService(StatsService):
    def __init__(self, store):
        super().__init__(store)
        self.calls = []

    def record_game_end(self, user_id, won, attempts, date_key):
        self.calls.append((user_id, won, attempts, date_key))
        return super().record_game_end(user_id, won, attempts, date_key)


@pytest.fixture
def clock():
    return Clock(datetime(2024, 5, 17, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def stats_service(store):
    return CountingStatsService(store)


@pytest.fixture
def make_client(store, stats_service, clock):
    def _make(checker):
        client = GameClient('u1', store, checker, stats_service=stats_service, clock=clock)
        client.load()
        return client
    return _make


def enter(client, word):
    for key in word:
        client.on_key_down(key)
    return client.on_key_down(KEY_ENTER)


def test_user_id_required(store, scripted_checker):
    with pytest.raises(ValueError):
        GameClient('', store, scripted_checker())


def test_first_try_win_records_stats_once(make_client, scripted_checker, stats_service, store):
    checker = scripted_checker(ALL_CORRECT)
    client = make_client(checker)

    session = enter(client, 'crane')

    assert checker.words == ['CRANE']
    assert session.won
    assert stats_service.calls == [('u1', True, 1, TODAY)]

    stats = client.stats
    assert (stats.games_played, stats.games_won, stats.current_streak) == (1, 1, 1)
    assert stats.guess_distribution[0] == 1

    saved = GameSession.from_dict(store.get(GAMES_COLLECTION, 'u1'))
    assert saved.won
    assert saved.last_played_date == TODAY

    # Keys after the game is over change nothing and record nothing
    enter(client, 'slate')
    assert stats_service.calls == [('u1', True, 1, TODAY)]


def test_loss_after_six_rows(make_client, scripted_checker, stats_service):
    client = make_client(scripted_checker(*[ALL_MISSING] * 6))

    for word in ('slate', 'pouts', 'llama', 'eerie', 'cigar', 'crane'):
        session = enter(client, word)

    assert session.lost
    assert stats_service.calls == [('u1', False, 6, TODAY)]
    assert client.stats.current_streak == 0


def test_each_scored_row_is_saved(make_client, scripted_checker, store):
    client = make_client(scripted_checker(ALL_MISSING))

    enter(client, 'slate')

    saved = GameSession.from_dict(store.get(GAMES_COLLECTION, 'u1'))
    assert saved.current_row == 1
    assert saved.absent_letters == {'S', 'L', 'A', 'T', 'E'}


def test_invalid_word_is_not_saved(make_client, scripted_checker, store):
    client = make_client(scripted_checker(GuessOutcome(error='INVALID_WORD', message='Not a word')))
    before = store.get(GAMES_COLLECTION, 'u1')

    session = enter(client, 'zzzzz')

    assert session.invalid_word
    assert store.get(GAMES_COLLECTION, 'u1') == before

    session = client.on_key_down(KEY_BACKSPACE)
    assert not session.invalid_word


def test_network_error_reopens_row(make_client, scripted_checker, store):
    client = make_client(scripted_checker(GuessOutcome(error=NETWORK_ERROR), ALL_MISSING))
    before = store.get(GAMES_COLLECTION, 'u1')

    session = enter(client, 'slate')

    assert not session.checking
    assert session.current_row == 0
    assert session.active_word == 'SLATE'
    assert store.get(GAMES_COLLECTION, 'u1') == before

    # Enter again resubmits the same row
    session = client.on_key_down(KEY_ENTER)
    assert session.current_row == 1


@pytest.mark.parametrize('yesterday', [
    new_session('20240516'),
    GameSession(won=True, current_row=None, current_letter=None, last_played_date='20240516'),
    GameSession(lost=True, current_row=None, current_letter=None, last_played_date='20240516'),
], ids=['in_progress', 'won', 'lost'])
def test_load_resets_yesterdays_session(store, scripted_checker, stats_service, clock, yesterday):
    store.set(GAMES_COLLECTION, 'u1', yesterday.to_dict())

    client = GameClient('u1', store, scripted_checker(), stats_service=stats_service, clock=clock)
    session = client.load()

    assert session == new_session(TODAY)
    assert store.get(GAMES_COLLECTION, 'u1')['lastPlayedDate'] == TODAY
    assert stats_service.calls == []


def test_load_keeps_todays_session(make_client, scripted_checker, store, stats_service, clock):
    client = make_client(scripted_checker(ALL_MISSING))
    enter(client, 'slate')

    reloaded = GameClient('u1', store, scripted_checker(), stats_service=stats_service, clock=clock)

    assert reloaded.load() == client.session


def test_day_rollover_mid_game(make_client, scripted_checker, clock, store):
    client = make_client(scripted_checker())
    client.press('C')

    clock.now = datetime(2024, 5, 18, 0, 0, 1, tzinfo=timezone.utc)
    client.press('S')

    assert client.session.last_played_date == '20240518'
    assert client.session.active_word == 'S'
    assert store.get(GAMES_COLLECTION, 'u1')['lastPlayedDate'] == '20240518'


def test_response_from_previous_day_discarded(make_client, scripted_checker, clock):
    client = make_client(scripted_checker())
    for key in 'crane':
        client.press(key)
    request = client.press(KEY_ENTER)

    clock.now = datetime(2024, 5, 18, 0, 0, 1, tzinfo=timezone.utc)
    client.press(KEY_BACKSPACE)

    session = client.complete(request, ALL_CORRECT)

    assert not session.won
    assert session.last_played_date == '20240518'


def test_load_records_finished_game_missing_from_stats(store, scripted_checker, stats_service, clock):
    client = GameClient('u1', store, scripted_checker(ALL_MISSING, ALL_CORRECT), clock=clock)
    client.load()
    enter(client, 'slate')
    enter(client, 'crane')
    # Drop the stats that were just written, as if the write had failed
    store.set(USERS_COLLECTION, 'u1', {})

    recovered = GameClient('u1', store, scripted_checker(), stats_service=stats_service, clock=clock)
    recovered.load()

    assert stats_service.calls == [('u1', True, 2, TODAY)]
    assert recovered.stats.guess_distribution[1] == 1

    # Loading again does not record it twice
    recovered.load()
    assert len(stats_service.calls) == 1
    assert recovered.stats.games_played == 1


class ServerChecker:
    """Sends guesses to the Flask app through its test client."""

    def __init__(self, http):
        self.http = http

    def check_word(self, word):
        response = self.http.get('/router', query_string={'word': word})
        payload = response.get_json()
        if isinstance(payload, dict):
            return GuessOutcome(error=payload['error'], message=payload.get('message', ''))
        return GuessOutcome(result=tuple(payload))


def test_plays_against_the_server(http, set_todays_word, store):
    set_todays_word('crane')
    stats_service = CountingStatsService(store)
    client = GameClient('u1', store, ServerChecker(http), stats_service=stats_service)
    client.load()

    session = enter(client, 'zzzzz')
    assert session.invalid_word

    for _ in range(5):
        client.on_key_down(KEY_BACKSPACE)
    enter(client, 'trace')
    session = enter(client, 'crane')

    assert session.won
    assert session.found_letters == {'C', 'R', 'A', 'N', 'E'}
    assert len(stats_service.calls) == 1
    assert stats_service.calls[0][1:3] == (True, 2)


class BrokenChecker:
    def __init__(self):
        self.calls = 0

    def check_word(self, word):
        self.calls += 1
        raise RuntimeError('checker exploded')


def test_checker_exception_reopens_row(make_client, store):
    checker = BrokenChecker()
    client = make_client(checker)
    before = store.get(GAMES_COLLECTION, 'u1')

    session = enter(client, 'crane')

    assert not session.checking
    assert client.pending is None
    assert session.active_word == 'CRANE'
    assert store.get(GAMES_COLLECTION, 'u1') == before

    # The row can be resubmitted and edited
    client.on_key_down(KEY_ENTER)
    assert checker.calls == 2
    assert client.on_key_down(KEY_BACKSPACE).active_word == 'CRAN'


def test_malformed_server_reply_reopens_row(make_client):
    class NullCodesSession:
        def get(self, url, params=None, timeout=None):
            return NullCodesResponse()

    class NullCodesResponse:
        status_code = 200

        def json(self):
            return [None, 0, 0, 0, 0]

    client = make_client(WordCheckClient('http://wordle.test', session=NullCodesSession()))

    session = enter(client, 'crane')

    assert not session.checking
    assert session.current_row == 0
    assert client.on_key_down(KEY_BACKSPACE).active_word == 'CRAN'
