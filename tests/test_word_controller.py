from daily_wordle.services import get_game_service
from daily_wordle.services.storage_service import STATE_COLLECTION, USERS_COLLECTION
from daily_wordle.utils.helpers import get_date_str


def test_scores_guess_against_todays_word(http, set_todays_word):
    set_todays_word('alloy')

    response = http.get('/router?word=LLAMA')

    assert response.status_code == 200
    assert response.get_json() == [1, 2, 1, 0, 0]


def test_check_word_route(http, set_todays_word):
    set_todays_word('crane')

    response = http.get('/checkWord', query_string={'word': 'crane'})

    assert response.status_code == 200
    assert response.get_json() == [2, 2, 2, 2, 2]


def test_first_request_of_the_day_creates_the_word(http, app_store):
    assert app_store.get(STATE_COLLECTION, get_date_str()) is None

    response = http.get('/router?word=crane')

    assert response.status_code == 200
    stored = app_store.get(STATE_COLLECTION, get_date_str())
    assert stored['date'] == get_date_str()
    assert len(stored['word']) == 5

    # Later requests reuse it
    http.get('/router?word=slate')
    assert app_store.get(STATE_COLLECTION, get_date_str()) == stored


def test_missing_word_is_invalid_request(http):
    response = http.get('/router')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'INVALID_REQUEST'


def test_wrong_length_is_invalid_request(http):
    response = http.get('/router?word=cran')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'INVALID_REQUEST'


def test_unknown_word_is_invalid_word(http, app_store):
    response = http.get('/router?word=zzzzz')

    assert response.status_code == 400
    body = response.get_json()
    assert body['error'] == 'INVALID_WORD'
    assert body['message']
    # Validation fails before the daily word is touched
    assert app_store.get(STATE_COLLECTION, get_date_str()) is None


def test_storage_failure_is_internal_error(http, monkeypatch):
    def broken_get(collection, key):
        raise ConnectionError('store unavailable')

    monkeypatch.setattr(get_game_service().daily_words.store, 'get', broken_get)

    response = http.get('/router?word=crane')

    assert response.status_code == 500
    assert response.get_json()['error'] == 'INTERNAL_SERVER_ERROR'


def test_disallowed_origin_rejected(http):
    response = http.get('/router?word=crane', headers={'Origin': 'https://evil.example.com'})

    assert response.status_code == 403
    assert response.get_json()['error'] == 'FORBIDDEN_ORIGIN'


def test_allowed_origin_gets_cors_headers(http, set_todays_word):
    set_todays_word('crane')

    response = http.get('/router?word=crane', headers={'Origin': 'http://localhost:3000'})

    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'


def test_leaderboard_through_router(http, app_store):
    app_store.set(USERS_COLLECTION, 'u1', {
        'displayName': 'Jane Q Doe',
        'stats': {'gamesPlayed': 4, 'gamesWon': 3, 'maxStreak': 2, 'currentStreak': 1, 'averageGuesses': 4.2}
    })
    app_store.set(USERS_COLLECTION, 'u2', {'displayName': 'Nobody', 'stats': {'gamesPlayed': 0}})

    response = http.get('/router?action=getLeaderboard&metric=maxStreak')

    assert response.status_code == 200
    body = response.get_json()
    assert body['metric'] == 'maxStreak'
    assert body['totalUsers'] == 1
    assert body['leaderboard'][0]['displayName'] == 'Jane D.'
    assert body['leaderboard'][0]['stats']['winRate'] == 75


def test_leaderboard_unknown_metric_falls_back(http):
    response = http.get('/leaderboard?metric=bogus')

    assert response.status_code == 200
    assert response.get_json() == {'leaderboard': [], 'metric': 'winRate', 'totalUsers': 0}


def test_health(http):
    response = http.get('/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert body['store_backend'] == 'memory'
    assert body['word_stats']['total_answers'] > 0
