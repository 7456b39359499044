from datetime import datetime, timezone, timedelta

from daily_wordle.config import validate_word_list_integrity, get_word_statistics, DICTIONARY_WORDS, ANSWER_WORDS
from daily_wordle.utils import get_date_str, get_time_until_next_word, calculate_win_percentage, round_half_up


def test_date_key_is_zero_padded():
    assert get_date_str(datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc)) == '20240105'


def test_date_key_converts_to_utc():
    tokyo_morning = datetime(2024, 5, 18, 7, 0, tzinfo=timezone(timedelta(hours=9)))
    assert get_date_str(tokyo_morning) == '20240517'


def test_naive_datetime_treated_as_utc():
    assert get_date_str(datetime(2024, 12, 31, 23, 59)) == '20241231'


def test_time_until_next_word():
    remaining = get_time_until_next_word(datetime(2024, 5, 17, 22, 30, 15, tzinfo=timezone.utc))

    assert (remaining['hours'], remaining['minutes'], remaining['seconds']) == (1, 29, 45)
    assert remaining['time_string'] == '01:29:45'
    assert remaining['time_remaining'] == (1 * 3600 + 29 * 60 + 45) * 1000


def test_win_percentage():
    assert calculate_win_percentage(0, 0) == 0
    assert calculate_win_percentage(3, 2) == 67
    assert calculate_win_percentage(8, 1) == 13


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(2.25, 1) == 2.3
    assert round_half_up(3.0, 1) == 3.0


def test_bundled_word_lists():
    assert validate_word_list_integrity()
    assert set(ANSWER_WORDS) <= DICTIONARY_WORDS
    assert {'llama', 'pouts', 'slate'} <= DICTIONARY_WORDS

    stats = get_word_statistics()
    assert stats['total_answers'] == len(ANSWER_WORDS)
    assert len(stats['most_common_letters']) == 5
