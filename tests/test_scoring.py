from collections import Counter

import pytest

from daily_wordle.config import ANSWER_WORDS
from daily_wordle.models import GuessResult
from daily_wordle.services import score_guess

MISSING, PRESENT, CORRECT = GuessResult.MISSING, GuessResult.PRESENT, GuessResult.CORRECT


def test_repeated_letters_credited_only_as_often_as_they_remain():
    # The L at position 1 is exact, leaving one L for position 0 and one A for position 2
    assert score_guess('alloy', 'llama') == [PRESENT, CORRECT, PRESENT, MISSING, MISSING]


def test_exact_match():
    assert score_guess('crane', 'crane') == [CORRECT] * 5


def test_no_overlap():
    assert score_guess('crane', 'pouts') == [MISSING] * 5


def test_exact_match_reserved_before_misplaced_credit():
    # The E at position 4 is exact, so the earlier E gets nothing
    assert score_guess('crane', 'eerie') == [MISSING, MISSING, PRESENT, MISSING, CORRECT]


def test_case_insensitive():
    assert score_guess('CRANE', 'crAne') == [CORRECT] * 5


def test_wire_values():
    assert [int(code) for code in score_guess('crane', 'react')] == [1, 1, 2, 1, 0]


def test_rejects_wrong_length():
    with pytest.raises(ValueError):
        score_guess('crane', 'cranes')


@pytest.mark.parametrize('secret', ['alloy', 'eerie', 'llama', 'geese', 'sassy', 'crane'])
def test_credit_never_exceeds_letter_count(secret):
    secret_counts = Counter(secret)
    for guess in ANSWER_WORDS[:200] + ['eerie', 'llama', 'sassy', 'geese']:
        codes = score_guess(secret, guess)
        credited = Counter(letter for letter, code in zip(guess, codes) if code != MISSING)
        for letter, count in credited.items():
            assert count <= secret_counts[letter]
