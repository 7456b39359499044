"""
Keyboard hints and status text derived from a GameSession.

Everything here is recomputed from the session on every call.
"""

import string
from typing import Dict

from ..config.game_settings import WORD_LENGTH, NUM_ATTEMPTS
from ..models.game import GameSession
from .state_machine import KEY_ENTER, KEY_BACKSPACE

KEYBOARD_LAYOUT = [
    list("QWERTYUIOP"),
    list("ASDFGHJKL"),
    [KEY_BACKSPACE] + list("ZXCVBNM") + [KEY_ENTER],
]


def keyboard_theme(session: GameSession) -> Dict[str, str]:
    """
    Theme name per key: 'correct' for letters known to be in the word,
    'absent' for letters ruled out, 'default' otherwise.
    """
    theme = {}
    for letter in string.ascii_uppercase:
        if letter in session.found_letters:
            theme[letter] = 'correct'
        elif letter in session.absent_letters:
            theme[letter] = 'absent'
        else:
            theme[letter] = 'default'

    theme[KEY_ENTER] = 'default'
    theme[KEY_BACKSPACE] = 'emphasis' if session.invalid_word else 'default'
    return theme


def status_message(session: GameSession) -> str:
    if session.checking:
        return "Checking word..."
    if session.won:
        return "Amazing! You got it! Come back tomorrow for a new challenge!"
    if session.lost:
        return "Game over! The word was tough today. Try again tomorrow!"
    if session.invalid_word:
        return "Not a valid word. Try something else!"
    if session.current_row:
        attempts_left = NUM_ATTEMPTS - session.current_row
        return f"{attempts_left} {'attempt' if attempts_left == 1 else 'attempts'} left"
    return f"Welcome! Guess the {WORD_LENGTH}-letter word in {NUM_ATTEMPTS} attempts."


def status_class(session: GameSession) -> str:
    if session.checking:
        return "loading"
    if session.won:
        return "win"
    if session.lost:
        return "lose"
    if session.invalid_word:
        return "invalid"
    return ""
