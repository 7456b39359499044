"""
Client Package

The in-browser half of the game, expressed as plain Python: the key-event
state machine, keyboard hints, the HTTP client for the word check endpoint
and the GameClient tying them to storage.
"""

from .state_machine import (
    KEY_ENTER, KEY_BACKSPACE, GuessRequest, GuessOutcome, GameEnd,
    press_key, resolve_guess, reset_for_date, is_stale, attempts_used
)
from .keyboard import KEYBOARD_LAYOUT, keyboard_theme, status_message, status_class
from .api import WordCheckClient, NETWORK_ERROR
from .game_client import GameClient

__all__ = [
    'KEY_ENTER', 'KEY_BACKSPACE', 'GuessRequest', 'GuessOutcome', 'GameEnd',
    'press_key', 'resolve_guess', 'reset_for_date', 'is_stale', 'attempts_used',
    'KEYBOARD_LAYOUT', 'keyboard_theme', 'status_message', 'status_class',
    'WordCheckClient', 'NETWORK_ERROR',
    'GameClient'
]
