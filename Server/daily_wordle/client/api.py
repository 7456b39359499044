"""
HTTP client for the word check and leaderboard endpoints.
"""

from typing import Dict, Optional

import requests

from .state_machine import GuessOutcome
from ..services.game_service import INTERNAL_SERVER_ERROR
from ..utils.game_logger import game_logger

NETWORK_ERROR = 'NETWORK_ERROR'


class WordCheckClient:
    """
    Talks to a running server over HTTP.

    check_word never raises: transport problems come back as a
    NETWORK_ERROR outcome so the state machine can reopen the row.
    """

    def __init__(self, base_url: str, timeout: float = 5, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.http = session or requests.Session()

    def check_word(self, word: str) -> GuessOutcome:
        try:
            response = self.http.get(f"{self.base_url}/router", params={'word': word}, timeout=self.timeout)
            payload = response.json()
        except requests.RequestException as e:
            game_logger.logger.error(f"Word check request failed: {e}")
            return GuessOutcome(error=NETWORK_ERROR, message=str(e))
        except ValueError as e:
            game_logger.logger.error(f"Word check returned a non-JSON body: {e}")
            return GuessOutcome(error=NETWORK_ERROR, message='Malformed response')

        if isinstance(payload, dict) and payload.get('error'):
            return GuessOutcome(error=payload['error'], message=payload.get('message', ''))

        if response.status_code != 200 or not isinstance(payload, list):
            return GuessOutcome(error=INTERNAL_SERVER_ERROR, message=f'Unexpected response ({response.status_code})')

        try:
            result = tuple(int(code) for code in payload)
        except (TypeError, ValueError) as e:
            game_logger.logger.error(f"Word check returned malformed result codes {payload!r}: {e}")
            return GuessOutcome(error=NETWORK_ERROR, message='Malformed response')

        return GuessOutcome(result=result)

    def get_leaderboard(self, metric: str = 'winRate', limit: Optional[int] = None) -> Dict:
        params = {'action': 'getLeaderboard', 'metric': metric}
        if limit is not None:
            params['limit'] = limit

        response = self.http.get(f"{self.base_url}/router", params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
