"""
Game Client

Drives one user's daily session: loads it from storage, feeds key events
through the state machine, sends submitted rows to a word checker, saves
the session after each scored guess and records statistics when the game
ends.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from .api import NETWORK_ERROR
from .state_machine import (
    GuessRequest, GuessOutcome, GameEnd,
    press_key, resolve_guess, reset_for_date, is_stale, attempts_used
)
from ..models.game import GameSession, new_session
from ..models.stats import AggregateStats
from ..services.game_service import INVALID_WORD
from ..services.stats_service import StatsService
from ..services.storage_service import DocumentStore, GAMES_COLLECTION
from ..utils.helpers import get_date_str
from ..utils.game_logger import game_logger


class GameClient:
    """
    One user's game, bound to a document store and a word checker.

    `checker` is anything with check_word(word) -> GuessOutcome, typically a
    WordCheckClient. on_key_down sends rows synchronously; callers that run
    the check themselves use press() and complete() instead.
    """

    def __init__(self,
                 user_id: str,
                 store: DocumentStore,
                 checker,
                 stats_service: Optional[StatsService] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        if not user_id:
            raise ValueError("A signed-in user id is required")

        self.user_id = user_id
        self.store = store
        self.checker = checker
        self.stats_service = stats_service or StatsService(store)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

        self.session: GameSession = new_session(self.today())
        self.pending: Optional[GuessRequest] = None
        self.last_game_end: Optional[GameEnd] = None

    def today(self) -> str:
        return get_date_str(self.clock())

    @property
    def stats(self) -> AggregateStats:
        return self.stats_service.get_stats(self.user_id)

    def _save(self, session: GameSession):
        self.store.set(GAMES_COLLECTION, self.user_id, session.to_dict())

    def load(self) -> GameSession:
        """
        Load today's session, starting a fresh one when none is stored or
        the stored one is from another day.
        """
        today = self.today()
        data = self.store.get(GAMES_COLLECTION, self.user_id)
        session = GameSession.from_dict(data, today) if data else None

        if session is None or session.last_played_date != today:
            session = new_session(today)
            self._save(session)

        self.session = session
        self.pending = None

        # A finished game whose stats write never landed is recorded now
        if session.is_over and self.stats.last_recorded_date != today:
            self._record_game_end(GameEnd(won=session.won, attempts=attempts_used(session), date_key=today))

        return session

    def _roll_over_if_new_day(self):
        today = self.today()
        session = reset_for_date(self.session, today)
        if session is not self.session:
            game_logger.log_game_event(today, 'session_reset', self.user_id,
                                       previous_date=self.session.last_played_date)
            self.session = session
            self.pending = None
            self._save(session)

    def press(self, key: str) -> Optional[GuessRequest]:
        """
        Apply a key event. Returns the request to check when Enter submitted
        a full row; the session then stays in Checking until complete().
        """
        self._roll_over_if_new_day()
        self.session, request = press_key(self.session, key)
        if request is not None:
            self.pending = request
        return request

    def complete(self, request: GuessRequest, outcome: GuessOutcome) -> GameSession:
        """Apply the checker's response to a request returned by press()."""
        if is_stale(self.session, request):
            game_logger.logger.warning(
                f"Discarding stale response for row {request.row} of {request.date_key} (user {self.user_id})"
            )
            return self.session

        session, game_end = resolve_guess(self.session, request, outcome)
        self.session = session
        self.pending = None

        if outcome.error == INVALID_WORD:
            return session

        # Nothing was scored; the row stays open for resubmission
        if not outcome.ok or session.current_row == request.row:
            game_logger.logger.error(
                f"Word validation error for user {self.user_id}: {outcome.error or 'malformed result'} {outcome.message}"
            )
            return session

        self._save(session)

        if game_end is not None:
            self._record_game_end(game_end)

        return session

    def _record_game_end(self, game_end: GameEnd):
        self.last_game_end = game_end
        game_logger.log_game_event(
            game_end.date_key, 'game_won' if game_end.won else 'game_lost', self.user_id,
            attempts=game_end.attempts
        )
        self.stats_service.record_game_end(self.user_id, game_end.won, game_end.attempts, game_end.date_key)

    def on_key_down(self, key: str) -> GameSession:
        """Apply a key event, checking the row right away if it was submitted."""
        request = self.press(key)
        if request is None:
            return self.session

        try:
            outcome = self.checker.check_word(request.word)
        except Exception as e:
            # The row must reopen whatever the checker did
            game_logger.logger.error(f"Word checker failed for user {self.user_id}: {e}")
            outcome = GuessOutcome(error=NETWORK_ERROR, message=str(e))

        self.complete(request, outcome)
        return self.session
