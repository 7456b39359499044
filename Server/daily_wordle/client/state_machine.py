"""
Client Game State Machine

Pure transition functions over GameSession. Nothing here performs I/O:
submitting a full row returns a GuessRequest for the caller to send, and
the caller hands the response back through resolve_guess.
"""

import string
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..config.game_settings import WORD_LENGTH, NUM_ATTEMPTS
from ..models.game import GameSession, GuessResult, LetterCell, new_session
from ..services.game_service import INVALID_WORD

KEY_ENTER = 'Enter'
KEY_BACKSPACE = 'Backspace'


@dataclass(frozen=True)
class GuessRequest:
    """A submitted row, tagged with the day and row it was typed in."""
    date_key: Optional[str]
    row: int
    word: str


@dataclass(frozen=True)
class GuessOutcome:
    """Response to a GuessRequest: result codes, or an error code."""
    result: Optional[Tuple[int, ...]] = None
    error: Optional[str] = None
    message: str = ''

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GameEnd:
    """Emitted exactly once, on the transition into Won or Lost."""
    won: bool
    attempts: int
    date_key: Optional[str]


def reset_for_date(session: GameSession, date_key: str) -> GameSession:
    """A session from any other day is replaced by a fresh one."""
    if session.last_played_date != date_key:
        return new_session(date_key)
    return session


def _replace_cell(session: GameSession, index: int, cell: LetterCell):
    row = list(session.rows[session.current_row])
    row[index] = cell
    rows = list(session.rows)
    rows[session.current_row] = tuple(row)
    return tuple(rows)


def type_letter(session: GameSession, key: str) -> GameSession:
    if len(key) != 1 or key.upper() not in string.ascii_uppercase:
        return session
    if session.current_letter >= WORD_LENGTH:
        return session

    return replace(
        session,
        rows=_replace_cell(session, session.current_letter, LetterCell(char=key.upper())),
        current_letter=min(session.current_letter + 1, WORD_LENGTH)
    )


def remove_letter(session: GameSession) -> GameSession:
    if not session.current_letter:
        return session

    return replace(
        session,
        rows=_replace_cell(session, session.current_letter - 1, LetterCell()),
        current_letter=max(session.current_letter - 1, 0),
        invalid_word=False
    )


def submit_row(session: GameSession) -> Tuple[GameSession, Optional[GuessRequest]]:
    if session.current_letter != WORD_LENGTH:
        return session, None

    request = GuessRequest(
        date_key=session.last_played_date,
        row=session.current_row,
        word=session.active_word
    )
    return replace(session, checking=True), request


def press_key(session: GameSession, key: str) -> Tuple[GameSession, Optional[GuessRequest]]:
    """
    Apply one key event.

    Returns:
        Tuple of (new session, request to send if Enter submitted a row)
    """
    if session.is_over or session.checking:
        return session, None

    if key == KEY_BACKSPACE:
        return remove_letter(session), None

    # While a word is flagged invalid only Backspace gets through
    if session.invalid_word:
        return session, None

    if key == KEY_ENTER:
        return submit_row(session)

    return type_letter(session, key), None


def is_stale(session: GameSession, request: GuessRequest) -> bool:
    """True when a response no longer belongs to the session's pending row."""
    return (
        not session.checking
        or session.current_row != request.row
        or session.last_played_date != request.date_key
    )


def _valid_result(result) -> bool:
    return (
        result is not None
        and len(result) == WORD_LENGTH
        and all(code in tuple(GuessResult) for code in result)
    )


def resolve_guess(session: GameSession,
                  request: GuessRequest,
                  outcome: GuessOutcome) -> Tuple[GameSession, Optional[GameEnd]]:
    """
    Fold the response to `request` into the session.

    Stale responses leave the session untouched. An INVALID_WORD response
    flags the row and keeps its letters; any other failure simply reopens
    the row for resubmission.

    Returns:
        Tuple of (new session, GameEnd if this response finished the game)
    """
    if is_stale(session, request):
        return session, None

    if outcome.error == INVALID_WORD:
        return replace(session, checking=False, invalid_word=True), None

    if not outcome.ok or not _valid_result(outcome.result):
        return replace(session, checking=False), None

    row_index = session.current_row
    scored_row = []
    row_found = set()
    row_missing = set()

    for cell, code in zip(session.rows[row_index], outcome.result):
        if code == GuessResult.CORRECT:
            scored_row.append(replace(cell, exact=True))
            row_found.add(cell.char)
        elif code == GuessResult.PRESENT:
            scored_row.append(replace(cell, misplaced=True))
            row_found.add(cell.char)
        else:
            scored_row.append(cell)
            row_missing.add(cell.char)

    found_letters = session.found_letters | row_found
    # Found beats absent, so the two sets never overlap
    absent_letters = (session.absent_letters | row_missing) - found_letters

    rows = list(session.rows)
    rows[row_index] = tuple(scored_row)

    won = all(cell.exact for cell in scored_row)
    lost = row_index == NUM_ATTEMPTS - 1 and not won

    updated = replace(
        session,
        rows=tuple(rows),
        found_letters=frozenset(found_letters),
        absent_letters=frozenset(absent_letters),
        won=won,
        lost=lost,
        invalid_word=False,
        checking=False
    )

    if won or lost:
        updated = replace(updated, current_row=None, current_letter=None)
        return updated, GameEnd(won=won, attempts=row_index + 1, date_key=request.date_key)

    return replace(updated, current_row=row_index + 1, current_letter=0), None


def attempts_used(session: GameSession) -> int:
    """Number of rows that have been scored."""
    if session.current_row is not None:
        return session.current_row
    # Finished game: every filled row was scored
    return sum(1 for row in session.rows if all(cell.char for cell in row))
