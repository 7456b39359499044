"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, NUM_ATTEMPTS


class GuessResult(IntEnum):
    """Per-position outcome of a scored guess, as sent over the wire."""
    MISSING = 0
    PRESENT = 1
    CORRECT = 2


class Phase(Enum):
    """Where a game session sits in the input/validation cycle."""
    IDLE = "IDLE"
    ROW_FILLING = "ROW_FILLING"
    ROW_COMPLETE = "ROW_COMPLETE"
    CHECKING = "CHECKING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class DailyWord:
    """The secret word for one UTC calendar day."""
    date: str
    word: str

    def to_dict(self) -> Dict[str, str]:
        return {'date': self.date, 'word': self.word}


@dataclass(frozen=True)
class LetterCell:
    """One tile of the grid."""
    char: Optional[str] = None
    exact: bool = False
    misplaced: bool = False


Row = Tuple[LetterCell, ...]


def empty_rows() -> Tuple[Row, ...]:
    return tuple(tuple(LetterCell() for _ in range(WORD_LENGTH)) for _ in range(NUM_ATTEMPTS))


@dataclass(frozen=True)
class GameSession:
    """
    One user's attempt sequence for one calendar day.

    Sessions are never mutated; every transition builds a new instance.
    current_row and current_letter are None once the game is won or lost.
    """
    rows: Tuple[Row, ...] = field(default_factory=empty_rows)
    current_row: Optional[int] = 0
    current_letter: Optional[int] = 0
    won: bool = False
    lost: bool = False
    invalid_word: bool = False
    absent_letters: FrozenSet[str] = frozenset()
    found_letters: FrozenSet[str] = frozenset()
    last_played_date: Optional[str] = None
    checking: bool = False

    @property
    def is_over(self) -> bool:
        return self.won or self.lost

    @property
    def phase(self) -> Phase:
        if self.won:
            return Phase.WON
        if self.lost:
            return Phase.LOST
        if self.checking:
            return Phase.CHECKING
        if self.current_letter == WORD_LENGTH:
            return Phase.ROW_COMPLETE
        if self.current_letter == 0:
            return Phase.IDLE
        return Phase.ROW_FILLING

    @property
    def active_word(self) -> str:
        """Letters typed so far in the active row."""
        if self.current_row is None:
            return ''
        return ''.join(cell.char or '' for cell in self.rows[self.current_row])

    def to_dict(self) -> Dict:
        """Flatten into a storage document."""
        return {
            'currWord': self.current_row,
            'currLetter': self.current_letter,
            'gameWon': self.won,
            'gameLost': self.lost,
            'invalidWord': self.invalid_word,
            'lastPlayedDate': self.last_played_date,
            'wordsData': [
                {
                    'wordIndex': word_index,
                    'letterIndex': letter_index,
                    'char': cell.char or '',
                    'exact': cell.exact,
                    'misplaced': cell.misplaced
                }
                for word_index, row in enumerate(self.rows)
                for letter_index, cell in enumerate(row)
            ],
            'absentLetters': sorted(self.absent_letters),
            'foundLetters': sorted(self.found_letters)
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict], default_date: Optional[str] = None) -> 'GameSession':
        """
        Rebuild a session from a storage document.

        Missing fields fall back to defaults; out-of-range cells are ignored.
        A stored session is never in flight, so checking is always False.
        """
        if not data:
            return cls(last_played_date=default_date)

        grid: List[List[LetterCell]] = [list(row) for row in empty_rows()]
        for letter_data in data.get('wordsData') or []:
            word_index = letter_data.get('wordIndex', -1)
            letter_index = letter_data.get('letterIndex', -1)
            if 0 <= word_index < NUM_ATTEMPTS and 0 <= letter_index < WORD_LENGTH:
                grid[word_index][letter_index] = LetterCell(
                    char=(letter_data.get('char') or None),
                    exact=bool(letter_data.get('exact')),
                    misplaced=bool(letter_data.get('misplaced'))
                )

        won = bool(data.get('gameWon'))
        lost = bool(data.get('gameLost'))
        if won or lost:
            current_row, current_letter = None, None
        else:
            current_row = data.get('currWord') or 0
            current_letter = data.get('currLetter') or 0

        return cls(
            rows=tuple(tuple(row) for row in grid),
            current_row=current_row,
            current_letter=current_letter,
            won=won,
            lost=lost,
            invalid_word=bool(data.get('invalidWord')),
            absent_letters=frozenset(data.get('absentLetters') or []),
            found_letters=frozenset(data.get('foundLetters') or []),
            last_played_date=data.get('lastPlayedDate') or default_date
        )


def new_session(date_key: Optional[str]) -> GameSession:
    """Fresh, empty session for the given day."""
    return GameSession(last_played_date=date_key)
