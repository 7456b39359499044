"""
Helper Functions

Contains utility functions used throughout the application.
"""

import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    origin = None
    headers = getattr(request_obj, 'headers', None)
    if headers is not None:
        origin = headers.get('Origin')

    return {
        'user_ip': user_ip,
        'origin': origin
    }


def _as_utc(date: Optional[datetime.datetime]) -> datetime.datetime:
    if date is None:
        return datetime.datetime.now(datetime.timezone.utc)
    if date.tzinfo is None:
        # Naive datetimes are taken to already be UTC
        return date.replace(tzinfo=datetime.timezone.utc)
    return date.astimezone(datetime.timezone.utc)


def get_date_str(date: Optional[datetime.datetime] = None) -> str:
    """
    Date key for the UTC calendar day of `date` (now when omitted).

    Returns:
        str: YYYYMMDD, zero padded, e.g. "20240517"
    """
    utc_date = _as_utc(date)
    return f"{utc_date.year}{utc_date.month:02d}{utc_date.day:02d}"


def get_time_until_next_word(now: Optional[datetime.datetime] = None) -> Dict:
    """
    Time remaining until the next word, i.e. the next UTC midnight.

    Returns:
        dict: hours, minutes, seconds, time_remaining (milliseconds) and
        time_string formatted as hh:mm:ss
    """
    utc_now = _as_utc(now)
    tomorrow = (utc_now + datetime.timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)

    time_remaining = int((tomorrow - utc_now).total_seconds() * 1000)

    hours = time_remaining // (1000 * 60 * 60)
    minutes = (time_remaining % (1000 * 60 * 60)) // (1000 * 60)
    seconds = (time_remaining % (1000 * 60)) // 1000

    return {
        'hours': hours,
        'minutes': minutes,
        'seconds': seconds,
        'time_remaining': time_remaining,
        'time_string': f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    }


def round_half_up(value: float, digits: int = 0):
    """Round halves away from zero, so 12.5 becomes 13 rather than 12."""
    exponent = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def calculate_win_percentage(games_played: int, games_won: int) -> int:
    """Win rate as a whole percentage, 0 when nothing has been played."""
    if not games_played:
        return 0
    return round_half_up(games_won / games_played * 100)
