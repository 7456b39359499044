"""
Game Logger Module for the Daily Word Server

Every line written is one JSON object carrying the event type, the action,
who caused it and free-form details. The server logs each request and its
response; the client logs game events (word created, game finished, stats
recorded) through the same logger.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .helpers import get_user_identity
from ..config.app_config import Config

USER_ACTION = 'USER_ACTION'
RESPONSE_SUCCESS = 'SERVER_RESPONSE_SUCCESS'
RESPONSE_ERROR = 'SERVER_RESPONSE_ERROR'
GAME_EVENT = 'GAME_EVENT'
ERROR = 'ERROR'

# Keys never written to the log as part of a response body
SECRET_KEYS = ('word',)


class GameLogger:
    """
    Structured logger shared by the server and the client.

    Lines go to a per-day file under `log_dir` at the configured level;
    the console only gets warnings and errors.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        self.logger = self._build_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"daily_wordle_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _build_logger(self) -> logging.Logger:
        logger = logging.getLogger('daily_wordle')
        logger.setLevel(self.level)

        # Re-initialising must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _emit(self, level: int, event_type: str, action: str, who: Dict[str, Any], details: Dict[str, Any]):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': who,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, date_key: Optional[str] = None, **kwargs):
        """
        Record an incoming request.

        Args:
            request: The Flask request being served
            action: What the caller asked for ('check_word', 'get_leaderboard', ...)
            date_key: Game day the request applies to, when known
            **kwargs: Extra request details
        """
        details = {
            'date_key': date_key,
            'endpoint': request.endpoint,
            'method': request.method,
            'args': dict(request.args),
            **kwargs
        }
        self._emit(logging.INFO, USER_ACTION, action, get_user_identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Any,
                            date_key: Optional[str] = None,
                            **kwargs):
        """
        Record the response sent for `action`. Failed responses are logged
        at ERROR level.
        """
        details = {
            'date_key': date_key,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        self._emit(
            logging.INFO if success else logging.ERROR,
            RESPONSE_SUCCESS if success else RESPONSE_ERROR,
            action, get_user_identity(request), details
        )

    def log_game_event(self, date_key: Optional[str], event: str, actor: str, **kwargs):
        """
        Record something that happened to a game rather than a request.

        Args:
            date_key: Game day the event belongs to
            event: 'daily_word_created', 'game_won', 'stats_recorded', ...
            actor: 'server', or the user id when the client logs it
        """
        self._emit(logging.INFO, GAME_EVENT, event, {'actor': actor}, {'date_key': date_key, **kwargs})

    def log_error(self, request, error: Exception, action: str, date_key: Optional[str] = None):
        """Record an exception; `request` is None outside a request."""
        who = get_user_identity(request) if request is not None else {'actor': 'system'}
        details = {
            'date_key': date_key,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._emit(logging.ERROR, ERROR, action, who, details)

    def _sanitize_response_data(self, data: Any) -> Any:
        """Summarize large payloads and drop anything that could leak the word."""
        if isinstance(data, list):
            # Scored guesses are short lists of result codes
            return data if len(data) <= 5 else {'data_type': 'list', 'length': len(data)}

        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = {key: value for key, value in data.items() if key not in SECRET_KEYS}
        if isinstance(sanitized.get('leaderboard'), list):
            sanitized['leaderboard'] = {'entries': len(sanitized['leaderboard'])}
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type, for the health endpoint."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    # asctime | levelname | message
                    message = line.rstrip('\n').split(' | ', 2)[-1]
                    try:
                        entry = json.loads(message)
                    except ValueError:
                        entry = None
                    counts[entry.get('event_type') if isinstance(entry, dict) else 'plain'] += 1
                    counts['total'] += 1
        except OSError as e:
            return {'error': f'Failed to read log file: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': counts['total'],
            'user_actions': counts[USER_ACTION],
            'server_responses': counts[RESPONSE_SUCCESS] + counts[RESPONSE_ERROR],
            'game_events': counts[GAME_EVENT],
            'errors': counts[ERROR]
        }


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
