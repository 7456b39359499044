"""
Request Decorators

Contains decorators applied to the public HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify, current_app

from .game_logger import game_logger


def is_origin_allowed(origin, allowed_origins) -> bool:
    """Requests without an Origin header (server-to-server, REST tools) pass."""
    return not origin or origin in allowed_origins


def require_allowed_origin(f):
    """
    Decorator rejecting browser requests from origins outside ALLOWED_ORIGINS.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        origin = request.headers.get('Origin')
        allowed_origins = current_app.config.get('ALLOWED_ORIGINS', [])

        if not is_origin_allowed(origin, allowed_origins):
            error_response = {
                'error': 'FORBIDDEN_ORIGIN',
                'message': 'Not allowed by CORS'
            }
            game_logger.log_server_response(request, request.endpoint or 'unknown', False, error_response,
                                            origin=origin)
            return jsonify(error_response), 403

        return f(*args, **kwargs)

    return decorated_function
