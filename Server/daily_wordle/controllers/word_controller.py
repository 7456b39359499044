"""
Word Controller

Handles the public HTTP endpoints: guess evaluation, leaderboard and health.
"""

from flask import Blueprint, request, jsonify, current_app
from ..config.game_settings import get_word_statistics
from ..services.game_service import get_game_service, INTERNAL_SERVER_ERROR
from ..services.leaderboard_service import get_leaderboard_service
from ..services.storage_service import get_storage_service
from ..utils.decorators import require_allowed_origin
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


def _service_unavailable(name: str):
    return jsonify({
        'error': 'SERVICE_UNAVAILABLE',
        'message': f'{name} service unavailable'
    }), 500


def _internal_error(action: str, error: Exception):
    game_logger.log_error(request, error, action)
    error_response = {
        'error': INTERNAL_SERVER_ERROR,
        'message': 'An unexpected error occurred.'
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 500


def _check_word():
    """Validate and score the `word` query parameter against today's word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable('Game')

        guess = request.args.get('word')

        # Log user action
        game_logger.log_user_action(request, 'check_word', guess_length=len(guess) if guess else 0)

        is_valid, error_code, error_message = game_service.is_valid_guess(guess)
        if not is_valid:
            error_response = {
                'error': error_code,
                'message': error_message
            }
            game_logger.log_server_response(
                request, 'check_word', False, error_response,
                validation_error=error_code
            )
            return jsonify(error_response), 400

        date_key, result = game_service.make_guess(guess)
        response_data = [int(code) for code in result]

        game_logger.log_server_response(request, 'check_word', True, response_data, date_key)

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('check_word', e)


def _get_leaderboard():
    """Top players for the requested metric."""
    try:
        leaderboard_service = get_leaderboard_service()
        if not leaderboard_service:
            return _service_unavailable('Leaderboard')

        metric = request.args.get('metric', 'winRate')
        limit = request.args.get('limit', type=int)

        # Log user action
        game_logger.log_user_action(request, 'get_leaderboard', metric=metric, limit=limit)

        response_data = leaderboard_service.get_leaderboard(metric, limit)

        game_logger.log_server_response(
            request, 'get_leaderboard', True, response_data,
            metric=response_data['metric'], total_users=response_data['totalUsers']
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('get_leaderboard', e)


@word_bp.route('/router', methods=['GET'])
@require_allowed_origin
def router():
    """Single entry point: `action=getLeaderboard` or a `word` to check."""
    if request.args.get('action') == 'getLeaderboard':
        return _get_leaderboard()
    return _check_word()


@word_bp.route('/checkWord', methods=['GET'])
@require_allowed_origin
def check_word():
    """Score a guess against today's word."""
    return _check_word()


@word_bp.route('/leaderboard', methods=['GET'])
@require_allowed_origin
def leaderboard():
    """Get the leaderboard."""
    return _get_leaderboard()


@word_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'store_backend': current_app.config.get('STORE_BACKEND'),
            'store_available': get_storage_service() is not None,
            'game_available': get_game_service() is not None,
            'leaderboard_available': get_leaderboard_service() is not None,
            'word_stats': get_word_statistics(),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
