"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import GameConfigError
from ..services.game_service import get_game_service
from ..services.input_router import KeyAction
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_key_event

game_bp = Blueprint('game', __name__)


def log_outcome(game, action: KeyAction, user_ip: str):
    """Log game events caused by a routed key."""
    if action is KeyAction.RESET:
        game_logger.log_game_event(game.game_id, 'game_reset', user_ip)
    elif action is KeyAction.SUBMIT:
        submitted = game.current_attempt - 1
        game_logger.log_game_event(
            game.game_id, 'attempt_submitted', user_ip,
            attempt=submitted, word=game.attempted_word(submitted)
        )
        if game.solved:
            game_logger.log_game_event(
                game.game_id, 'game_won', user_ip,
                attempts_used=game.current_attempt, target_word=game.chosen_word
            )
        elif game.is_exhausted:
            game_logger.log_game_event(
                game.game_id, 'game_lost', user_ip,
                attempts_used=game.current_attempt, target_word=game.chosen_word
            )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        chosen_word = data.get('chosen_word')

        game_logger.log_user_action(request, 'new_game', custom_word=chosen_word is not None)

        game_id = game_service.create_new_game(chosen_word)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            total_letters=state.total_letters, total_attempts=state.total_attempts
        )

        return jsonify(response_data)

    except GameConfigError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(game.snapshot())
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_attempt=game.current_attempt, game_over=game.is_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game=None):
    """Route one key press into the game."""
    try:
        event = parse_key_event(request.get_json(silent=True))
        if event is None:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'key_press', game_id, key=event.key, key_code=event.key_code)

        # A failure anywhere below leaves the game as it was before the key
        with game.transaction():
            action = get_game_service().handle_key(game_id, event)
            log_outcome(game, action, request.remote_addr or 'unknown')

            response_data = {
                'success': True,
                'action': action.value,
                'state': asdict(game.snapshot())
            }

            game_logger.log_server_response(
                request, 'key_press', True, response_data, game_id, key_action=action.value
            )

            return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, game=None):
    """Reset a game session to an empty board."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        with game.lock:
            get_game_service().reset_game(game_id)
            log_outcome(game, KeyAction.RESET, request.remote_addr or 'unknown')

            response_data = {
                'success': True,
                'state': asdict(game.snapshot())
            }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr or 'unknown')

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
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
