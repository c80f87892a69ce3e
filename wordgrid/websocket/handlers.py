"""
WebSocket Event Handlers

Handles all WebSocket events for real-time play and the submission stream.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_key_event


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket: {request.sid} connected")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game=None):
        """Join a game room for real-time updates."""
        join_room(f"game_{game.game_id}")

        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game.game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(game.snapshot())
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game=None):
        """Leave a game room."""
        leave_room(f"game_{game.game_id}")
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game.game_id}")

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game=None):
        """Route a key press and broadcast the resulting state."""
        event = parse_key_event(data)
        if event is None:
            emit('error', {'error': 'Key is required'})
            return

        try:
            with game.lock:
                action = get_game_service().handle_key(game.game_id, event)
                state = asdict(game.snapshot())
        except Exception as e:
            game_logger.logger.error(f"Error routing key {event.key!r} for game {game.game_id}: {e}")
            emit('error', {'error': str(e)})
            return

        socketio.emit('game_state_update', {
            'success': True,
            'action': action.value,
            'state': state
        }, room=f"game_{game.game_id}")
