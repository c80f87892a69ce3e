"""
Word Grid Server Application Package

Serves the turn-based word guessing game over HTTP and WebSocket. The game
rules live in `services`; controllers and WebSocket handlers are thin hosts
around them.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Stream submissions to the game's room
    from .services.game_service import get_game_service
    from .services.notifier import SocketIONotifier
    game_service = get_game_service()
    if game_service:
        game_service.set_notifier_factory(lambda game_id: SocketIONotifier(socketio, game_id))

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
