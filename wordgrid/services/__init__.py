"""
Services Package

Contains the game state machine and the services built around it.
"""

from .feedback import FeedbackPolicy, classify_guess, update_key_map
from .game_state import GameState
from .input_router import InputRouter, KeyAction, KeyEvent, classify_key
from .notifier import Notifier, LoggingNotifier, SocketIONotifier, notify_submission_safely
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'FeedbackPolicy', 'classify_guess', 'update_key_map',
    'GameState',
    'InputRouter', 'KeyAction', 'KeyEvent', 'classify_key',
    'Notifier', 'LoggingNotifier', 'SocketIONotifier', 'notify_submission_safely',
    'GameService', 'get_game_service', 'initialize_game_service'
]
