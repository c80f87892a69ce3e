"""
Game Service

Keeps the in-memory game sessions served by the HTTP and WebSocket layers.
"""

import uuid
from typing import Callable, Dict, Optional
from ..config import Config
from ..config.game_settings import GameSettings
from ..models.game import GameSnapshot
from .game_state import GameState
from .input_router import InputRouter, KeyAction, KeyEvent
from .notifier import LoggingNotifier, Notifier


NotifierFactory = Callable[[str], Notifier]


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Settings resolution from configuration
    - Routing key events into the right session
    - State snapshots for the host
    """

    def __init__(self, config_class=Config, notifier_factory: Optional[NotifierFactory] = None):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.config_class = config_class
        self.notifier_factory: NotifierFactory = notifier_factory or (lambda game_id: LoggingNotifier())

    def set_notifier_factory(self, notifier_factory: NotifierFactory) -> None:
        self.notifier_factory = notifier_factory

    def create_new_game(self, chosen_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            chosen_word: Optional target word overriding the configured one

        Returns:
            str: Unique game ID for this session

        Raises:
            GameConfigError: If the resulting settings are invalid
        """
        settings = GameSettings.from_config(self.config_class, chosen_word)
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameState(settings, self.notifier_factory(game_id), game_id)
        return game_id

    def get_game(self, game_id: str) -> Optional[GameState]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.snapshot()

    def handle_key(self, game_id: str, event: KeyEvent) -> Optional[KeyAction]:
        """
        Routes a key event into a session.

        Events for one game are applied one at a time, and an event that
        fails part way leaves the game as it was before the event.

        Returns:
            KeyAction performed, or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        with game.transaction():
            return InputRouter(game).dispatch(event)

    def reset_game(self, game_id: str) -> bool:
        game = self.games.get(game_id)
        if game is None:
            return False
        with game.lock:
            game.reset()
        return True

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(config_class)
    return _game_service
