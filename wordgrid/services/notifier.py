"""
Submission Notifiers

Side channel informed of every submitted word. Notification is best
effort: a failing notifier never affects game state.
"""

from ..utils.game_logger import game_logger


class Notifier:
    """Base notifier contract."""

    def notify_submission(self, attempt_index: int, word: str) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Writes each submitted word to the game log."""

    def notify_submission(self, attempt_index: int, word: str) -> None:
        game_logger.logger.info(f'Transmitting "{word}" to realtime stream (attempt {attempt_index})')


class SocketIONotifier(LoggingNotifier):
    """Broadcasts each submitted word to the game's Socket.IO room."""

    def __init__(self, socketio, game_id: str):
        self.socketio = socketio
        self.game_id = game_id

    def notify_submission(self, attempt_index: int, word: str) -> None:
        super().notify_submission(attempt_index, word)
        self.socketio.emit('attempt_submitted', {
            'game_id': self.game_id,
            'attempt': attempt_index,
            'word': word
        }, room=f"game_{self.game_id}")


def notify_submission_safely(notifier: Notifier, attempt_index: int, word: str) -> bool:
    """
    Invoke a notifier, logging instead of raising on failure.

    Returns:
        bool: True if the notifier completed without error
    """
    if notifier is None:
        return False
    try:
        notifier.notify_submission(attempt_index, word)
        return True
    except Exception as e:
        game_logger.logger.warning(
            f"Notifier {type(notifier).__name__} failed for attempt {attempt_index} ('{word}'): {e}"
        )
        return False
