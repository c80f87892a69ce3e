import os
import tempfile

# Keep test logs out of the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordgrid-logs-'))

import pytest

from wordgrid import create_app
from wordgrid.config import GameSettings, TestingConfig
from wordgrid.services.game_service import initialize_game_service
from wordgrid.services.game_state import GameState
from wordgrid.services.input_router import InputRouter, KeyEvent
from wordgrid.services.notifier import Notifier


class RecordingNotifier(Notifier):
    def __init__(self):
        self.calls = []

    def notify_submission(self, attempt_index, word):
        self.calls.append((attempt_index, word))


class FailingNotifier(Notifier):
    def notify_submission(self, attempt_index, word):
        raise ConnectionError("stream unavailable")


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def game(notifier):
    return GameState(GameSettings(), notifier=notifier, game_id='test-game')


@pytest.fixture
def router(game):
    return InputRouter(game)


@pytest.fixture
def play(router):
    """Type a word and press Enter."""
    def _play(word, submit=True):
        for letter in word:
            router.dispatch(KeyEvent(letter.upper(), ord(letter.upper())))
        if submit:
            return router.dispatch(KeyEvent('Enter', 13))
    return _play


@pytest.fixture
def app_and_socketio():
    initialize_game_service(TestingConfig)
    app, socketio = create_app(TestingConfig)
    return app, socketio


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    return socketio.test_client(app)
