import threading

import pytest

from conftest import RecordingNotifier
from wordgrid.config import GameConfigError, TestingConfig
from wordgrid.services.game_service import GameService
from wordgrid.services.input_router import KeyAction, KeyEvent


@pytest.fixture
def service():
    return GameService(TestingConfig)


def type_word(service, game_id, word):
    for letter in word:
        service.handle_key(game_id, KeyEvent(letter))
    return service.handle_key(game_id, KeyEvent('Enter'))


def test_create_uses_configured_word(service):
    game_id = service.create_new_game()
    assert service.get_game(game_id).chosen_word == 'coder'
    assert service.get_game_state(game_id).game_id == game_id


def test_create_with_custom_word(service):
    game_id = service.create_new_game('route')
    assert type_word(service, game_id, 'route') is KeyAction.SUBMIT
    assert service.get_game_state(game_id).solved is True


def test_create_rejects_bad_word(service):
    with pytest.raises(GameConfigError):
        service.create_new_game('toolong')
    assert service.games == {}


def test_games_are_isolated(service):
    first = service.create_new_game()
    second = service.create_new_game()
    type_word(service, first, 'route')
    assert service.get_game_state(first).current_attempt == 1
    assert service.get_game_state(second).current_attempt == 0


def test_notifier_factory_receives_game_id(service):
    created = {}

    def factory(game_id):
        created[game_id] = RecordingNotifier()
        return created[game_id]

    service.set_notifier_factory(factory)
    game_id = service.create_new_game()
    type_word(service, game_id, 'route')
    assert created[game_id].calls == [(0, 'route')]


def test_reset_and_delete(service):
    game_id = service.create_new_game()
    type_word(service, game_id, 'route')
    assert service.reset_game(game_id) is True
    assert service.get_game_state(game_id).current_attempt == 0
    assert service.delete_game(game_id) is True
    assert service.delete_game(game_id) is False


def test_unknown_game(service):
    assert service.get_game('missing') is None
    assert service.get_game_state('missing') is None
    assert service.handle_key('missing', KeyEvent('a')) is None
    assert service.reset_game('missing') is False


def test_concurrent_keys_are_serialized(service):
    threads_per_game = 8
    errors = []

    for _ in range(25):
        game_id = service.create_new_game()
        for letter in 'rout':
            service.handle_key(game_id, KeyEvent(letter))

        barrier = threading.Barrier(threads_per_game)
        actions = []

        def press_e():
            barrier.wait()
            try:
                actions.append(service.handle_key(game_id, KeyEvent('E', 69)))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=press_e) for _ in range(threads_per_game)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        state = service.get_game_state(game_id)
        assert state.current_tile == 5
        assert actions.count(KeyAction.LETTER) == 1
        assert actions.count(KeyAction.IGNORED) == threads_per_game - 1

    assert errors == []


def test_failed_key_is_rolled_back(service, monkeypatch):
    game_id = service.create_new_game()
    for letter in 'route':
        service.handle_key(game_id, KeyEvent(letter))
    before = service.get_game_state(game_id)

    def broken_update(key_map, evaluations):
        raise RuntimeError('keyboard update failed')

    monkeypatch.setattr('wordgrid.services.game_state.update_key_map', broken_update)
    with pytest.raises(RuntimeError):
        service.handle_key(game_id, KeyEvent('Enter'))

    assert service.get_game_state(game_id) == before
