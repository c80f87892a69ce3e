import logging

from wordgrid.services.game_service import get_game_service


def events(socket_client, name):
    return [message['args'][0] for message in socket_client.get_received() if message['name'] == name]


def test_join_game_sends_state(socket_client):
    game_id = get_game_service().create_new_game()
    socket_client.emit('join_game', {'game_id': game_id})

    updates = events(socket_client, 'game_state_update')
    assert len(updates) == 1
    assert updates[0]['state']['game_id'] == game_id


def test_key_press_broadcasts_state(socket_client):
    game_id = get_game_service().create_new_game()
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('key_press', {'game_id': game_id, 'key': 'C', 'key_code': 67})

    updates = events(socket_client, 'game_state_update')
    assert updates[-1]['action'] == 'letter'
    assert updates[-1]['state']['board'][0][0]['letter'] == 'c'


def test_submission_streamed_to_room(socket_client):
    game_id = get_game_service().create_new_game()
    socket_client.emit('join_game', {'game_id': game_id})

    for letter in 'route':
        socket_client.emit('key_press', {'game_id': game_id, 'key': letter})
    socket_client.emit('key_press', {'game_id': game_id, 'key': 'Enter'})

    received = socket_client.get_received()
    submitted = [m['args'][0] for m in received if m['name'] == 'attempt_submitted']
    assert submitted == [{'game_id': game_id, 'attempt': 0, 'word': 'route'}]


def test_unknown_game_reports_error(socket_client):
    socket_client.emit('join_game', {'game_id': 'missing'})
    assert events(socket_client, 'error') == [{'error': 'Game not found'}]


def test_missing_key_reports_error(socket_client):
    game_id = get_game_service().create_new_game()
    socket_client.emit('key_press', {'game_id': game_id})
    assert events(socket_client, 'error') == [{'error': 'Key is required'}]


def test_connect_is_logged(app_and_socketio, caplog):
    app, socketio = app_and_socketio
    with caplog.at_level(logging.INFO, logger='wordgrid'):
        socket_client = socketio.test_client(app)
    assert socket_client.is_connected()
    assert 'connected' in caplog.text
