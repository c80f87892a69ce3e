import pytest

from wordgrid.models.game import Attempt, Board, KeyMap, Tile, TileStatus


def test_board_build_dimensions():
    board = Board.build(6, 5)
    assert len(board.attempts) == 6
    assert all(len(attempt.tiles) == 5 for attempt in board.attempts)
    assert all(
        tile.letter == '' and tile.status is TileStatus.UNCHECKED
        for attempt in board.attempts for tile in attempt.tiles
    )


def test_board_tiles_are_independent():
    board = Board.build(2, 2)
    board.tile(0, 0).letter = 'x'
    assert board.tile(1, 0).letter == ''
    assert board.tile(0, 1).letter == ''


def test_attempt_word_is_lowercase():
    attempt = Attempt(tiles=[Tile('C'), Tile('o'), Tile('D')])
    assert attempt.word == 'cod'


def test_board_rows_serialize_status_values():
    board = Board.build(1, 2)
    board.tile(0, 0).status = TileStatus.MATCHED
    assert board.to_rows() == [[
        {'letter': '', 'status': 'matched'},
        {'letter': '', 'status': 'unchecked'},
    ]]


def test_key_map_prepopulated():
    key_map = KeyMap('abcdefghijklmnopqrstuvwxyz')
    assert len(key_map) == 26
    assert set(key_map.to_dict().values()) == {'unchecked'}


def test_key_map_upgrades():
    key_map = KeyMap('abc')
    key_map.mark('a', TileStatus.WRONG)
    key_map.mark('a', TileStatus.MISSED)
    assert key_map['a'] is TileStatus.MISSED
    key_map.mark('a', TileStatus.MATCHED)
    assert key_map['a'] is TileStatus.MATCHED


@pytest.mark.parametrize('worse', [TileStatus.MISSED, TileStatus.WRONG, TileStatus.UNCHECKED])
def test_key_map_never_downgrades_matched(worse):
    key_map = KeyMap('abc')
    key_map.mark('b', TileStatus.MATCHED)
    assert key_map.mark('b', worse) is TileStatus.MATCHED


def test_key_map_rejects_unknown_letters():
    key_map = KeyMap('abc')
    with pytest.raises(KeyError):
        key_map.mark('z', TileStatus.WRONG)
    assert 'z' not in key_map
