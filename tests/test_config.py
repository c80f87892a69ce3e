import pytest

from wordgrid.config import GameConfigError, GameSettings, TestingConfig, config, validate_game_settings


class ShortBoardConfig(TestingConfig):
    TOTAL_ATTEMPTS = 3
    TOTAL_LETTERS = 4
    CHOSEN_WORD = 'node'


def test_defaults_are_valid():
    assert validate_game_settings(GameSettings()) is True


def test_settings_from_config():
    settings = GameSettings.from_config(ShortBoardConfig)
    assert settings.total_attempts == 3
    assert settings.total_letters == 4
    assert settings.chosen_word == 'node'


def test_settings_override_word():
    assert GameSettings.from_config(TestingConfig, 'route').chosen_word == 'route'


def test_settings_from_config_validates():
    with pytest.raises(GameConfigError):
        GameSettings.from_config(ShortBoardConfig, 'coder')


def test_duplicate_alphabet_rejected():
    with pytest.raises(GameConfigError):
        validate_game_settings(GameSettings(alphabet='abca', chosen_word='abcab'))


def test_config_profiles():
    assert config['testing'] is TestingConfig
    assert config['default'].DEBUG is True
