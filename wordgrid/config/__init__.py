"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ATTEMPTS, LETTERS, ALPHABET, DEFAULT_CHOSEN_WORD,
    GameConfigError, GameSettings, validate_game_settings
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ATTEMPTS', 'LETTERS', 'ALPHABET', 'DEFAULT_CHOSEN_WORD',
    'GameConfigError', 'GameSettings', 'validate_game_settings'
]
