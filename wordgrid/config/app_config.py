"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import ALPHABET, ATTEMPTS, DEFAULT_CHOSEN_WORD, INDEPENDENT_POLICY, LETTERS

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    TOTAL_ATTEMPTS = int(os.getenv('TOTAL_ATTEMPTS', ATTEMPTS))
    TOTAL_LETTERS = int(os.getenv('TOTAL_LETTERS', LETTERS))
    CHOSEN_WORD = os.getenv('CHOSEN_WORD', DEFAULT_CHOSEN_WORD).strip().lower()
    ALPHABET = os.getenv('ALPHABET', ALPHABET).strip().lower()
    DUPLICATE_LETTER_POLICY = os.getenv('DUPLICATE_LETTER_POLICY', INDEPENDENT_POLICY).strip().lower()

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    TOTAL_ATTEMPTS = ATTEMPTS
    TOTAL_LETTERS = LETTERS
    CHOSEN_WORD = DEFAULT_CHOSEN_WORD
    ALPHABET = ALPHABET
    DUPLICATE_LETTER_POLICY = INDEPENDENT_POLICY


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
