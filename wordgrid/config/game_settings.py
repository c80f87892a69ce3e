"""
Game Configuration Constants Module

This module defines all game rule constants and the immutable settings
record every game is built from. Settings are validated before any board
is created so that a bad configuration never produces a half-built game.
"""

from dataclasses import dataclass
from typing import Final


# Core Game Configuration Constants
ATTEMPTS: Final[int] = 6
"""
Number of guess rows on the board.
Type: Final[int] - Immutable to prevent accidental modification
"""

LETTERS: Final[int] = 5
"""
Number of tiles per guess row.
"""

ALPHABET: Final[str] = 'abcdefghijklmnopqrstuvwxyz'
DEFAULT_CHOSEN_WORD: Final[str] = 'coder'

# Logical key identifiers delivered by the host
ENTER: Final[str] = 'Enter'
BACKSPACE: Final[str] = 'Backspace'
ESCAPE: Final[str] = 'Escape'

# Key code range for Latin letters (case-insensitive)
LETTER_A: Final[int] = 65
LETTER_Z: Final[int] = 90

INDEPENDENT_POLICY: Final[str] = 'independent'
OCCURRENCE_LIMITED_POLICY: Final[str] = 'occurrence_limited'
DUPLICATE_LETTER_POLICIES: Final[tuple] = (INDEPENDENT_POLICY, OCCURRENCE_LIMITED_POLICY)


class GameConfigError(ValueError):
    """Raised when a game cannot be built from the given settings."""


@dataclass(frozen=True)
class GameSettings:
    """Construction-time settings, immutable for the lifetime of a game."""
    chosen_word: str = DEFAULT_CHOSEN_WORD
    total_attempts: int = ATTEMPTS
    total_letters: int = LETTERS
    alphabet: str = ALPHABET
    duplicate_policy: str = INDEPENDENT_POLICY

    @classmethod
    def from_config(cls, config_class, chosen_word: str = None) -> 'GameSettings':
        """
        Build settings from a Config class (or instance).

        Args:
            config_class: Configuration class exposing the game keys
            chosen_word: Optional override of the configured target word

        Returns:
            GameSettings: Validated settings
        """
        settings = cls(
            chosen_word=chosen_word if chosen_word is not None else config_class.CHOSEN_WORD,
            total_attempts=config_class.TOTAL_ATTEMPTS,
            total_letters=config_class.TOTAL_LETTERS,
            alphabet=config_class.ALPHABET,
            duplicate_policy=config_class.DUPLICATE_LETTER_POLICY,
        )
        validate_game_settings(settings)
        return settings


def validate_game_settings(settings: GameSettings) -> bool:
    """
    Validates a settings record before any game state is built.

    This function performs validation to ensure:
    1. Board dimensions are positive
    2. The alphabet is non-empty, lowercase and made of distinct single symbols
    3. The chosen word fits the board and only uses alphabet symbols
    4. The duplicate-letter policy is known

    Returns:
        bool: True if settings pass all validation checks

    Raises:
        GameConfigError: If any validation check fails with detailed error message
    """
    if not isinstance(settings.total_attempts, int) or settings.total_attempts < 1:
        raise GameConfigError(f"total_attempts must be a positive integer, got {settings.total_attempts!r}")

    if not isinstance(settings.total_letters, int) or settings.total_letters < 1:
        raise GameConfigError(f"total_letters must be a positive integer, got {settings.total_letters!r}")

    if not settings.alphabet:
        raise GameConfigError("Alphabet cannot be empty")

    if settings.alphabet != settings.alphabet.lower():
        raise GameConfigError(f"Alphabet '{settings.alphabet}' must be lowercase")

    if len(set(settings.alphabet)) != len(settings.alphabet):
        duplicates = sorted({s for s in settings.alphabet if settings.alphabet.count(s) > 1})
        raise GameConfigError(f"Duplicate symbols found in alphabet: {duplicates}")

    word = settings.chosen_word
    if not isinstance(word, str) or len(word) != settings.total_letters:
        raise GameConfigError(
            f"Chosen word {word!r} must be exactly {settings.total_letters} characters long"
        )

    if word != word.lower():
        raise GameConfigError(f"Chosen word '{word}' must be lowercase")

    outside = [symbol for symbol in word if symbol not in settings.alphabet]
    if outside:
        raise GameConfigError(f"Chosen word '{word}' uses symbols outside the alphabet: {outside}")

    if settings.duplicate_policy not in DUPLICATE_LETTER_POLICIES:
        raise GameConfigError(
            f"Unknown duplicate letter policy '{settings.duplicate_policy}', "
            f"expected one of {list(DUPLICATE_LETTER_POLICIES)}"
        )

    return True


# Module initialization: Validate default configuration
if __name__ == "__main__":

    try:
        validate_game_settings(GameSettings())
        print(" Default game settings validation passed")
    except GameConfigError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
