"""
Input Router

Classifies raw key events and dispatches them to GameState mutators.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from ..config.game_settings import ALPHABET, BACKSPACE, ENTER, ESCAPE, LETTER_A, LETTER_Z
from ..utils.game_logger import game_logger


class KeyAction(Enum):
    """Outcome of routing one key event."""
    LETTER = "letter"
    DELETE = "delete"
    SUBMIT = "submit"
    RESET = "reset"
    IGNORED = "ignored"


@dataclass(frozen=True)
class KeyEvent:
    """Minimal key-press event delivered by the host."""
    key: str
    key_code: Optional[int] = None


def letter_for(event: KeyEvent, alphabet: str = ALPHABET) -> Optional[str]:
    """Return the lowercase alphabet letter carried by an event, if any."""
    key = event.key or ''

    if event.key_code is not None:
        if not LETTER_A <= event.key_code <= LETTER_Z:
            return None
        letter = key.lower() if len(key) == 1 else chr(event.key_code).lower()
    elif len(key) == 1:
        letter = key.lower()
    else:
        return None

    return letter if letter in alphabet else None


def classify_key(event: KeyEvent, current_tile: int, total_letters: int,
                 alphabet: str = ALPHABET) -> Tuple[KeyAction, Optional[str]]:
    """
    Classify a key event against the cursor's tile position.

    Rules, in priority order: Backspace deletes, Escape resets, Enter submits
    a full row, an alphabet letter fills a non-full row, anything else is
    ignored.

    Returns:
        Tuple of (action, letter) where letter is only set for LETTER
    """
    if event.key == BACKSPACE:
        return KeyAction.DELETE, None

    if event.key == ESCAPE:
        return KeyAction.RESET, None

    if event.key == ENTER:
        if current_tile == total_letters:
            return KeyAction.SUBMIT, None
        return KeyAction.IGNORED, None

    letter = letter_for(event, alphabet)
    if letter is not None and current_tile < total_letters:
        return KeyAction.LETTER, letter

    return KeyAction.IGNORED, None


class InputRouter:
    """Routes key events to one GameState instance."""

    def __init__(self, game):
        self.game = game

    def dispatch(self, event: KeyEvent) -> KeyAction:
        """
        Apply one key event to the game.

        Letter, delete and submit are rejected once the game is over;
        reset is always accepted.

        Returns:
            KeyAction: The action performed (IGNORED if nothing changed)
        """
        game = self.game
        action, letter = classify_key(
            event, game.current_tile, game.total_letters, game.settings.alphabet
        )

        if action in (KeyAction.LETTER, KeyAction.DELETE, KeyAction.SUBMIT) and game.is_over:
            game_logger.logger.debug(f"Game {game.game_id}: rejected {action.value} after game over")
            return KeyAction.IGNORED

        if action is KeyAction.DELETE:
            game.delete_letter()
        elif action is KeyAction.RESET:
            game.reset()
        elif action is KeyAction.SUBMIT:
            game.submit_attempt()
        elif action is KeyAction.LETTER:
            game.add_letter(letter)

        return action
