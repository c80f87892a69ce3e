"""
Game State

The aggregate root of one puzzle: board, cursor, keyboard feedback and
derived status. All mutation goes through the methods below.
"""

import copy
import threading
from contextlib import contextmanager
from typing import Optional, Tuple
from ..config.game_settings import GameSettings, validate_game_settings
from ..models.game import Board, Cursor, GameInvariantError, GameSnapshot, KeyMap
from ..utils.game_logger import game_logger
from .feedback import Evaluation, FeedbackPolicy, classify_guess, is_solved, update_key_map
from .notifier import LoggingNotifier, Notifier, notify_submission_safely


Checkpoint = Tuple[Cursor, bool, str, Board, KeyMap]


class GameState:
    """
    Single-player guessing game state machine.

    This class handles:
    - Board and keyboard map (re)construction
    - Cursor movement within the active row
    - Submission: classification, win detection, cursor advance, notification
    """

    def __init__(self, settings: Optional[GameSettings] = None,
                 notifier: Optional[Notifier] = None,
                 game_id: Optional[str] = None):
        """
        Args:
            settings: Construction-time settings (defaults to the standard 6x5 game)
            notifier: Side channel informed of every submission
            game_id: Identifier used in logs and snapshots

        Raises:
            GameConfigError: If the settings are invalid; no state is built
        """
        settings = settings or GameSettings()
        validate_game_settings(settings)

        self.settings = settings
        self.game_id = game_id
        self.chosen_word = settings.chosen_word
        self.total_attempts = settings.total_attempts
        self.total_letters = settings.total_letters
        self.policy = FeedbackPolicy(settings.duplicate_policy)
        self.notifier = notifier if notifier is not None else LoggingNotifier()

        # Held by hosts for the whole of one key event
        self.lock = threading.RLock()

        self.reset()

    def reset(self) -> None:
        """Start over: empty board, unchecked keyboard, cursor at the first tile."""
        with self.lock:
            self.cursor = Cursor()
            self.solved = False
            self.message = ''
            self.board = Board.build(self.total_attempts, self.total_letters)
            self.key_map = KeyMap(self.settings.alphabet)

    def checkpoint(self) -> Checkpoint:
        """Copy the mutable state so a failed event can be undone."""
        with self.lock:
            return copy.deepcopy((self.cursor, self.solved, self.message, self.board, self.key_map))

    def restore(self, checkpoint: Checkpoint) -> None:
        with self.lock:
            self.cursor, self.solved, self.message, self.board, self.key_map = checkpoint

    @contextmanager
    def transaction(self):
        """Hold the lock for a block and undo its changes if it raises."""
        with self.lock:
            checkpoint = self.checkpoint()
            try:
                yield self
            except Exception:
                self.restore(checkpoint)
                raise

    @property
    def current_attempt(self) -> int:
        return self.cursor.attempt

    @property
    def current_tile(self) -> int:
        return self.cursor.tile

    @property
    def is_row_full(self) -> bool:
        return self.cursor.tile == self.total_letters

    @property
    def is_exhausted(self) -> bool:
        return self.cursor.attempt >= self.total_attempts

    @property
    def is_over(self) -> bool:
        return self.solved or self.is_exhausted

    def set_tile_letter(self, attempt: int, tile: int, letter: str) -> None:
        """Write a letter (or '' to clear) into a tile without touching its status."""
        if not 0 <= attempt < self.total_attempts:
            raise GameInvariantError(f"Attempt index {attempt} out of range [0, {self.total_attempts})")
        if not 0 <= tile < self.total_letters:
            raise GameInvariantError(f"Tile index {tile} out of range [0, {self.total_letters})")
        if letter != '' and letter not in self.key_map:
            raise GameInvariantError(f"Letter {letter!r} is not part of the alphabet")
        self.board.tile(attempt, tile).letter = letter

    def advance_cursor_forward(self) -> None:
        if self.is_row_full:
            raise GameInvariantError("Cannot move past the end of a full row")
        self.cursor.tile += 1

    def advance_cursor_backward(self) -> None:
        # Never backs up into the previous attempt
        if self.cursor.tile > 0:
            self.cursor.tile -= 1

    def advance_attempt(self) -> None:
        if self.is_exhausted:
            raise GameInvariantError("No attempts remain on the board")
        self.cursor.attempt += 1
        self.cursor.tile = 0

    def add_letter(self, letter: str) -> None:
        self.set_tile_letter(self.cursor.attempt, self.cursor.tile, letter)
        self.advance_cursor_forward()

    def delete_letter(self) -> None:
        self.advance_cursor_backward()
        self.set_tile_letter(self.cursor.attempt, self.cursor.tile, '')

    def attempted_word(self, attempt: int) -> str:
        return self.board.attempts[attempt].word

    def submit_attempt(self) -> Evaluation:
        """
        Evaluate the active row against the chosen word.

        Returns:
            List of (letter, status) pairs for the submitted row

        Raises:
            GameInvariantError: If the game is over or the row is not full
        """
        if self.is_over:
            raise GameInvariantError("Cannot submit after the game is over")
        if not self.is_row_full:
            raise GameInvariantError("Cannot submit a row that is not full")

        attempt_index = self.cursor.attempt
        word = self.attempted_word(attempt_index)

        evaluations = classify_guess(word, self.chosen_word, self.policy)
        for tile, (_, status) in zip(self.board.attempts[attempt_index].tiles, evaluations):
            tile.status = status
        update_key_map(self.key_map, evaluations)

        if is_solved(word, self.chosen_word):
            self.solved = True
            attempts_taken = attempt_index + 1
            attempts = 'attempts' if attempts_taken > 1 else 'attempt'
            self.message = f"Congratulations! You solved the word in {attempts_taken} {attempts}"

        self.advance_attempt()

        game_logger.logger.debug(
            f"Game {self.game_id}: attempt {attempt_index} '{word}' -> "
            f"{[status.value for _, status in evaluations]}"
        )

        notify_submission_safely(self.notifier, attempt_index, word)
        return evaluations

    def snapshot(self) -> GameSnapshot:
        """Return the current state (answer revealed only once the game is over)."""
        with self.lock:
            game_over = self.is_over
            return GameSnapshot(
                game_id=self.game_id,
                current_attempt=self.cursor.attempt,
                current_tile=self.cursor.tile,
                total_attempts=self.total_attempts,
                total_letters=self.total_letters,
                board=self.board.to_rows(),
                key_map=self.key_map.to_dict(),
                solved=self.solved,
                game_over=game_over,
                message=self.message,
                answer=self.chosen_word if game_over else None
            )
