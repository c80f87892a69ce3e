"""
Game Data Models

Contains all board-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class TileStatus(Enum):
    """Tile evaluation status."""
    UNCHECKED = "unchecked"
    MATCHED = "matched"
    MISSED = "missed"
    WRONG = "wrong"


# Keyboard feedback can only move up this ranking
STATUS_RANK: Dict[TileStatus, int] = {
    TileStatus.UNCHECKED: 0,
    TileStatus.WRONG: 1,
    TileStatus.MISSED: 2,
    TileStatus.MATCHED: 3,
}


class GameInvariantError(RuntimeError):
    """Raised when game state is mutated outside of its valid bounds."""


@dataclass
class Tile:
    """One letter cell within an attempt."""
    letter: str = ""
    status: TileStatus = TileStatus.UNCHECKED

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass
class Attempt:
    """One guess row."""
    tiles: List[Tile] = field(default_factory=list)

    @property
    def word(self) -> str:
        return ''.join(tile.letter for tile in self.tiles).lower()


@dataclass
class Board:
    """Grid of attempts x tiles."""
    attempts: List[Attempt] = field(default_factory=list)

    @classmethod
    def build(cls, total_attempts: int, total_letters: int) -> 'Board':
        """Create a fresh board of empty, unchecked tiles."""
        return cls(attempts=[
            Attempt(tiles=[Tile() for _ in range(total_letters)])
            for _ in range(total_attempts)
        ])

    def tile(self, attempt: int, tile: int) -> Tile:
        return self.attempts[attempt].tiles[tile]

    def to_rows(self) -> List[List[Dict[str, str]]]:
        return [[tile.to_dict() for tile in attempt.tiles] for attempt in self.attempts]


class KeyMap:
    """
    Best feedback observed for every alphabet letter in the current game.

    The set of keys is fixed at construction; marking a letter outside the
    alphabet raises KeyError. A letter's status is only ever upgraded
    (unchecked < wrong < missed < matched), across attempts as well as
    within one.
    """

    def __init__(self, alphabet: str):
        self.alphabet = alphabet
        self._statuses: Dict[str, TileStatus] = {
            letter: TileStatus.UNCHECKED for letter in alphabet
        }

    def __getitem__(self, letter: str) -> TileStatus:
        return self._statuses[letter]

    def __contains__(self, letter: object) -> bool:
        return letter in self._statuses

    def __iter__(self) -> Iterator[str]:
        return iter(self._statuses)

    def __len__(self) -> int:
        return len(self._statuses)

    def mark(self, letter: str, status: TileStatus) -> TileStatus:
        """
        Record feedback for a letter, keeping the better of old and new.

        Returns:
            TileStatus: The status stored after the update
        """
        if letter not in self._statuses:
            raise KeyError(f"Letter '{letter}' is not part of the alphabet")

        current_status = self._statuses[letter]
        if STATUS_RANK[status] > STATUS_RANK[current_status]:
            self._statuses[letter] = status
        return self._statuses[letter]

    def to_dict(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in self._statuses.items()}


@dataclass
class Cursor:
    """Position of the next tile to be filled."""
    attempt: int = 0
    tile: int = 0


@dataclass
class GameSnapshot:
    """Read-only game state handed to the host after every event."""
    game_id: Optional[str]
    current_attempt: int
    current_tile: int
    total_attempts: int
    total_letters: int
    board: List[List[Dict[str, str]]]  # Status as string for JSON serialization
    key_map: Dict[str, str]
    solved: bool
    game_over: bool
    message: str
    answer: Optional[str] = None  # Only included when game is over
