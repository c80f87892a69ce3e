"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    TileStatus, Tile, Attempt, Board, KeyMap, Cursor, GameSnapshot, GameInvariantError
)

__all__ = [
    'TileStatus', 'Tile', 'Attempt', 'Board', 'KeyMap', 'Cursor', 'GameSnapshot',
    'GameInvariantError'
]
