"""
Feedback Classifier

Pure functions mapping a submitted guess and the target word to per-tile
statuses and keyboard updates.
"""

from enum import Enum
from typing import List, Optional, Tuple
from ..models.game import KeyMap, TileStatus


class FeedbackPolicy(Enum):
    """How repeated guess letters are classified."""
    INDEPENDENT = "independent"
    OCCURRENCE_LIMITED = "occurrence_limited"


Evaluation = List[Tuple[str, TileStatus]]


def mark_misses(guess: str, target: str) -> List[TileStatus]:
    """First pass: missed if the target holds the letter anywhere, wrong otherwise."""
    return [
        TileStatus.MISSED if letter in target else TileStatus.WRONG
        for letter in guess
    ]


def mark_matches(guess: str, target: str, statuses: List[TileStatus]) -> List[TileStatus]:
    """Second pass: exact position matches override the first pass."""
    return [
        TileStatus.MATCHED if letter == target[i] else statuses[i]
        for i, letter in enumerate(guess)
    ]


def _classify_occurrence_limited(guess: str, target: str) -> List[TileStatus]:
    """
    Classify with letter consumption: a repeated guess letter is only
    marked missed while unconsumed copies remain in the target.
    """
    result: List[Optional[TileStatus]] = []

    # Create working copy to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: Mark all exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            result.append(TileStatus.MATCHED)
            # Mark as consumed to prevent double-counting
            target_chars[i] = None
        else:
            result.append(None)  # Placeholder for second pass

    # Second pass: Mark present letters and absent letters
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = TileStatus.MISSED
            # Remove first occurrence to prevent double-counting
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = TileStatus.WRONG

    return [status for status in result if status is not None]


def classify_guess(guess: str, target: str,
                   policy: FeedbackPolicy = FeedbackPolicy.INDEPENDENT) -> Evaluation:
    """
    Classify every tile of a guess against the target word.

    Args:
        guess: Lowercase guessed word
        target: Lowercase target word of the same length
        policy: Duplicate-letter handling

    Returns:
        List of (letter, status) pairs, one per position

    Raises:
        ValueError: If the guess and target lengths differ
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' must be the same length as the target word")

    if policy is FeedbackPolicy.OCCURRENCE_LIMITED:
        statuses = _classify_occurrence_limited(guess, target)
    else:
        statuses = mark_matches(guess, target, mark_misses(guess, target))

    return list(zip(guess, statuses))


def update_key_map(key_map: KeyMap, evaluations: Evaluation) -> None:
    """
    Updates keyboard feedback based on guess results.

    Misses and wrongs are recorded before matches, and the map itself never
    downgrades, so a matched letter stays matched for the rest of the game.
    """
    for letter, status in evaluations:
        if status is not TileStatus.MATCHED:
            key_map.mark(letter, status)

    for letter, status in evaluations:
        if status is TileStatus.MATCHED:
            key_map.mark(letter, status)


def is_solved(guess: str, target: str) -> bool:
    return guess == target
