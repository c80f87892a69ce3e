import pytest

from wordgrid.models.game import KeyMap, TileStatus
from wordgrid.services.feedback import (
    FeedbackPolicy, classify_guess, mark_matches, mark_misses, update_key_map
)

MATCHED, MISSED, WRONG = TileStatus.MATCHED, TileStatus.MISSED, TileStatus.WRONG


def statuses(evaluations):
    return [status for _, status in evaluations]


def test_route_against_coder():
    assert statuses(classify_guess('route', 'coder')) == [MISSED, MATCHED, WRONG, WRONG, MISSED]


def test_first_pass_ignores_positions():
    assert mark_misses('route', 'coder') == [MISSED, MISSED, WRONG, WRONG, MISSED]


def test_second_pass_overrides_first():
    first = mark_misses('route', 'coder')
    assert mark_matches('route', 'coder', first) == [MISSED, MATCHED, WRONG, WRONG, MISSED]


def test_exact_guess_is_all_matched():
    assert statuses(classify_guess('coder', 'coder')) == [MATCHED] * 5


def test_sheep_speed_classifies_each_position():
    assert statuses(classify_guess('speed', 'sheep')) == [MATCHED, MISSED, MATCHED, MATCHED, WRONG]


def test_repeated_letter_marked_missed_at_every_position():
    # 'r' occurs once in the target but every misplaced copy is reported
    assert statuses(classify_guess('error', 'coder')) == [MISSED, MISSED, MISSED, MISSED, MATCHED]


def test_occurrence_limited_consumes_target_letters():
    evaluations = classify_guess('error', 'coder', FeedbackPolicy.OCCURRENCE_LIMITED)
    assert statuses(evaluations) == [MISSED, WRONG, WRONG, MISSED, MATCHED]


def test_occurrence_limited_agrees_without_duplicates():
    evaluations = classify_guess('route', 'coder', FeedbackPolicy.OCCURRENCE_LIMITED)
    assert statuses(evaluations) == [MISSED, MATCHED, WRONG, WRONG, MISSED]


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        classify_guess('cod', 'coder')


def test_key_map_after_route():
    key_map = KeyMap('abcdefghijklmnopqrstuvwxyz')
    update_key_map(key_map, classify_guess('route', 'coder'))

    assert key_map['r'] is MISSED
    assert key_map['o'] is MATCHED
    assert key_map['u'] is WRONG
    assert key_map['t'] is WRONG
    assert key_map['e'] is MISSED
    assert key_map['c'] is TileStatus.UNCHECKED


def test_key_map_match_wins_within_one_guess():
    key_map = KeyMap('abcdefghijklmnopqrstuvwxyz')
    update_key_map(key_map, classify_guess('error', 'coder'))
    assert key_map['r'] is MATCHED
