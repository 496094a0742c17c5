"""
Unit tests for hand angle calculation
"""

import math
from datetime import date, datetime, time, timedelta
from types import SimpleNamespace

import pytest

from angles import NEAR_PI, HandAngles, compute_angles, time_sample


def at(hour, minute=0, second=0, microsecond=0):
    return datetime(2026, 10, 19, hour, minute, second, microsecond)


def test_midnight_snaps_every_hand_to_near_pi():
    angles = compute_angles(at(0))

    assert angles == HandAngles(NEAR_PI, NEAR_PI, NEAR_PI)
    assert angles.hour != math.pi


def test_three_oclock():
    angles = compute_angles(at(3))

    assert angles.hour == pytest.approx(math.radians(270))
    assert angles.minute == NEAR_PI
    assert angles.second == NEAR_PI


def test_half_past_six_wraps_minute_hand_to_zero():
    angles = compute_angles(at(6, 30))

    assert angles.minute == 0.0
    assert angles.hour == pytest.approx(math.radians(15))
    assert angles.second == NEAR_PI


def test_afternoon_hours_use_twelve_hour_dial():
    assert compute_angles(at(15, 10)) == compute_angles(at(3, 10))
    assert compute_angles(at(12)).hour == NEAR_PI


def test_second_hand_sweeps_with_fraction():
    angles = compute_angles(at(12, 0, 30, 500000))

    # 6 * 30.5 + 180 = 363 degrees
    assert angles.second == pytest.approx(math.radians(3))


def test_minute_hand_moves_between_minutes():
    angles = compute_angles(at(10, 15, 30))

    assert angles.minute == pytest.approx(math.radians(6 * 15.5 + 180))


def test_angles_stay_in_range_over_half_a_day():
    start = at(0)
    for step in range(0, 12 * 3600, 37):
        angles = compute_angles(start + timedelta(seconds=step, microseconds=step * 997 % 1000000))
        for value in angles:
            assert 0 <= value < 2 * math.pi


def test_hands_move_continuously():
    start = at(0)
    for step in range(0, 12 * 3600, 61):
        before = compute_angles(start + timedelta(seconds=step))
        after = compute_angles(start + timedelta(seconds=step + 1))

        minute_step = (after.minute - before.minute) % (2 * math.pi)
        hour_step = (after.hour - before.hour) % (2 * math.pi)

        assert minute_step < math.radians(0.11)
        assert hour_step < math.radians(0.01)


def test_time_sample_reads_datetime_components():
    sample = time_sample(at(23, 59, 58, 250000))

    assert sample.hour == 23
    assert sample.minute == 59
    assert sample.second == 58
    assert sample.fraction == pytest.approx(0.25)


def test_time_sample_accepts_time_of_day():
    assert time_sample(time(8, 5, 1)) == (8, 5, 1, 0)


def test_missing_components_default_to_zero():
    assert time_sample(date(2026, 10, 19)) == (0, 0, 0, 0)
    assert compute_angles(date(2026, 10, 19)) == HandAngles(NEAR_PI, NEAR_PI, NEAR_PI)

    partial = SimpleNamespace(hour=None, minute=20)
    assert time_sample(partial) == (0, 20, 0, 0)


def _advance(before, after):
    return (after - before) % (2 * math.pi)


def test_second_hand_sweeps_evenly_across_minutes():
    start = at(9, 41, 58)
    step = timedelta(microseconds=250000)
    expected = math.radians(6 * 0.25)

    for n in range(300):
        before = compute_angles(start + n * step).second
        after = compute_angles(start + (n + 1) * step).second

        # Only the exact half turn is nudged, by far less than a step
        assert _advance(before, after) == pytest.approx(expected, abs=2e-5)


def test_second_hand_microsecond_steps():
    start = at(9, 41, 59, 999990)
    step = timedelta(microseconds=1)
    expected = math.radians(6e-6)

    for n in range(20):
        before = compute_angles(start + n * step).second
        after = compute_angles(start + (n + 1) * step).second

        if NEAR_PI in (before, after):
            advance = _advance(before, after)
            assert min(advance, 2 * math.pi - advance) < 2e-5
        else:
            assert _advance(before, after) == pytest.approx(expected, abs=1e-12)
