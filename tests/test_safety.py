import time
from unittest.mock import call, patch

import pytest

from evdash.safety import SafetyManager, delay_ms


@pytest.mark.parametrize(
    ("accelerating", "braking", "expected"),
    [
        (False, False, False),
        (True, False, False),
        (False, True, False),
        (True, True, True),
    ],
)
def test_check_brake_and_accelerator(accelerating, braking, expected):
    manager = SafetyManager()
    assert manager.check_brake_and_accelerator(accelerating, braking) is expected


def test_defaults():
    manager = SafetyManager()
    assert manager.brake_applied is False
    assert manager.brake_intensity == 0
    assert manager.current_speed == 0


def test_apply_brake_without_brake_keeps_speed():
    manager = SafetyManager(brake_intensity=5, current_speed=50)
    assert manager.apply_brake() == 50
    assert manager.current_speed == 50


def test_apply_brake_reduces_speed_by_intensity():
    manager = SafetyManager(brake_applied=True, brake_intensity=5, current_speed=50)
    first = manager.apply_brake()
    assert first == 50 - 5
    second = manager.apply_brake()
    assert second == first - 5


def test_release_brake_stops_braking():
    manager = SafetyManager(brake_applied=True, brake_intensity=4, current_speed=30)
    manager.release_brake()
    assert manager.brake_applied is False
    assert manager.apply_brake() == 30


def test_delay_ms_converts_to_seconds():
    with patch("evdash.safety.time.sleep") as sleep:
        result = delay_ms(250)
    assert result is None
    assert sleep.call_args_list == [call(0.25)]


def test_delay_ms_waits():
    start = time.perf_counter()
    result = delay_ms(20)
    elapsed = time.perf_counter() - start
    assert result is None
    assert elapsed >= 0.015