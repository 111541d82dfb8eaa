import pytest

from evdash.battery import BatteryManager


def test_defaults():
    battery = BatteryManager()
    assert battery.battery_level == 100
    assert battery.battery_capacity == 90
    assert battery.drain_per_km == 0.2


def test_baseline_drain_equals_drain_per_km():
    battery = BatteryManager()
    assert battery.calculate_battery_drain(0, 15, 0) == pytest.approx(0.2)


def test_drain_grows_with_speed():
    battery = BatteryManager()
    slow = battery.calculate_battery_drain(30, 22, 2)
    fast = battery.calculate_battery_drain(120, 22, 2)
    assert fast > slow


def test_drain_grows_with_ac_temperature():
    battery = BatteryManager()
    assert battery.calculate_battery_drain(50, 28, 1) > battery.calculate_battery_drain(50, 18, 1)


def test_drain_grows_with_wind_level():
    battery = BatteryManager()
    assert battery.calculate_battery_drain(50, 22, 5) > battery.calculate_battery_drain(50, 22, 1)


def test_drain_does_not_mutate_level():
    battery = BatteryManager()
    battery.calculate_battery_drain(200, 30, 5)
    assert battery.battery_level == 100


def test_remaining_range_full_battery():
    battery = BatteryManager()
    assert battery.calculate_remaining_range() == pytest.approx(450.0)


def test_remaining_range_scales_with_level():
    full = BatteryManager()
    half = BatteryManager(battery_level=50)
    assert half.calculate_remaining_range() == pytest.approx(full.calculate_remaining_range() / 2)


@pytest.mark.parametrize("drain", [0.0, -1.0])
def test_remaining_range_zero_when_drain_not_positive(drain):
    battery = BatteryManager(drain_per_km=drain)
    assert battery.calculate_remaining_range() == 0.0


def test_empty_battery_has_no_range():
    battery = BatteryManager(battery_level=0)
    assert battery.calculate_remaining_range() == 0.0


def test_update_truncates_to_whole_percent():
    battery = BatteryManager()
    level = battery.update_battery_level(0, 15, 0)
    assert level == 99
    assert battery.battery_level == level


def test_update_never_goes_below_zero():
    battery = BatteryManager(battery_level=0)
    assert battery.update_battery_level(200, 30, 5) == 0
    assert battery.battery_level == 0


def test_repeated_updates_are_monotonic():
    battery = BatteryManager()
    levels = [battery.update_battery_level(100, 25, 3) for _ in range(150)]
    assert all(a >= b for a, b in zip(levels, levels[1:]))
    assert levels[-1] == 0
    assert all(isinstance(level, int) for level in levels)