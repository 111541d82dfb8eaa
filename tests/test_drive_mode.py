import pytest

from evdash.drive_mode import DriveMode, DriveModeManager


def test_default_mode_is_eco():
    manager = DriveModeManager()
    assert manager.current_drive_mode is DriveMode.ECO


def test_power_output_eco():
    manager = DriveModeManager()
    assert manager.power_output == 220


def test_power_output_sport():
    manager = DriveModeManager(current_drive_mode=DriveMode.SPORT)
    assert manager.power_output == 300


def test_eco_power_is_lower_than_sport():
    eco = DriveModeManager(current_drive_mode=DriveMode.ECO)
    sport = DriveModeManager(current_drive_mode=DriveMode.SPORT)
    assert eco.power_output < sport.power_output


@pytest.mark.parametrize("speed", [0, 1, 80, 149, 150])
def test_limit_keeps_speed_at_or_below_max(speed):
    manager = DriveModeManager()
    assert manager.limit_speed_for_eco_mode(speed) == speed


@pytest.mark.parametrize("speed", [151, 200, 1000])
def test_limit_caps_speed_above_max(speed):
    manager = DriveModeManager()
    assert manager.limit_speed_for_eco_mode(speed) == manager.max_eco_speed


def test_toggle_switches_and_returns_new_mode():
    manager = DriveModeManager()
    assert manager.toggle() is DriveMode.SPORT
    assert manager.current_drive_mode is DriveMode.SPORT
    assert manager.toggle() is DriveMode.ECO
    assert manager.current_drive_mode is DriveMode.ECO


def test_toggle_changes_power_output():
    manager = DriveModeManager()
    before = manager.power_output
    manager.toggle()
    assert manager.power_output == manager.power_output_sport
    assert manager.power_output != before or manager.power_output_sport == before


def test_drive_mode_string_values():
    assert str(DriveMode.ECO) == "ECO"
    assert DriveMode("SPORT") is DriveMode.SPORT