"""Dashboard simulation: keyboard-driven vehicle state, persistence and display loops."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from collections.abc import Callable, Collection
from enum import Enum
from pathlib import Path
from typing import TextIO

from evdash.battery import BatteryManager
from evdash.dashboard import (
    DATABASE_PATH,
    DashboardController,
    StrPath,
    _parse_float,
    _parse_int,
    read_database,
)
from evdash.display import DisplayManager
from evdash.drive_mode import DriveMode, DriveModeManager
from evdash.safety import SafetyManager
from evdash.speed import SpeedCalculator

LOW_BATTERY_THRESHOLD = 20
LOW_BATTERY_WARNING = "Warning: Low Battery. Find a Charging Station!"

AC_TEMP_MIN = 16
AC_TEMP_MAX = 30
WIND_LEVEL_MIN = 1
WIND_LEVEL_MAX = 5


class Key(Enum):
    """Controls that the driver can press."""

    ACCELERATE = "a"
    BRAKE = "b"
    MODE = "m"
    UP = "k"
    DOWN = "j"
    RIGHT = "l"
    LEFT = "h"

    @classmethod
    def parse(cls, text: str) -> frozenset[Key]:
        """Return the keys whose characters appear in the text."""
        lowered = text.lower()
        return frozenset(key for key in cls if key.value in lowered)


_EDGE_KEYS = frozenset({Key.UP, Key.DOWN, Key.RIGHT, Key.LEFT})


class InputHandler:
    """Turns the set of pressed keys into new dashboard values, one tick at a time."""

    def __init__(
        self,
        dashboard: DashboardController,
        speed_calculator: SpeedCalculator | None = None,
        drive_mode_manager: DriveModeManager | None = None,
        battery_manager: BatteryManager | None = None,
        safety_manager: SafetyManager | None = None,
    ) -> None:
        self.dashboard = dashboard
        self.speed_calculator = speed_calculator if speed_calculator is not None else SpeedCalculator()
        self.drive_mode_manager = (
            drive_mode_manager if drive_mode_manager is not None else DriveModeManager()
        )
        self.battery_manager = battery_manager if battery_manager is not None else BatteryManager()
        self.safety_manager = safety_manager if safety_manager is not None else SafetyManager()

        self.ac_temp: int = dashboard.ac_temp
        self.wind_level: int = dashboard.wind_level
        self.mode: DriveMode = dashboard.drive_mode
        self.speed_calculator.current_speed = dashboard.speed
        self.drive_mode_manager.current_drive_mode = self.mode
        self._held: frozenset[Key] = frozenset()

    def _newly_pressed(self, key: Key, pressed: frozenset[Key]) -> bool:
        return key in pressed and key not in self._held

    def tick(self, pressed: Collection[Key]) -> None:
        """Process one 100 ms step with the given keys held down."""
        pressed = frozenset(pressed)
        calculator = self.speed_calculator
        accelerating = Key.ACCELERATE in pressed
        braking = Key.BRAKE in pressed

        if accelerating:
            calculator.calculate_speed(True, False)
            speed = calculator.adjust_speed_for_drive_mode(self.drive_mode_manager.current_drive_mode)
        if braking:
            speed = calculator.calculate_speed(False, True)
        if not accelerating and not braking:
            speed = calculator.calculate_speed(False, False)

        if Key.MODE in pressed:
            self.mode = self.drive_mode_manager.toggle()

        if self._newly_pressed(Key.UP, pressed):
            self.ac_temp = min(self.ac_temp + 1, AC_TEMP_MAX)
        if self._newly_pressed(Key.DOWN, pressed):
            self.ac_temp = max(self.ac_temp - 1, AC_TEMP_MIN)
        if self._newly_pressed(Key.RIGHT, pressed):
            self.wind_level = min(self.wind_level + 1, WIND_LEVEL_MAX)
        if self._newly_pressed(Key.LEFT, pressed):
            self.wind_level = max(self.wind_level - 1, WIND_LEVEL_MIN)
        self._held = pressed & _EDGE_KEYS

        battery_level = self.battery_manager.update_battery_level(speed, self.ac_temp, self.wind_level)
        if battery_level == 0:
            speed = 0
        remaining_range = self.battery_manager.calculate_remaining_range()

        dashboard = self.dashboard
        dashboard.drive_mode = self.mode
        dashboard.speed = speed
        dashboard.ac_temp = self.ac_temp
        dashboard.wind_level = self.wind_level
        dashboard.battery_level = battery_level
        dashboard.remaining_range = remaining_range


def sync_from_database(dashboard: DashboardController, path: StrPath = DATABASE_PATH) -> None:
    """Copy the database values into the dashboard through its validating setters.

    The wind level entry is applied through the A/C temperature setting.
    Raises OSError if the file cannot be read and ValueError on a bad number.
    """
    data = read_database(path)

    if "SPEED" in data:
        new_speed = _parse_int(data["SPEED"])
        if new_speed >= 0:
            dashboard.speed = new_speed

    if "DRIVE MODE" in data:
        new_mode = data["DRIVE MODE"]
        if new_mode == "ECO":
            dashboard.drive_mode = DriveMode.ECO
        elif new_mode == "SPORT":
            dashboard.drive_mode = DriveMode.SPORT

    if "BATTERY LEVEL" in data:
        new_level = _parse_int(data["BATTERY LEVEL"])
        if 0 <= new_level <= 100:
            dashboard.battery_level = new_level

    if "AC TEMPERATURE" in data:
        new_temp = _parse_int(data["AC TEMPERATURE"])
        if new_temp >= 0:
            dashboard.ac_temp = new_temp

    if "WIND LEVEL" in data:
        new_wind = _parse_int(data["WIND LEVEL"])
        if new_wind >= 0:
            dashboard.ac_temp = new_wind

    if "REMAINING RANGE" in data:
        new_range = _parse_float(data["REMAINING RANGE"])
        if new_range >= 0.0:
            dashboard.remaining_range = new_range


def format_database(dashboard: DashboardController) -> str:
    """Render the dashboard values in the database file format."""
    lines = [
        f"DRIVE MODE, {dashboard.drive_mode}",
        f"SPEED, {dashboard.speed}",
        f"BATTERY LEVEL, {dashboard.battery_level}",
        f"AC TEMPERATURE, {dashboard.ac_temp}",
        f"WIND LEVEL, {dashboard.wind_level}",
        f"REMAINING RANGE, {dashboard.remaining_range:g}",
    ]
    return "".join(f"{line}\n" for line in lines)


def save_to_csv(dashboard: DashboardController, path: StrPath = DATABASE_PATH) -> None:
    """Write the dashboard values to the database file, replacing it whole."""
    target = Path(path)
    temporary = target.with_name(target.name + ".tmp")
    with open(temporary, "w", encoding="utf-8", newline="\n") as file:
        file.write(format_database(dashboard))
    os.replace(temporary, target)


def display_loop(
    dashboard: DashboardController,
    path: StrPath = DATABASE_PATH,
    stop: threading.Event | None = None,
    interval: float = 1.0,
    stream: TextIO | None = None,
) -> None:
    """Reload the dashboard from the database and warn on low battery until stopped."""
    if stop is None:
        stop = threading.Event()
    out = stream if stream is not None else sys.stdout
    while not stop.is_set():
        try:
            dashboard.update_data(path)
        except OSError:
            print(f"Cannot open file {path}", file=sys.stderr)
        if dashboard.battery_level <= LOW_BATTERY_THRESHOLD:
            print(LOW_BATTERY_WARNING, file=out)
            print(file=out)
        stop.wait(interval)


def input_loop(
    handler: InputHandler,
    keys: Callable[[], Collection[Key]],
    path: StrPath = DATABASE_PATH,
    stop: threading.Event | None = None,
    interval: float = 0.1,
) -> None:
    """Feed pressed keys to the handler and save the result every tick until stopped."""
    if stop is None:
        stop = threading.Event()
    while not stop.is_set():
        handler.tick(keys())
        try:
            save_to_csv(handler.dashboard, path)
        except OSError:
            print(f"Failed to open {Path(path).name} for writing.", file=sys.stderr)
        stop.wait(interval)


def _sync_loop(
    dashboard: DashboardController,
    path: StrPath,
    stop: threading.Event,
    interval: float = 1.0,
) -> None:
    while not stop.is_set():
        try:
            sync_from_database(dashboard, path)
        except OSError:
            print(f"Cannot open file {path}", file=sys.stderr)
            return
        stop.wait(interval)


class _KeyboardFeed:
    """Collects keys typed as lines on a stream; each line is held for one tick."""

    def __init__(self, stream: TextIO, stop: threading.Event) -> None:
        self._stream = stream
        self._stop = stop
        self._pending: set[Key] = set()
        self._lock = threading.Lock()

    def start(self) -> None:
        threading.Thread(target=self._run, daemon=True).start()

    def _run(self) -> None:
        for line in self._stream:
            if line.strip().lower() in {"q", "quit"}:
                self._stop.set()
                return
            keys = Key.parse(line)
            with self._lock:
                self._pending |= keys

    def __call__(self) -> frozenset[Key]:
        with self._lock:
            keys = frozenset(self._pending)
            self._pending.clear()
        return keys


def main(argv: list[str] | None = None) -> int:
    """Run the dashboard simulation."""
    parser = argparse.ArgumentParser(
        prog="evdash",
        description=(
            "Electric vehicle dashboard simulation. Type keys and press Enter: "
            "a accelerate, b brake, m toggle mode, k/j A/C up/down, "
            "l/h wind up/down, q quit."
        ),
    )
    parser.add_argument("--database", default=str(DATABASE_PATH), help="path of the database file")
    parser.add_argument("--duration", type=float, default=None, help="stop after this many seconds")
    args = parser.parse_args(argv)
    path = Path(args.database)

    dashboard = DashboardController()
    dashboard.register_observer(DisplayManager(dashboard))
    handler = InputHandler(
        dashboard, SpeedCalculator(), DriveModeManager(), BatteryManager(), SafetyManager()
    )

    stop = threading.Event()
    feed = _KeyboardFeed(sys.stdin, stop)
    threads = [
        threading.Thread(target=_sync_loop, args=(dashboard, path, stop), daemon=True),
        threading.Thread(target=input_loop, args=(handler, feed, path, stop), daemon=True),
        threading.Thread(target=display_loop, args=(dashboard, path, stop), daemon=True),
    ]
    feed.start()
    for thread in threads:
        thread.start()
    try:
        stop.wait(args.duration)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    return 0