"""Dashboard state shared between the vehicle components and its observers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Union

from evdash.drive_mode import DriveMode

StrPath = Union[str, "PathLike[str]"]

DATABASE_PATH = Path("Data") / "Database.csv"

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_int(text: str) -> int:
    """Parse a leading integer, ignoring leading whitespace and trailing text."""
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid integer value: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    """Parse a leading decimal number, ignoring leading whitespace and trailing text."""
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid number value: {text!r}")
    return float(match.group(1))


def read_database(path: StrPath = DATABASE_PATH) -> dict[str, str]:
    """Read ``KEY,VALUE`` lines from the database file into a dictionary.

    A line needs a comma followed by at least one character to count; the
    value ends at the next comma. Later lines override earlier ones.
    """
    data: dict[str, str] = {}
    with open(path, encoding="utf-8") as file:
        for line in file.read().splitlines():
            key, sep, rest = line.partition(",")
            if sep and rest:
                data[key] = rest.partition(",")[0]
    return data


class Observer(ABC):
    """Something that wants to hear when the dashboard data changes."""

    @abstractmethod
    def update(self) -> None:
        """React to new dashboard data."""


class DashboardController:
    """Holds the system parameters and notifies registered observers."""

    def __init__(self) -> None:
        self.speed: int = 0
        self.drive_mode: DriveMode = DriveMode.ECO
        self._battery_level: int = 100
        self.remaining_range: float = 400.0
        self._ac_temp: int = 25
        self._wind_level: int = 0
        self._observers: list[Observer] = []

    @property
    def battery_level(self) -> int:
        """Battery level in percent; values outside 0..100 are ignored."""
        return self._battery_level

    @battery_level.setter
    def battery_level(self, value: int) -> None:
        if 0 <= value <= 100:
            self._battery_level = value

    @property
    def ac_temp(self) -> int:
        """A/C temperature in degrees; values outside 16..30 are ignored."""
        return self._ac_temp

    @ac_temp.setter
    def ac_temp(self, value: int) -> None:
        if 16 <= value <= 30:
            self._ac_temp = value

    @property
    def wind_level(self) -> int:
        """Fan level; values outside 0..5 are ignored."""
        return self._wind_level

    @wind_level.setter
    def wind_level(self, value: int) -> None:
        if 0 <= value <= 5:
            self._wind_level = value

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    def update_data(self, path: StrPath = DATABASE_PATH) -> None:
        """Load parameters from the database file and notify observers.

        Raises OSError if the file cannot be read and ValueError if a
        numeric field does not hold a number.
        """
        data = read_database(path)

        if "SPEED" in data:
            new_speed = _parse_int(data["SPEED"])
            if new_speed >= 0:
                self.speed = new_speed

        if "DRIVE MODE" in data:
            new_mode = data["DRIVE MODE"]
            if new_mode == "ECO":
                self.drive_mode = DriveMode.ECO
            elif new_mode == "SPORT":
                self.drive_mode = DriveMode.SPORT

        if "BATTERY LEVEL" in data:
            new_level = _parse_int(data["BATTERY LEVEL"])
            if 0 <= new_level <= 100:
                self._battery_level = new_level

        if "AC TEMPERATURE" in data:
            new_temp = _parse_int(data["AC TEMPERATURE"])
            if new_temp >= 0:
                self._ac_temp = new_temp

        if "WIND LEVEL" in data:
            new_wind = _parse_int(data["WIND LEVEL"])
            if new_wind >= 0:
                self._wind_level = new_wind

        if "REMAINING RANGE" in data:
            new_range = _parse_float(data["REMAINING RANGE"])
            if new_range >= 0.0:
                self.remaining_range = new_range

        self.notify_observers()

    def register_observer(self, observer: Observer) -> None:
        """Add an observer to the notification list."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove every registration of the given observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        """Tell every registered observer that the data changed."""
        for observer in list(self._observers):
            observer.update()