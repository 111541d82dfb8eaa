"""Drive modes and the manager that tracks the active one."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DriveMode(Enum):
    """Available drive modes."""

    SPORT = "SPORT"
    ECO = "ECO"

    def __str__(self) -> str:
        return self.value


@dataclass
class DriveModeManager:
    """Tracks the drive mode with its power output and Eco speed limit."""

    current_drive_mode: DriveMode = DriveMode.ECO
    power_output_sport: int = 300
    power_output_eco: int = 220
    max_eco_speed: int = 150

    @property
    def power_output(self) -> int:
        """Power output of the current drive mode."""
        if self.current_drive_mode is DriveMode.ECO:
            return self.power_output_eco
        return self.power_output_sport

    def limit_speed_for_eco_mode(self, current_speed: int) -> int:
        """Return the speed capped at the Eco maximum."""
        return min(current_speed, self.max_eco_speed)

    def toggle(self) -> DriveMode:
        """Switch between Eco and Sport and return the new mode."""
        if self.current_drive_mode is DriveMode.ECO:
            self.current_drive_mode = DriveMode.SPORT
        else:
            self.current_drive_mode = DriveMode.ECO
        return self.current_drive_mode