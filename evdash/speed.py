"""Vehicle speed computation from pedal state and drive mode."""

from __future__ import annotations

from dataclasses import dataclass

from evdash.drive_mode import DriveMode


@dataclass
class SpeedCalculator:
    """Tracks the current speed and applies per-mode limits."""

    current_speed: int = 0
    max_speed_sport: int = 200
    max_speed_eco: int = 150

    def calculate_speed(self, is_accelerating: bool, is_braking: bool) -> int:
        """Advance the speed by one step for the given pedal state."""
        if is_accelerating and not is_braking:
            self.current_speed += 2
        if is_braking and not is_accelerating:
            self.current_speed -= 2
        if not is_braking and not is_accelerating:
            self.current_speed -= 1
        self.current_speed = max(self.current_speed, 0)
        return self.current_speed

    def max_speed(self, drive_mode: DriveMode) -> int:
        """Maximum speed allowed in the given drive mode."""
        if drive_mode is DriveMode.ECO:
            return self.max_speed_eco
        return self.max_speed_sport

    def adjust_speed_for_drive_mode(self, drive_mode: DriveMode) -> int:
        """Cap the current speed at the mode's maximum and return it."""
        self.current_speed = min(self.current_speed, self.max_speed(drive_mode))
        return self.current_speed