"""Brake state tracking and the timing helper used by the control loops."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass
class SafetyManager:
    """Tracks the brake state and the speed reduction it causes."""

    brake_applied: bool = False
    brake_intensity: int = 0
    current_speed: int = 0

    def check_brake_and_accelerator(self, is_accelerating: bool, is_braking: bool) -> bool:
        """Return True when accelerator and brake are pressed together."""
        return bool(is_accelerating and is_braking)

    def apply_brake(self) -> int:
        """Reduce the speed by the brake intensity while the brake is applied."""
        if self.brake_applied:
            self.current_speed -= self.brake_intensity
        return self.current_speed

    def release_brake(self) -> None:
        """Release the brake."""
        self.brake_applied = False


def delay_ms(milliseconds: int) -> None:
    """Sleep for the given number of milliseconds."""
    time.sleep(milliseconds / 1000.0)