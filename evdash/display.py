"""Text display of the dashboard values."""

from __future__ import annotations

import sys
from typing import TextIO

from evdash.dashboard import DashboardController, Observer


class DisplayManager(Observer):
    """Prints the dashboard values whenever the dashboard notifies it."""

    def __init__(self, dashboard: DashboardController, stream: TextIO | None = None) -> None:
        self.dashboard = dashboard
        self.stream = stream

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream if self.stream is not None else sys.stdout)

    def update_display(self) -> None:
        """Print every value followed by a blank line."""
        self.show_drive_mode()
        self.show_speed()
        self.show_battery_status()
        self.show_climate_status()
        self.show_wind_level()
        self.show_remaining_range()
        self._write()

    def show_speed(self) -> None:
        """Print the current speed."""
        self._write(f"Speed: {self.dashboard.speed} km/h")

    def show_drive_mode(self) -> None:
        """Print the current drive mode."""
        self._write(f"Drive mode: {self.dashboard.drive_mode}")

    def show_battery_status(self) -> None:
        """Print the battery level."""
        self._write(f"Battery level: {self.dashboard.battery_level} %")

    def show_climate_status(self) -> None:
        """Print the A/C temperature."""
        self._write(f"A/C temperature: {self.dashboard.ac_temp} °C")

    def show_wind_level(self) -> None:
        """Print the wind level."""
        self._write(f"Wind level: {self.dashboard.wind_level}")

    def show_remaining_range(self) -> None:
        """Print the remaining range with six significant digits."""
        self._write(f"Remaining range: {self.dashboard.remaining_range:g} km")

    def update(self) -> None:
        """Redraw the display when the dashboard data changes."""
        self.update_display()