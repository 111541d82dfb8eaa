"""Battery level, drain and range estimation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BatteryManager:
    """Holds the battery state and computes drain and remaining range."""

    battery_level: int = 100
    battery_capacity: float = 90.0
    drain_per_km: float = 0.2

    def calculate_battery_drain(self, speed: int, ac_level: int, wind_level: int) -> float:
        """Drain per second for the given speed, A/C temperature and wind level."""
        speed_factor = 1.0 + speed / 100.0
        # 5% more per degree above 15, 2% more per wind level.
        ac_factor = 1.0 + (ac_level - 15) * 0.05
        wind_factor = 1.0 + wind_level * 0.02
        return self.drain_per_km * speed_factor * ac_factor * wind_factor

    def calculate_remaining_range(self) -> float:
        """Predicted remaining range in kilometres."""
        if self.drain_per_km <= 0:
            return 0.0
        return (self.battery_level / 100.0) * (self.battery_capacity / self.drain_per_km)

    def update_battery_level(self, speed: int, ac_level: int, wind_level: int) -> int:
        """Drain the battery for one 100 ms tick and return the new level."""
        drain = self.calculate_battery_drain(speed, ac_level, wind_level)
        self.battery_level = int(max(0.0, self.battery_level - drain * 0.1))
        return self.battery_level