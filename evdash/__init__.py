"""Simulated electric-vehicle dashboard: battery, speed, drive-mode and display models with a CSV database."""

__version__ = "1.0.0"