"""Helpers for a network traffic monitor: value formatting, CPU usage, traffic history, month grids, adapter matching and hardware sensors."""

__version__ = "1.0.0"