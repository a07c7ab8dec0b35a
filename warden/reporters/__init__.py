"""Reporters - Localized action logging and the flight record."""

from warden.reporters.flight_recorder import FlightRecorder, LogEntry
from warden.reporters.localization import LocalizationManager
from warden.reporters.localized_logger import LocalizedLogger

__all__ = ["FlightRecorder", "LogEntry", "LocalizationManager", "LocalizedLogger"]
