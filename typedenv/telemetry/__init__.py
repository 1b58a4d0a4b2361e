"""Telemetry helpers.

This package formats and emits library events for debugging load behavior.
"""

from .logger import disable_event_logging, enable_event_logging, format_event, log_event

__all__ = ["disable_event_logging", "enable_event_logging", "format_event", "log_event"]
