"""Utility helpers shared across the :mod:`poetry_assistant` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import StructuredLoggerAdapter, get_logger
from .syllables import estimate_syllable_count
from .telemetry import StructuredTelemetry, TelemetryLogger

__all__ = [
    "StructuredLoggerAdapter",
    "StructuredTelemetry",
    "TelemetryLogger",
    "configure_logging",
    "estimate_syllable_count",
    "get_logger",
]
