"""
Data models for the printer admin web interface.

This module contains:
- Option tables: capability flag types and fixed display tables
- Printer models: DriverOptions, MediaCol (ready media), identity, supplies
- Job models: JobState and the read-only JobSummary projection
"""

from .options import (
    ColorMode,
    Content,
    MediaTracking,
    Orientation,
    PrinterReason,
    PrinterState,
    Quality,
    Scaling,
    Sides,
    SupplyColor,
)
from .printer import (
    MANUAL_SOURCE,
    Contact,
    DriverOptions,
    MediaCol,
    PrinterIdentity,
    Supply,
)
from .job import JobState, JobSummary

__all__ = [
    # Option tables
    "ColorMode",
    "Content",
    "MediaTracking",
    "Orientation",
    "PrinterReason",
    "PrinterState",
    "Quality",
    "Scaling",
    "Sides",
    "SupplyColor",
    # Printer models
    "MANUAL_SOURCE",
    "Contact",
    "DriverOptions",
    "MediaCol",
    "PrinterIdentity",
    "Supply",
    # Job models
    "JobState",
    "JobSummary",
]
