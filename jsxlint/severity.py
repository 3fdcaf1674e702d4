"""Severity definitions for lint diagnostics."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    ADVICE = "advice"
