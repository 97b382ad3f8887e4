"""Tracking mode definitions."""
from enum import Enum


class Mode(str, Enum):
    """Tracking context; determines where the hourly rate comes from."""

    PERSONAL = "personal"
    BUSINESS = "business"
