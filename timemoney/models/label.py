"""Custom label model definitions."""
from typing import Optional

from pydantic import BaseModel

from timemoney.models.base import StoredModel


LABEL_COLORS: list[str] = [
    "#ef4444",  # red
    "#f97316",  # orange
    "#eab308",  # yellow
    "#22c55e",  # green
    "#06b6d4",  # cyan
    "#3b82f6",  # blue
    "#8b5cf6",  # violet
    "#ec4899",  # pink
]


class LabelCreate(BaseModel):
    """Label creation model. A missing color is picked from the palette."""

    name: str
    color: Optional[str] = None


class LabelUpdate(BaseModel):
    """Label update model - all fields optional."""

    name: Optional[str] = None
    color: Optional[str] = None


class CustomLabel(StoredModel):
    """User-defined tag for grouping activities."""

    id: str
    name: str
    color: str
