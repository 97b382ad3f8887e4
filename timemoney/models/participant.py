"""Participant model definitions."""
from typing import Optional

from pydantic import BaseModel, Field

from timemoney.models.base import StoredModel


class ParticipantCreate(BaseModel):
    """Participant creation model."""

    name: str
    hourly_rate: float = Field(default=0, ge=0)


class ParticipantUpdate(BaseModel):
    """Participant update model - all fields optional."""

    name: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)


class Participant(StoredModel):
    """A named, rated team member used in business mode."""

    id: str
    name: str
    hourly_rate: float = 0
