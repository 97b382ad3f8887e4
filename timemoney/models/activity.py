"""Activity entry model definitions."""
from typing import Optional

from pydantic import BaseModel

from timemoney.models.base import StoredModel
from timemoney.models.mode import Mode


class ActivityEntry(StoredModel):
    """Immutable record of one completed tracked activity."""

    id: str
    mode: Mode
    activity_name: str
    start_time: int
    end_time: int
    duration_minutes: float
    amount: float
    currency: str
    label_id: Optional[str] = None
    participant_ids: Optional[list[str]] = None
    # Names captured at finish time; participants may be renamed or deleted later
    participant_names: Optional[list[str]] = None


class LabelTotal(BaseModel):
    """Sum of amounts recorded under one label (None for unlabeled)."""

    label_id: Optional[str] = None
    total: float = 0
    currency: str
    count: int = 0
