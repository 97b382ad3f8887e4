"""Active session and live status models."""
from typing import Optional

from pydantic import BaseModel

from timemoney.models.base import StoredModel


class ActiveSession(StoredModel):
    """The single in-progress, not yet finalized tracked activity."""

    start_time: int
    activity_name: str
    label_id: Optional[str] = None
    participant_ids: Optional[list[str]] = None


class LiveStatus(BaseModel):
    """Read-only view of a running session for a once-per-second display."""

    tracking: bool
    elapsed_ms: int = 0
    hourly_rate: float = 0
    amount: float = 0
