"""Aggregate application state."""
from typing import Optional

from pydantic import Field

from timemoney.models.activity import ActivityEntry
from timemoney.models.base import StoredModel
from timemoney.models.label import CustomLabel
from timemoney.models.mode import Mode
from timemoney.models.participant import Participant
from timemoney.models.session import ActiveSession


class PersonalSettings(StoredModel):
    """Personal mode settings."""

    hourly_rate: float = 0


class AppState(StoredModel):
    """
    Aggregate root persisted as a single record.

    Activities are ordered most-recent-first.
    """

    mode: Mode = Mode.PERSONAL
    currency: str = "USD"
    personal_settings: PersonalSettings = Field(default_factory=PersonalSettings)
    participants: list[Participant] = Field(default_factory=list)
    labels: list[CustomLabel] = Field(default_factory=list)
    activities: list[ActivityEntry] = Field(default_factory=list)
    active_session: Optional[ActiveSession] = None

    @classmethod
    def default(cls, currency: str = "USD") -> "AppState":
        """Fresh state: personal mode, zero rate, nothing recorded."""
        return cls(currency=currency)

    @property
    def is_tracking(self) -> bool:
        """Whether a session is currently running."""
        return self.active_session is not None
