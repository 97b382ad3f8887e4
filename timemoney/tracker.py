"""Command interface driven by any front end."""
from typing import Optional

from timemoney.models.activity import ActivityEntry, LabelTotal
from timemoney.models.app_state import AppState
from timemoney.models.label import LabelCreate, LabelUpdate
from timemoney.models.mode import Mode
from timemoney.models.participant import ParticipantCreate, ParticipantUpdate
from timemoney.models.session import LiveStatus
from timemoney.services import activity_service
from timemoney.services.activity_service import ActivityService
from timemoney.services.label_service import LabelService
from timemoney.services.participant_service import ParticipantService
from timemoney.services.session_service import SessionService
from timemoney.services.settings_service import SettingsService
from timemoney.services.state_store import StateStore
from timemoney.utils.clock import Clock, now_ms


class TimeTracker:
    """
    One call per user operation.

    Every mutation returns the new state snapshot so the caller can re-render
    from it. The store is owned by the tracker and passed to each service.
    """

    def __init__(self, store: StateStore, clock: Clock = now_ms):
        """Initialize tracker and its services on top of a state store."""
        self.store = store
        self.settings = SettingsService(store)
        self.participants = ParticipantService(store)
        self.labels = LabelService(store)
        self.activities = ActivityService(store)
        self.sessions = SessionService(store, clock=clock)

    @property
    def state(self) -> AppState:
        """Read-only snapshot of the current state."""
        return self.store.snapshot

    # Settings
    def set_mode(self, mode: Mode) -> AppState:
        return self.settings.set_mode(mode)

    def set_currency(self, currency: str) -> AppState:
        return self.settings.set_currency(currency)

    def set_personal_rate(self, hourly_rate: float) -> AppState:
        return self.settings.set_personal_rate(hourly_rate)

    # Participants
    def add_participant(self, name: str, hourly_rate: float) -> AppState:
        return self.participants.add_participant(
            ParticipantCreate(name=name, hourly_rate=hourly_rate)
        )

    def update_participant(
        self,
        participant_id: str,
        name: Optional[str] = None,
        hourly_rate: Optional[float] = None,
    ) -> AppState:
        return self.participants.update_participant(
            participant_id, ParticipantUpdate(name=name, hourly_rate=hourly_rate)
        )

    def delete_participant(self, participant_id: str) -> AppState:
        return self.participants.delete_participant(participant_id)

    # Labels
    def add_label(self, name: str, color: Optional[str] = None) -> AppState:
        return self.labels.add_label(LabelCreate(name=name, color=color))

    def update_label(
        self,
        label_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> AppState:
        return self.labels.update_label(label_id, LabelUpdate(name=name, color=color))

    def delete_label(self, label_id: str) -> AppState:
        return self.labels.delete_label(label_id)

    # Activities
    def delete_activity(self, activity_id: str) -> AppState:
        return self.activities.delete_activity(activity_id)

    def update_activity_label(self, activity_id: str, label_id: Optional[str]) -> AppState:
        return self.activities.update_activity_label(activity_id, label_id)

    def filtered_activities(self, label_filter: str = activity_service.FILTER_ALL) -> list[ActivityEntry]:
        return activity_service.filter_activities(self.state.activities, label_filter)

    def label_totals(self) -> dict[Optional[str], LabelTotal]:
        return activity_service.label_totals(self.state.activities)

    # Session
    def start_session(
        self,
        activity_name: str = "",
        label_id: Optional[str] = None,
        participant_ids: Optional[list[str]] = None,
    ) -> AppState:
        return self.sessions.start(activity_name, label_id, participant_ids)

    def finish_session(self, name_override: Optional[str] = None) -> AppState:
        return self.sessions.finish(name_override)

    def cancel_session(self) -> AppState:
        return self.sessions.cancel()

    def live_status(self) -> LiveStatus:
        return self.sessions.live_status()

    def start_warnings(self, participant_ids: Optional[list[str]] = None) -> list[str]:
        return self.sessions.start_warnings(participant_ids)

    def close(self) -> None:
        """Flush state to storage."""
        self.store.close()
