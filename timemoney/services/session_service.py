"""Session service - business logic for tracking an activity session."""
import logging
from typing import Optional

from timemoney.models.activity import ActivityEntry
from timemoney.models.app_state import AppState
from timemoney.models.mode import Mode
from timemoney.models.session import ActiveSession, LiveStatus
from timemoney.services.state_store import StateStore
from timemoney.utils.calculations import calculate_amount, get_duration_minutes
from timemoney.utils.clock import Clock, now_ms
from timemoney.utils.ids import generate_id

logger = logging.getLogger(__name__)

UNTITLED_ACTIVITY = "Untitled Activity"


def resolve_hourly_rate(state: AppState, participant_ids: Optional[list[str]]) -> float:
    """
    Resolve the hourly rate in effect right now.

    Personal mode uses the personal rate. Business mode sums the rates of the
    selected participants that still exist.
    """
    if state.mode == Mode.PERSONAL:
        return state.personal_settings.hourly_rate
    selected = set(participant_ids or [])
    return sum(p.hourly_rate for p in state.participants if p.id in selected)


class SessionService:
    """
    Service for the session lifecycle.

    Idle (no active session) -> ``start`` -> Tracking -> ``finish`` or
    ``cancel`` -> Idle.
    """

    def __init__(self, store: StateStore, clock: Clock = now_ms):
        """Initialize service with the state store and a time source."""
        self.store = store
        self.clock = clock

    def start(
        self,
        activity_name: str = "",
        label_id: Optional[str] = None,
        participant_ids: Optional[list[str]] = None,
    ) -> AppState:
        """
        Start a new session.

        Rate and participant checks are advisory and belong to the caller,
        see ``start_warnings``.

        Args:
            activity_name: Working name; blank names use a placeholder
            label_id: Optional label ID
            participant_ids: Selected participants, kept in business mode only

        Returns:
            New state with the active session

        Raises:
            ValueError: If a session is already active
        """
        state = self.store.snapshot
        if state.is_tracking:
            raise ValueError("Session already active")

        if label_id is not None and not any(label.id == label_id for label in state.labels):
            logger.debug(f"Unknown label {label_id} dropped from new session")
            label_id = None

        ids = None
        if state.mode == Mode.BUSINESS:
            ids = list(dict.fromkeys(participant_ids or []))

        session = ActiveSession(
            start_time=self.clock(),
            activity_name=activity_name.strip() or UNTITLED_ACTIVITY,
            label_id=label_id,
            participant_ids=ids,
        )
        logger.info(f"Started session '{session.activity_name}' at {session.start_time}")

        return self.store.apply(lambda s: s.model_copy(update={"active_session": session}))

    def finish(self, name_override: Optional[str] = None) -> AppState:
        """
        Finish the active session and record it.

        The rate is resolved now, not at start. A clock that moved backwards
        yields a zero-length entry rather than a negative one.

        Args:
            name_override: Replaces the session name when non-blank

        Returns:
            New state with the entry prepended to history, or the unchanged
            state when idle
        """
        state = self.store.snapshot
        session = state.active_session
        if session is None:
            logger.debug("Finish requested while idle, nothing to record")
            return state

        end_time = self.clock()
        if end_time < session.start_time:
            logger.warning(
                f"Clock moved backwards ({end_time} < {session.start_time}), "
                "recording a zero-length activity"
            )
            end_time = session.start_time

        duration = get_duration_minutes(session.start_time, end_time)
        hourly_rate = resolve_hourly_rate(state, session.participant_ids)

        participant_names = None
        if state.mode == Mode.BUSINESS and session.participant_ids:
            selected = set(session.participant_ids)
            participant_names = [p.name for p in state.participants if p.id in selected]

        entry = ActivityEntry(
            id=generate_id(),
            mode=state.mode,
            activity_name=(name_override or "").strip() or session.activity_name,
            start_time=session.start_time,
            end_time=end_time,
            duration_minutes=duration,
            amount=calculate_amount(duration, hourly_rate),
            currency=state.currency,
            label_id=session.label_id,
            participant_ids=session.participant_ids,
            participant_names=participant_names,
        )
        logger.info(
            f"Finished session '{entry.activity_name}': "
            f"{entry.duration_minutes:.2f} min, {entry.amount:.2f} {entry.currency}"
        )

        return self.store.apply(
            lambda s: s.model_copy(
                update={"activities": [entry, *s.activities], "active_session": None}
            )
        )

    def cancel(self) -> AppState:
        """Discard the active session without recording it. No-op when idle."""
        state = self.store.snapshot
        if state.active_session is None:
            return state

        logger.info(f"Cancelled session '{state.active_session.activity_name}'")
        return self.store.apply(lambda s: s.model_copy(update={"active_session": None}))

    def current_hourly_rate(self, state: Optional[AppState] = None) -> float:
        """
        Get the rate a finish would use right now.

        Without an active session in business mode, no participants are
        selected and the rate is zero.
        """
        if state is None:
            state = self.store.snapshot
        session = state.active_session
        return resolve_hourly_rate(state, session.participant_ids if session else None)

    def live_status(self) -> LiveStatus:
        """
        Get elapsed time and running amount for a display tick.

        Pure read; never mutates state.
        """
        state = self.store.snapshot
        session = state.active_session
        if session is None:
            return LiveStatus(tracking=False)

        elapsed_ms = max(0, self.clock() - session.start_time)
        hourly_rate = self.current_hourly_rate(state)
        return LiveStatus(
            tracking=True,
            elapsed_ms=elapsed_ms,
            hourly_rate=hourly_rate,
            amount=calculate_amount(get_duration_minutes(0, elapsed_ms), hourly_rate),
        )

    def start_warnings(self, participant_ids: Optional[list[str]] = None) -> list[str]:
        """
        Check whether setup is complete enough to start tracking.

        Args:
            participant_ids: Participants the user has selected

        Returns:
            User-facing prompts; empty when ready
        """
        state = self.store.snapshot
        if state.mode == Mode.PERSONAL:
            if state.personal_settings.hourly_rate == 0:
                return ["Please set your hourly rate first"]
            return []

        if not state.participants:
            return ["Please add team members first"]
        if not participant_ids:
            return ["Please select at least one participant"]
        return []
