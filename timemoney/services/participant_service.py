"""Participant service - business mode roster management."""
import logging

from timemoney.models.app_state import AppState
from timemoney.models.participant import Participant, ParticipantCreate, ParticipantUpdate
from timemoney.services.state_store import StateStore
from timemoney.utils.ids import generate_id

logger = logging.getLogger(__name__)


def with_participant_added(state: AppState, participant: Participant) -> AppState:
    return state.model_copy(update={"participants": [*state.participants, participant]})


def with_participant_updated(
    state: AppState,
    participant_id: str,
    participant_update: ParticipantUpdate,
) -> AppState:
    changes = participant_update.model_dump(exclude_none=True)
    participants = [
        p.model_copy(update=changes) if p.id == participant_id else p
        for p in state.participants
    ]
    return state.model_copy(update={"participants": participants})


def with_participant_deleted(state: AppState, participant_id: str) -> AppState:
    # Activity history keeps its own copy of names; it is left untouched
    participants = [p for p in state.participants if p.id != participant_id]
    return state.model_copy(update={"participants": participants})


class ParticipantService:
    """Service for handling participant operations."""

    def __init__(self, store: StateStore):
        """Initialize service with the state store."""
        self.store = store

    def _exists(self, participant_id: str) -> bool:
        return any(p.id == participant_id for p in self.store.snapshot.participants)

    def add_participant(self, participant_create: ParticipantCreate) -> AppState:
        """
        Append a participant to the roster.

        Args:
            participant_create: Participant creation data

        Returns:
            New state
        """
        participant = Participant(
            id=generate_id(),
            name=participant_create.name,
            hourly_rate=participant_create.hourly_rate,
        )
        logger.info(f"Added participant '{participant.name}' ({participant.id})")
        return self.store.apply(lambda s: with_participant_added(s, participant))

    def update_participant(
        self,
        participant_id: str,
        participant_update: ParticipantUpdate,
    ) -> AppState:
        """
        Rename or re-rate a participant. Unknown ids are ignored.

        Args:
            participant_id: Participant ID
            participant_update: Fields to change

        Returns:
            New state
        """
        if not self._exists(participant_id):
            logger.debug(f"Update of unknown participant {participant_id} ignored")
        return self.store.apply(
            lambda s: with_participant_updated(s, participant_id, participant_update)
        )

    def delete_participant(self, participant_id: str) -> AppState:
        """
        Remove a participant. Unknown ids are ignored.

        A running session that selected this participant keeps the id, but
        the participant no longer contributes to its rate.
        """
        if not self._exists(participant_id):
            logger.debug(f"Delete of unknown participant {participant_id} ignored")
        return self.store.apply(lambda s: with_participant_deleted(s, participant_id))
