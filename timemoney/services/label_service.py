"""Label service - custom labels with cascading delete."""
import logging

from timemoney.models.app_state import AppState
from timemoney.models.label import LABEL_COLORS, CustomLabel, LabelCreate, LabelUpdate
from timemoney.services.state_store import StateStore
from timemoney.utils.ids import generate_id

logger = logging.getLogger(__name__)


def next_label_color(labels: list[CustomLabel]) -> str:
    """Pick the next palette color in rotation."""
    return LABEL_COLORS[len(labels) % len(LABEL_COLORS)]


def with_label_added(state: AppState, label: CustomLabel) -> AppState:
    return state.model_copy(update={"labels": [*state.labels, label]})


def with_label_updated(state: AppState, label_id: str, label_update: LabelUpdate) -> AppState:
    changes = label_update.model_dump(exclude_none=True)
    labels = [
        label.model_copy(update=changes) if label.id == label_id else label
        for label in state.labels
    ]
    return state.model_copy(update={"labels": labels})


def with_label_deleted(state: AppState, label_id: str) -> AppState:
    labels = [label for label in state.labels if label.id != label_id]
    activities = [
        a.model_copy(update={"label_id": None}) if a.label_id == label_id else a
        for a in state.activities
    ]
    session = state.active_session
    if session is not None and session.label_id == label_id:
        session = session.model_copy(update={"label_id": None})
    return state.model_copy(
        update={"labels": labels, "activities": activities, "active_session": session}
    )


class LabelService:
    """Service for handling label operations."""

    def __init__(self, store: StateStore):
        """Initialize service with the state store."""
        self.store = store

    def add_label(self, label_create: LabelCreate) -> AppState:
        """
        Create a label.

        Args:
            label_create: Label creation data; without a color the next
                palette color is used

        Returns:
            New state
        """
        label = CustomLabel(
            id=generate_id(),
            name=label_create.name,
            color=label_create.color or next_label_color(self.store.snapshot.labels),
        )
        logger.info(f"Added label '{label.name}' ({label.id})")
        return self.store.apply(lambda s: with_label_added(s, label))

    def update_label(self, label_id: str, label_update: LabelUpdate) -> AppState:
        """Rename or recolor a label. Unknown ids are ignored."""
        if not any(label.id == label_id for label in self.store.snapshot.labels):
            logger.debug(f"Update of unknown label {label_id} ignored")
        return self.store.apply(lambda s: with_label_updated(s, label_id, label_update))

    def delete_label(self, label_id: str) -> AppState:
        """
        Delete a label.

        Every activity (and the active session) pointing at the label has its
        reference cleared; no activity is removed.

        Args:
            label_id: Label ID

        Returns:
            New state
        """
        affected = sum(1 for a in self.store.snapshot.activities if a.label_id == label_id)
        logger.info(f"Deleting label {label_id}, clearing it from {affected} activities")
        return self.store.apply(lambda s: with_label_deleted(s, label_id))
