"""Activity service - history edits and label reports."""
import logging
from typing import Optional

from timemoney.models.activity import ActivityEntry, LabelTotal
from timemoney.models.app_state import AppState
from timemoney.services.state_store import StateStore

logger = logging.getLogger(__name__)

FILTER_ALL = "all"
FILTER_UNLABELED = "none"


def with_activity_deleted(state: AppState, activity_id: str) -> AppState:
    activities = [a for a in state.activities if a.id != activity_id]
    return state.model_copy(update={"activities": activities})


def with_activity_label(state: AppState, activity_id: str, label_id: Optional[str]) -> AppState:
    if label_id is not None and not any(label.id == label_id for label in state.labels):
        return state
    activities = [
        a.model_copy(update={"label_id": label_id}) if a.id == activity_id else a
        for a in state.activities
    ]
    return state.model_copy(update={"activities": activities})


def filter_activities(
    activities: list[ActivityEntry],
    label_filter: str = FILTER_ALL,
) -> list[ActivityEntry]:
    """
    Filter activities by label.

    Args:
        activities: Activities to filter
        label_filter: ``"all"``, ``"none"`` for unlabeled, or a label id

    Returns:
        Matching activities, order preserved
    """
    if label_filter == FILTER_ALL:
        return list(activities)
    if label_filter == FILTER_UNLABELED:
        return [a for a in activities if not a.label_id]
    return [a for a in activities if a.label_id == label_filter]


def label_totals(activities: list[ActivityEntry]) -> dict[Optional[str], LabelTotal]:
    """
    Sum amounts per label.

    Unlabeled activities are grouped under the ``None`` key. Each group
    reports the currency of the first activity seen in it; amounts are
    summed as recorded, with no conversion between currencies.
    """
    totals: dict[Optional[str], LabelTotal] = {}
    for activity in activities:
        key = activity.label_id or None
        current = totals.get(key)
        if current is None:
            current = LabelTotal(label_id=key, currency=activity.currency)
        totals[key] = current.model_copy(
            update={"total": current.total + activity.amount, "count": current.count + 1}
        )
    return totals


class ActivityService:
    """Service for handling recorded activities."""

    def __init__(self, store: StateStore):
        """Initialize service with the state store."""
        self.store = store

    def delete_activity(self, activity_id: str) -> AppState:
        """Remove an activity from history. Unknown ids are ignored."""
        logger.info(f"Deleting activity {activity_id}")
        return self.store.apply(lambda s: with_activity_deleted(s, activity_id))

    def update_activity_label(self, activity_id: str, label_id: Optional[str]) -> AppState:
        """
        Reassign or clear an activity's label.

        Args:
            activity_id: Activity ID
            label_id: New label ID, or None to clear. Ids of labels that do
                not exist leave the activity unchanged

        Returns:
            New state
        """
        if label_id is not None and not any(label.id == label_id for label in self.store.snapshot.labels):
            logger.debug(f"Unknown label {label_id} for activity {activity_id} ignored")
        return self.store.apply(lambda s: with_activity_label(s, activity_id, label_id))
