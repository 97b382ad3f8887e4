"""Process-level wiring: build a tracker from durable storage."""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from timemoney.config import Settings, settings as default_settings
from timemoney.database import Database
from timemoney.logger import setup_logging
from timemoney.services.state_store import StateStore
from timemoney.tracker import TimeTracker
from timemoney.utils.clock import Clock, now_ms

logger = logging.getLogger(__name__)


def create_tracker(settings: Optional[Settings] = None, clock: Clock = now_ms) -> TimeTracker:
    """
    Build a tracker whose state is loaded from the configured storage file.

    Args:
        settings: Settings to use; defaults to the environment-derived ones
        clock: Time source for sessions

    Returns:
        Ready tracker
    """
    settings = settings or default_settings
    store = StateStore(
        Database(settings.state_path),
        key=settings.storage_key,
        default_currency=settings.default_currency,
    )
    store.load()
    logger.info(f"Loaded state from '{settings.state_path}'")
    return TimeTracker(store, clock=clock)


@contextmanager
def lifespan(settings: Optional[Settings] = None, clock: Clock = now_ms) -> Iterator[TimeTracker]:
    """Application lifespan - load on enter, flush on exit."""
    settings = settings or default_settings
    setup_logging(settings)
    tracker = create_tracker(settings, clock=clock)
    try:
        yield tracker
    finally:
        tracker.close()
        logger.info("State flushed")
