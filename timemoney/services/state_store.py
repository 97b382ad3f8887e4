"""Persisted state store - single read/write access point for AppState."""
import logging
from typing import Callable, Optional

from pydantic import ValidationError

from timemoney.database import Database, StorageError
from timemoney.models.app_state import AppState

logger = logging.getLogger(__name__)

Mutator = Callable[[AppState], AppState]


class StateStore:
    """
    Owns the app state snapshot and its durable copy.

    Every mutation goes through ``apply``: the mutator receives the current
    snapshot and returns a new one, which is cached and then written to the
    database. The cached snapshot is authoritative for the rest of the process,
    so a failed write loses the change only across a restart.

    There is no locking; one writer per storage file is assumed.
    """

    def __init__(self, db: Database, key: str, default_currency: str = "USD"):
        """Initialize the store; the snapshot is loaded on first access."""
        self.db = db
        self.key = key
        self.default_currency = default_currency
        self._state: Optional[AppState] = None

    def _default(self) -> AppState:
        return AppState.default(currency=self.default_currency)

    @property
    def snapshot(self) -> AppState:
        """Current state; loaded from storage on first access."""
        if self._state is None:
            self._state = self.load()
        return self._state

    def load(self) -> AppState:
        """
        Load the last persisted snapshot.

        Returns:
            The stored state, or the default state if nothing was stored or
            the stored payload cannot be read or validated
        """
        try:
            payload = self.db.get(self.key)
        except StorageError:
            logger.warning("Failed to read stored state, falling back to defaults", exc_info=True)
            self._state = self._default()
            return self._state

        if payload is None:
            logger.info(f"No stored state under '{self.key}', starting fresh")
            self._state = self._default()
            return self._state

        try:
            state = AppState.model_validate(payload)
        except ValidationError:
            logger.warning("Stored state is corrupt, falling back to defaults", exc_info=True)
            state = self._default()

        self._state = state
        return state

    def save(self, state: AppState) -> None:
        """
        Write the full snapshot, replacing any prior one.

        Write failures are logged and not raised.

        Args:
            state: Snapshot to persist
        """
        self._state = state
        try:
            self.db.set(self.key, state.model_dump(mode="json", by_alias=True))
        except StorageError:
            logger.error("Failed to save state; changes are kept in memory only", exc_info=True)

    def apply(self, mutator: Mutator) -> AppState:
        """
        Read-modify-write the snapshot.

        Args:
            mutator: Pure function from the current state to the new state

        Returns:
            The new state
        """
        new_state = mutator(self.snapshot)
        self.save(new_state)
        return new_state

    def close(self) -> None:
        """Flush the current snapshot to storage."""
        if self._state is not None:
            self.save(self._state)
