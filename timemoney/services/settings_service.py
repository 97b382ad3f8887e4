"""Settings service - mode, currency and personal rate."""
import logging

from timemoney.models.app_state import AppState, PersonalSettings
from timemoney.models.mode import Mode
from timemoney.services.state_store import StateStore

logger = logging.getLogger(__name__)


def with_mode(state: AppState, mode: Mode) -> AppState:
    return state.model_copy(update={"mode": Mode(mode)})


def with_currency(state: AppState, currency: str) -> AppState:
    return state.model_copy(update={"currency": currency})


def with_personal_rate(state: AppState, hourly_rate: float) -> AppState:
    return state.model_copy(
        update={"personal_settings": PersonalSettings(hourly_rate=hourly_rate)}
    )


class SettingsService:
    """Service for the global tracker settings."""

    def __init__(self, store: StateStore):
        """Initialize service with the state store."""
        self.store = store

    def set_mode(self, mode: Mode) -> AppState:
        """
        Switch between personal and business mode.

        An active session is left running; its rate is resolved for
        whatever mode is current when it finishes.
        """
        logger.info(f"Mode set to {Mode(mode).value}")
        return self.store.apply(lambda s: with_mode(s, mode))

    def set_currency(self, currency: str) -> AppState:
        """Select the display currency by code."""
        return self.store.apply(lambda s: with_currency(s, currency))

    def set_personal_rate(self, hourly_rate: float) -> AppState:
        """
        Set the personal hourly rate.

        Raises:
            ValueError: If the rate is negative
        """
        if hourly_rate < 0:
            raise ValueError("Hourly rate must not be negative")
        return self.store.apply(lambda s: with_personal_rate(s, float(hourly_rate)))
