"""Pytest configuration and fixtures."""
import pytest

MINUTE_MS = 60_000


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, minutes: float = 0, ms: int = 0) -> None:
        self.now += int(minutes * MINUTE_MS) + ms


@pytest.fixture
def clock():
    """A fake clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a state file inside the test's tmp dir."""
    from timemoney.config import Settings

    return Settings(state_path=tmp_path / "state.json", storage_key="test-state")


@pytest.fixture
def database(settings):
    """Database backed by the temporary state file."""
    from timemoney.database import Database

    return Database(settings.state_path)


@pytest.fixture
def store(database, settings):
    """State store on top of the temporary database."""
    from timemoney.services.state_store import StateStore

    return StateStore(database, key=settings.storage_key)


@pytest.fixture
def tracker(store, clock):
    """Tracker facade wired to the temporary store and fake clock."""
    from timemoney.tracker import TimeTracker

    return TimeTracker(store, clock=clock)
