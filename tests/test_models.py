"""Tests for Pydantic models."""
import pytest
from pydantic import ValidationError


class TestModeModel:
    """Tests for Mode enum."""

    def test_mode_enum_values(self):
        """Test Mode enum has correct values."""
        from timemoney.models.mode import Mode

        assert Mode.PERSONAL.value == "personal"
        assert Mode.BUSINESS.value == "business"


class TestCurrencyModel:
    """Tests for the currency catalog."""

    def test_catalog_codes(self):
        """Test the catalog holds the supported codes."""
        from timemoney.models.currency import CURRENCIES

        assert [c.code for c in CURRENCIES] == ["ILS", "USD", "EUR", "NZD"]

    def test_get_currency(self):
        """Test lookup by code."""
        from timemoney.models.currency import get_currency

        assert get_currency("ILS").symbol == "₪"
        assert get_currency("XYZ") is None


class TestParticipantModels:
    """Tests for participant models."""

    def test_participant_create_defaults(self):
        """Test a participant defaults to a zero rate."""
        from timemoney.models.participant import ParticipantCreate

        participant = ParticipantCreate(name="Alice")

        assert participant.name == "Alice"
        assert participant.hourly_rate == 0

    def test_participant_create_rejects_negative_rate(self):
        """Test that a negative rate is rejected."""
        from timemoney.models.participant import ParticipantCreate

        with pytest.raises(ValidationError) as exc_info:
            ParticipantCreate(name="Alice", hourly_rate=-5)

        assert exc_info.value.errors()[0]["loc"] == ("hourly_rate",)

    def test_participant_update_partial(self):
        """Test ParticipantUpdate allows partial updates."""
        from timemoney.models.participant import ParticipantUpdate

        update = ParticipantUpdate(name="Alicia")
        assert update.name == "Alicia"
        assert update.hourly_rate is None

    def test_participant_is_frozen(self):
        """Test stored participants cannot be mutated in place."""
        from timemoney.models.participant import Participant

        participant = Participant(id="p1", name="Alice", hourly_rate=20)

        with pytest.raises(ValidationError):
            participant.name = "Bob"


class TestActivityEntryModel:
    """Tests for ActivityEntry."""

    def test_camel_case_aliases(self):
        """Test serialization uses the stored camelCase layout."""
        from timemoney.models.activity import ActivityEntry
        from timemoney.models.mode import Mode

        entry = ActivityEntry(
            id="a1",
            mode=Mode.BUSINESS,
            activity_name="Planning",
            start_time=0,
            end_time=1_800_000,
            duration_minutes=30,
            amount=25,
            currency="USD",
            participant_ids=["p1", "p2"],
            participant_names=["Alice", "Bob"],
        )

        data = entry.model_dump(mode="json", by_alias=True)

        assert data == {
            "id": "a1",
            "mode": "business",
            "activityName": "Planning",
            "startTime": 0,
            "endTime": 1_800_000,
            "durationMinutes": 30.0,
            "amount": 25.0,
            "currency": "USD",
            "labelId": None,
            "participantIds": ["p1", "p2"],
            "participantNames": ["Alice", "Bob"],
        }

    def test_accepts_alias_and_field_names(self):
        """Test validation from stored JSON and from Python names."""
        from timemoney.models.activity import ActivityEntry

        from_json = ActivityEntry.model_validate({
            "id": "a1",
            "mode": "personal",
            "activityName": "Reading",
            "startTime": 0,
            "endTime": 60_000,
            "durationMinutes": 1,
            "amount": 0.25,
            "currency": "EUR",
            "labelId": "l1",
        })

        assert from_json.activity_name == "Reading"
        assert from_json.label_id == "l1"
        assert from_json.participant_ids is None
        assert from_json.participant_names is None


class TestAppStateModel:
    """Tests for AppState."""

    def test_default_state(self):
        """Test the documented default state."""
        from timemoney.models.app_state import AppState
        from timemoney.models.mode import Mode

        state = AppState.default()

        assert state.mode == Mode.PERSONAL
        assert state.currency == "USD"
        assert state.personal_settings.hourly_rate == 0
        assert state.participants == []
        assert state.labels == []
        assert state.activities == []
        assert state.active_session is None
        assert state.is_tracking is False

    def test_missing_fields_take_defaults(self):
        """Test a partial stored payload fills in defaults."""
        from timemoney.models.app_state import AppState
        from timemoney.models.mode import Mode

        state = AppState.model_validate({"mode": "business", "currency": "ILS"})

        assert state.mode == Mode.BUSINESS
        assert state.currency == "ILS"
        assert state.personal_settings.hourly_rate == 0
        assert state.activities == []

    def test_invalid_mode_rejected(self):
        """Test an unknown mode fails validation."""
        from timemoney.models.app_state import AppState

        with pytest.raises(ValidationError):
            AppState.model_validate({"mode": "freelance"})
