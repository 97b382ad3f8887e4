"""End-to-end tests driving TimeTracker against a real state file."""
import json

import pytest


class TestTrackerWorkflow:
    """Tests for the command interface."""

    def test_personal_workflow(self, tracker, clock):
        """Test setting a rate, tracking 90 minutes and recording 22.50."""
        tracker.set_personal_rate(15)
        assert tracker.start_warnings() == []

        tracker.start_session("Tutoring")
        clock.advance(minutes=45)
        assert tracker.live_status().amount == pytest.approx(11.25)
        clock.advance(minutes=45)

        state = tracker.finish_session()

        assert state.active_session is None
        assert state.activities[0].amount == pytest.approx(22.50)
        assert tracker.state == state

    def test_business_workflow(self, tracker, clock):
        """Test the Alice and Bob scenario through the facade."""
        from timemoney.models.mode import Mode

        tracker.set_mode(Mode.BUSINESS)
        tracker.add_participant("Alice", 20)
        state = tracker.add_participant("Bob", 30)
        ids = [p.id for p in state.participants]

        assert tracker.start_warnings([]) == ["Please select at least one participant"]

        tracker.start_session("Sprint planning", participant_ids=ids)
        clock.advance(minutes=30)
        state = tracker.finish_session()

        entry = state.activities[0]
        assert entry.amount == pytest.approx(25.00)
        assert entry.participant_names == ["Alice", "Bob"]

        # Renaming or deleting afterwards leaves history alone
        tracker.update_participant(ids[0], name="Alicia")
        state = tracker.delete_participant(ids[1])
        assert state.activities[0].participant_names == ["Alice", "Bob"]
        assert [p.name for p in state.participants] == ["Alicia"]

    def test_double_start_rejected(self, tracker):
        """Test a second start fails until the first is finished or cancelled."""
        tracker.start_session("One")

        with pytest.raises(ValueError, match="Session already active"):
            tracker.start_session("Two")

        tracker.cancel_session()
        assert tracker.start_session("Two").active_session.activity_name == "Two"

    def test_finish_while_idle(self, tracker):
        """Test finishing while idle raises nothing and records nothing."""
        state = tracker.finish_session()

        assert state.activities == []

    def test_label_lifecycle(self, tracker, clock):
        """Test labelling, filtering, totals and cascading delete."""
        state = tracker.add_label("Client A")
        label_id = state.labels[0].id

        tracker.set_personal_rate(60)
        for name in ("Call", "Email"):
            tracker.start_session(name, label_id=label_id)
            clock.advance(minutes=30)
            tracker.finish_session()
        tracker.start_session("Admin")
        clock.advance(minutes=15)
        tracker.finish_session()

        assert [a.activity_name for a in tracker.filtered_activities(label_id)] == ["Email", "Call"]
        assert [a.activity_name for a in tracker.filtered_activities("none")] == ["Admin"]
        totals = tracker.label_totals()
        assert totals[label_id].total == pytest.approx(60)
        assert totals[None].total == pytest.approx(15)

        tracker.update_label(label_id, color="#000000")
        state = tracker.delete_label(label_id)

        assert state.labels == []
        assert len(state.activities) == 3
        assert all(a.label_id is None for a in state.activities)

    def test_reassign_and_delete_activity(self, tracker, clock):
        """Test relabelling and deleting a recorded activity."""
        label_id = tracker.add_label("Deep work").labels[0].id
        tracker.start_session("Refactor")
        clock.advance(minutes=10)
        activity_id = tracker.finish_session().activities[0].id

        state = tracker.update_activity_label(activity_id, label_id)
        assert state.activities[0].label_id == label_id

        state = tracker.delete_activity(activity_id)
        assert state.activities == []


class TestTrackerPersistence:
    """Tests for durability across process restarts."""

    def test_state_survives_restart(self, settings, clock):
        """Test a new tracker sees what the previous one recorded."""
        from timemoney.main import create_tracker

        first = create_tracker(settings, clock=clock)
        first.set_currency("EUR")
        first.set_personal_rate(30)
        first.start_session("Writing")
        clock.advance(minutes=20)
        recorded = first.finish_session()

        second = create_tracker(settings, clock=clock)

        assert second.state == recorded
        assert second.state.activities[0].amount == pytest.approx(10)

    def test_active_session_survives_restart(self, settings, clock):
        """Test a running session can be finished by a later process."""
        from timemoney.main import create_tracker

        first = create_tracker(settings, clock=clock)
        first.set_personal_rate(12)
        first.start_session("Long task")
        clock.advance(minutes=60)

        second = create_tracker(settings, clock=clock)
        state = second.finish_session()

        assert state.activities[0].activity_name == "Long task"
        assert state.activities[0].amount == pytest.approx(12)

    def test_lifespan_flushes_on_exit(self, settings, clock):
        """Test the lifespan context writes the snapshot on exit."""
        from timemoney.main import lifespan

        with lifespan(settings, clock=clock) as tracker:
            assert tracker.state.activities == []

        stored = json.loads(settings.state_path.read_text(encoding="utf-8"))
        assert stored[settings.storage_key]["mode"] == "personal"

    def test_corrupt_file_starts_fresh(self, settings, clock):
        """Test an unreadable state file yields a usable default tracker."""
        from timemoney.main import create_tracker

        settings.state_path.write_text("\x00\x01 not json", encoding="utf-8")

        tracker = create_tracker(settings, clock=clock)
        state = tracker.set_personal_rate(5)

        assert state.personal_settings.hourly_rate == 5
        stored = json.loads(settings.state_path.read_text(encoding="utf-8"))
        assert stored[settings.storage_key]["personalSettings"]["hourlyRate"] == 5
