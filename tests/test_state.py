"""Tests for SelectionState."""

from datetime import date
from unittest.mock import MagicMock

from liturgia.state import SelectionState


class TestSelectionStateDefaults:
    """Tests for initial state."""

    def test_selected_date_defaults_to_today(self):
        """The selection starts on the current date."""
        assert SelectionState().selected_date == date.today()

    def test_starts_idle_and_empty(self):
        """No document and no loading before the first fetch."""
        state = SelectionState()

        assert state.loading is False
        assert state.document is None
        assert state.document_date is None
        assert state.last_error is None
        assert state.in_flight == 0


class TestListeners:
    """Tests for the listener API."""

    def test_select_date_notifies(self):
        """select_date() updates and notifies."""
        state = SelectionState()
        callback = MagicMock()
        state.add_listener("selected_date", callback)

        state.select_date(date(2024, 12, 25))

        assert state.selected_date == date(2024, 12, 25)
        callback.assert_called_once_with(date(2024, 12, 25))

    def test_remove_listener(self):
        """Removed listeners are no longer called."""
        state = SelectionState()
        callback = MagicMock()
        state.add_listener("selected_date", callback)
        state.remove_listener("selected_date", callback)

        state.select_date(date(2024, 12, 25))

        callback.assert_not_called()

    def test_failing_listener_does_not_break_state(self):
        """A listener raising does not stop the change or other listeners."""
        state = SelectionState()
        broken = MagicMock(side_effect=RuntimeError("boom"))
        other = MagicMock()
        state.add_listener("selected_date", broken)
        state.add_listener("selected_date", other)

        state.select_date(date(2024, 1, 1))

        assert state.selected_date == date(2024, 1, 1)
        other.assert_called_once_with(date(2024, 1, 1))


class TestFetchSequencing:
    """Tests for begin_fetch() / on_fetch_settled()."""

    def test_begin_fetch_sets_loading(self):
        """begin_fetch() enters the loading state and notifies."""
        state = SelectionState()
        callback = MagicMock()
        state.add_listener("loading", callback)

        seq = state.begin_fetch()

        assert seq == 1
        assert state.loading is True
        callback.assert_called_once_with(True)

    def test_sequence_numbers_increase(self):
        """Each fetch gets a higher sequence number."""
        state = SelectionState()

        assert [state.begin_fetch() for _ in range(3)] == [1, 2, 3]

    def test_success_replaces_document(self, sample_document):
        """A successful fetch replaces the document and clears loading."""
        state = SelectionState()
        seq = state.begin_fetch()

        applied = state.on_fetch_settled(seq, document=sample_document, for_date=date(2024, 12, 25))

        assert applied is True
        assert state.document is sample_document
        assert state.document_date == date(2024, 12, 25)
        assert state.loading is False

    def test_failure_keeps_document(self, sample_document):
        """A failed fetch leaves the previous document in place."""
        state = SelectionState()
        state.on_fetch_settled(state.begin_fetch(), document=sample_document)

        seq = state.begin_fetch()
        applied = state.on_fetch_settled(seq, error="Connection refused")

        assert applied is True
        assert state.document is sample_document
        assert state.last_error == "Connection refused"
        assert state.loading is False

    def test_success_clears_error(self, sample_document):
        """A success after a failure clears last_error."""
        state = SelectionState()
        state.on_fetch_settled(state.begin_fetch(), error="boom")

        state.on_fetch_settled(state.begin_fetch(), document=sample_document)

        assert state.last_error is None

    def test_stale_completion_discarded(self, sample_document, weekday_document):
        """An older fetch finishing last does not overwrite a newer one."""
        state = SelectionState()
        first = state.begin_fetch()
        second = state.begin_fetch()

        assert state.on_fetch_settled(second, document=weekday_document) is True
        assert state.on_fetch_settled(first, document=sample_document) is False

        assert state.document is weekday_document
        assert state.loading is False

    def test_in_order_completions_both_applied(self, sample_document, weekday_document):
        """Completions arriving in issue order are all applied."""
        state = SelectionState()
        first = state.begin_fetch()
        second = state.begin_fetch()

        assert state.on_fetch_settled(first, document=sample_document) is True
        assert state.on_fetch_settled(second, document=weekday_document) is True

        assert state.document is weekday_document

    def test_loading_while_any_fetch_in_flight(self, sample_document):
        """loading stays true until every fetch has settled."""
        state = SelectionState()
        first = state.begin_fetch()
        second = state.begin_fetch()

        state.on_fetch_settled(first, document=sample_document)
        assert state.loading is True
        assert state.in_flight == 1

        state.on_fetch_settled(second, error="boom")
        assert state.loading is False

    def test_stale_failure_does_not_set_error(self, sample_document):
        """A stale failure is discarded like a stale success."""
        state = SelectionState()
        first = state.begin_fetch()
        second = state.begin_fetch()

        state.on_fetch_settled(second, document=sample_document)
        state.on_fetch_settled(first, error="late failure")

        assert state.last_error is None

    def test_document_notification(self, sample_document):
        """Listeners see the new document."""
        state = SelectionState()
        callback = MagicMock()
        state.add_listener("document", callback)

        state.on_fetch_settled(state.begin_fetch(), document=sample_document)

        callback.assert_called_once_with(sample_document)

    def test_loading_notifies_false_once_idle(self):
        """The loading listener sees True then False."""
        state = SelectionState()
        seen = []
        state.add_listener("loading", seen.append)

        state.on_fetch_settled(state.begin_fetch(), error="boom")

        assert seen == [True, False]
