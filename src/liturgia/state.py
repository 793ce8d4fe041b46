"""Selection state for liturgia.

Holds the selected date, the fetched liturgy and the loading flag as
observable properties. All changes go through the methods below so that
overlapping fetches cannot leave the state inconsistent.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from liturgia.logging_config import get_logger
from liturgia.models import LiturgyDocument

logger = get_logger(__name__)


@dataclass
class SelectionState:
    """Reactive selection state.

    Provides observable properties that screens can watch for changes.

    Attributes:
        selected_date: Date chosen by the user
        loading: Whether a fetch is in flight
        document: Liturgy currently shown (None until the first success)
        document_date: Date the current document belongs to
        last_error: Message of the latest failed fetch (None after a success)
    """

    selected_date: date = field(default_factory=date.today)
    loading: bool = False
    document: Optional[LiturgyDocument] = None
    document_date: Optional[date] = None
    last_error: Optional[str] = None

    # Fetch sequencing
    _last_issued: int = 0
    _last_settled: int = 0
    _in_flight: set[int] = field(default_factory=set)

    # Callbacks for state changes
    _listeners: dict[str, list[Callable]] = field(default_factory=dict)

    def add_listener(self, property_name: str, callback: Callable) -> None:
        """Add a listener for a property change.

        Args:
            property_name: Name of the property to watch
            callback: Function to call with the new value
        """
        self._listeners.setdefault(property_name, []).append(callback)

    def remove_listener(self, property_name: str, callback: Callable) -> None:
        """Remove a property change listener.

        Args:
            property_name: Name of the property
            callback: Callback to remove
        """
        if property_name in self._listeners:
            self._listeners[property_name] = [
                cb for cb in self._listeners[property_name] if cb != callback
            ]

    def _notify(self, property_name: str, value) -> None:
        """Notify listeners of a property change."""
        for callback in list(self._listeners.get(property_name, [])):
            try:
                callback(value)
            except Exception:
                logger.exception(f"Listener for {property_name!r} failed")

    def select_date(self, value: date) -> None:
        """Select a date.

        Args:
            value: Date to select
        """
        self.selected_date = value
        self._notify("selected_date", value)

    def _set_loading(self, loading: bool) -> None:
        if loading != self.loading:
            self.loading = loading
            self._notify("loading", loading)

    def begin_fetch(self) -> int:
        """Register a new fetch and enter the loading state.

        Returns:
            Sequence number identifying the fetch
        """
        self._last_issued += 1
        seq = self._last_issued
        self._in_flight.add(seq)
        self._set_loading(True)
        return seq

    def on_fetch_settled(
        self,
        seq: int,
        document: Optional[LiturgyDocument] = None,
        error: Optional[str] = None,
        for_date: Optional[date] = None,
    ) -> bool:
        """Record the outcome of a fetch.

        The outcome is applied only if no later fetch has settled already;
        an older completion arriving late is discarded. A failure leaves the
        current document in place.

        Args:
            seq: Sequence number returned by begin_fetch()
            document: Fetched document (None on failure)
            error: Error message on failure
            for_date: Date the fetch was made for

        Returns:
            True if the outcome was applied
        """
        self._in_flight.discard(seq)

        applied = seq > self._last_settled
        if applied:
            self._last_settled = seq
            if document is not None:
                self.document = document
                self.document_date = for_date
                self.last_error = None
                self._notify("document", document)
            else:
                self.last_error = error or "Unknown error"
                self._notify("last_error", self.last_error)
        else:
            logger.debug(f"Discarding stale fetch #{seq} (latest settled: #{self._last_settled})")

        self._set_loading(bool(self._in_flight))
        return applied

    @property
    def in_flight(self) -> int:
        """Number of fetches still pending."""
        return len(self._in_flight)
