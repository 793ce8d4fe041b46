"""Liturgy fetcher.

Runs one fetch against the liturgy service and settles the selection state,
keeping the loading flag bracketed around the request.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Coroutine, Optional

from liturgia.logging_config import get_logger
from liturgia.models import LiturgyDocument
from liturgia.services.liturgy_client import LiturgyClient, LiturgyClientError
from liturgia.state import SelectionState

logger = get_logger(__name__)


@dataclass
class FetchResult:
    """Outcome of a single fetch.

    Attributes:
        date: Date the fetch was made for
        document: Fetched liturgy (None on failure)
        error: Error message on failure
        applied: Whether the outcome was applied to the state
    """

    date: date
    document: Optional[LiturgyDocument] = None
    error: Optional[str] = None
    applied: bool = False

    @property
    def ok(self) -> bool:
        """Whether the fetch succeeded."""
        return self.document is not None


class LiturgyFetcher:
    """Fetches liturgies and applies them to the selection state."""

    def __init__(self, state: SelectionState, client: LiturgyClient):
        """Initialize the fetcher.

        Args:
            state: Selection state to update
            client: Liturgy service client
        """
        self.state = state
        self.client = client

    def fetch_liturgy(self, value: date) -> Coroutine[Any, Any, FetchResult]:
        """Fetch the liturgy of a day into the selection state.

        The loading flag is set as soon as this is called, before the
        returned coroutine is scheduled, and cleared once the request
        settles, whatever the outcome. Failures are logged and reported in
        the result; they are not raised.

        Args:
            value: Date to fetch

        Returns:
            Coroutine resolving to a FetchResult
        """
        seq = self.state.begin_fetch()
        logger.info(f"Fetch #{seq} started for {value.isoformat()}")
        return self._run(seq, value)

    async def _run(self, seq: int, value: date) -> FetchResult:
        result = FetchResult(date=value)

        try:
            result.document = await self.client.fetch(value)
        except LiturgyClientError as e:
            result.error = str(e)
            logger.error(f"Fetch #{seq} for {value.isoformat()} failed: {e}")
        except Exception as e:
            result.error = str(e) or type(e).__name__
            logger.exception(f"Fetch #{seq} for {value.isoformat()} failed unexpectedly")
        finally:
            result.applied = self.state.on_fetch_settled(
                seq,
                document=result.document,
                error=result.error,
                for_date=value,
            )

        logger.info(f"Fetch #{seq} settled (ok={result.ok}, applied={result.applied})")
        return result
