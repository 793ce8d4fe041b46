"""Main TUI application for liturgia.

Textual-based application to read the daily liturgy of any date.
"""

from datetime import date
from typing import Optional

from textual.app import App

from liturgia.config import AppConfig
from liturgia.logging_config import get_logger
from liturgia.services.fetcher import LiturgyFetcher
from liturgia.services.liturgy_client import LiturgyClient
from liturgia.state import SelectionState

logger = get_logger(__name__)


class LiturgiaApp(App):
    """Daily liturgy reader.

    Owns the selection state and starts a fetch each time a date is
    selected. Overlapping fetches are not cancelled; the selection state
    discards results that arrive out of order.
    """

    CSS_PATH = "screens/app.tcss"
    TITLE = "Liturgia Diária"
    SUB_TITLE = "Grupo Sião - Comunidade Católica Shalom"

    def __init__(
        self,
        config: AppConfig,
        client: Optional[LiturgyClient] = None,
        initial_date: Optional[date] = None,
        *args,
        **kwargs,
    ):
        """Initialize the application.

        Args:
            config: Application configuration
            client: Liturgy service client (built from config if omitted)
            initial_date: Date shown at startup (defaults to today)
        """
        super().__init__(*args, **kwargs)

        self.config = config

        self.state = SelectionState()
        if initial_date is not None:
            self.state.selected_date = initial_date

        self.client = client or LiturgyClient(config.api_url, timeout=config.timeout)
        self.fetcher = LiturgyFetcher(self.state, self.client)

    def on_mount(self) -> None:
        """Handle app mount event."""
        from liturgia.screens.liturgy import LiturgyScreen

        logger.info(f"App mounted, showing {self.state.selected_date.isoformat()}")
        self.push_screen(LiturgyScreen(self.state, self.config))

    def select_date(self, value: date) -> None:
        """Select a date and fetch its liturgy.

        Args:
            value: Date to show
        """
        logger.info(f"Select date: {value.isoformat()} (in flight: {self.state.in_flight})")
        self.state.select_date(value)
        self.run_worker(
            self.fetcher.fetch_liturgy(value),
            name=f"fetch-{value.isoformat()}",
            group="fetch",
            exclusive=False,
        )
