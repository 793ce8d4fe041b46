"""Liturgy screen.

Shows the liturgy of the selected date, one tab per passage.
"""

from datetime import date, timedelta
from typing import Optional

from rich.markup import escape
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, LoadingIndicator, Static, TabbedContent, TabPane

from liturgia.config import AppConfig
from liturgia.logging_config import get_logger
from liturgia.models import DisplayUnit, LiturgyDocument
from liturgia.screens.date_picker import DatePickerScreen
from liturgia.services.formatter import format_long_date, segment_text, to_rich_text
from liturgia.state import SelectionState

logger = get_logger(__name__)


def render_passage_text(unit: DisplayUnit) -> Text:
    """Render the body of a display unit.

    Args:
        unit: Display unit to render

    Returns:
        Formatted text, or the raw text for units shown unformatted
    """
    if unit.formatted:
        return to_rich_text(segment_text(unit.passage.text))
    return Text(unit.passage.text)


class LiturgyView(Vertical):
    """Tabbed view of a liturgy document."""

    document: reactive[Optional[LiturgyDocument]] = reactive(None, recompose=True)

    def __init__(self, format_psalm: bool = True, **kwargs):
        """Initialize the view.

        Args:
            format_psalm: Format the psalm like the other passages
        """
        super().__init__(**kwargs)
        self.format_psalm = format_psalm

    def compose(self) -> ComposeResult:
        """Compose one tab per display unit."""
        if self.document is None:
            yield Static("Nenhuma liturgia carregada.", id="empty_message")
            return

        with TabbedContent(id="tabs"):
            for unit in self.document.display_units(format_psalm=self.format_psalm):
                with TabPane(unit.label, id=unit.key):
                    with VerticalScroll(classes="passage"):
                        yield Label(Text(unit.passage.title, style="bold"), classes="passage_title")
                        yield Static(Text(unit.passage.reference, style="italic"), classes="passage_reference")
                        yield Static(render_passage_text(unit), classes="passage_text")


class LiturgyScreen(Screen):
    """Screen showing the liturgy of the selected date."""

    BINDINGS = [
        ("p", "previous_day", "Dia anterior"),
        ("n", "next_day", "Próximo dia"),
        ("t", "today", "Hoje"),
        ("d", "pick_date", "Escolher data"),
        ("q", "app.quit", "Sair"),
    ]

    def __init__(self, state: SelectionState, config: AppConfig):
        """Initialize the screen.

        Args:
            state: Selection state
            config: Application configuration
        """
        super().__init__()
        self.state = state
        self.config = config

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()

        with Vertical(id="liturgy_header"):
            yield Label("", id="date_label")
            yield Label("", id="color_label")
            yield Label("", id="name_label")

        yield LoadingIndicator(id="loading")
        yield LiturgyView(format_psalm=self.config.format_psalm, id="liturgy_view")

        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self.state.add_listener("selected_date", self._on_selected_date)
        self.state.add_listener("loading", self._on_loading)
        self.state.add_listener("document", self._on_document)
        self.state.add_listener("last_error", self._on_error)

        self._on_selected_date(self.state.selected_date)
        self._on_document(self.state.document)
        self._on_loading(self.state.loading)

        self.app.select_date(self.state.selected_date)

    def on_unmount(self) -> None:
        """Stop watching the state."""
        self.state.remove_listener("selected_date", self._on_selected_date)
        self.state.remove_listener("loading", self._on_loading)
        self.state.remove_listener("document", self._on_document)
        self.state.remove_listener("last_error", self._on_error)

    def _on_selected_date(self, value: date) -> None:
        self.query_one("#date_label", Label).update(Text(format_long_date(value), style="bold"))

    def _on_loading(self, loading: bool) -> None:
        self.query_one("#loading", LoadingIndicator).display = loading
        self.query_one("#liturgy_view", LiturgyView).display = not loading

    def _on_document(self, document: Optional[LiturgyDocument]) -> None:
        color = document.liturgical_color.upper() if document else ""
        name = document.liturgy_name if document else ""
        self.query_one("#color_label", Label).update(Text(f"COR LITÚRGICA: {color}"))
        self.query_one("#name_label", Label).update(Text(name, style="bold"))
        self.query_one("#liturgy_view", LiturgyView).document = document

    def _on_error(self, message: str) -> None:
        self.notify(f"Erro ao buscar dados da liturgia: {escape(message)}", severity="error")

    def action_previous_day(self) -> None:
        """Show the liturgy of the previous day."""
        self.app.select_date(self.state.selected_date - timedelta(days=1))

    def action_next_day(self) -> None:
        """Show the liturgy of the next day."""
        self.app.select_date(self.state.selected_date + timedelta(days=1))

    def action_today(self) -> None:
        """Show today's liturgy."""
        self.app.select_date(date.today())

    def action_pick_date(self) -> None:
        """Open the date picker."""

        def on_picked(chosen: Optional[date]) -> None:
            if chosen is not None:
                logger.info(f"Date picked: {chosen.isoformat()}")
                self.app.select_date(chosen)

        self.app.push_screen(DatePickerScreen(self.state.selected_date), on_picked)
