"""Date picker screen.

Modal dialog to type the date whose liturgy should be shown.
"""

from datetime import date, datetime
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

DATE_FORMATS = ("%d/%m/%Y", "%Y-%m-%d")


def parse_date_input(text: str) -> date:
    """Parse a user-typed date.

    Accepts DD/MM/AAAA and ISO AAAA-MM-DD.

    Args:
        text: Date as typed by the user

    Returns:
        Parsed date

    Raises:
        ValueError: If the text matches none of the accepted formats
    """
    value = text.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Data inválida: {text!r} (use DD/MM/AAAA)")


class DatePickerScreen(ModalScreen[Optional[date]]):
    """Modal screen returning the chosen date, or None when cancelled."""

    BINDINGS = [
        ("escape", "cancel", "Cancelar"),
    ]

    def __init__(self, current: date):
        """Initialize the screen.

        Args:
            current: Date shown when the dialog opens
        """
        super().__init__()
        self.current = current

    def compose(self) -> ComposeResult:
        """Compose the dialog layout."""
        with Vertical(id="date_dialog"):
            yield Label("[bold]Escolher data[/bold]", id="date_title")
            yield Input(
                value=self.current.strftime("%d/%m/%Y"),
                placeholder="DD/MM/AAAA",
                id="date_input",
            )
            yield Label("", id="date_error")
            with Horizontal(id="date_buttons"):
                yield Button("OK", id="btn_ok", variant="primary")
                yield Button("Cancelar", id="btn_cancel")

    def _submit(self) -> None:
        text = self.query_one("#date_input", Input).value
        try:
            chosen = parse_date_input(text)
        except ValueError as e:
            self.query_one("#date_error", Label).update(Text(str(e), style="red"))
            return
        self.dismiss(chosen)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle enter in the date input."""
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn_ok":
            self._submit()
        elif event.button.id == "btn_cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        """Close without choosing a date."""
        self.dismiss(None)
