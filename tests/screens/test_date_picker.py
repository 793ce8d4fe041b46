"""Tests for the date picker."""

from datetime import date

import pytest
from textual.app import App

from liturgia.screens.date_picker import DatePickerScreen, parse_date_input


class TestParseDateInput:
    """Tests for parse_date_input()."""

    def test_brazilian_format(self):
        """DD/MM/AAAA is accepted."""
        assert parse_date_input("25/12/2024") == date(2024, 12, 25)

    def test_iso_format(self):
        """AAAA-MM-DD is accepted."""
        assert parse_date_input("2024-12-25") == date(2024, 12, 25)

    def test_surrounding_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert parse_date_input("  05/03/2025 ") == date(2025, 3, 5)

    @pytest.mark.parametrize("text", ["", "31/02/2024", "25-12-2024", "amanhã"])
    def test_invalid(self, text):
        """Anything else raises ValueError."""
        with pytest.raises(ValueError, match="Data inválida"):
            parse_date_input(text)


class PickerApp(App):
    """Minimal app hosting the date picker."""

    def __init__(self, current: date):
        super().__init__()
        self.current = current
        self.results = []

    def on_mount(self) -> None:
        self.push_screen(DatePickerScreen(self.current), self.results.append)


class TestDatePickerScreen:
    """Tests for DatePickerScreen interaction."""

    @pytest.mark.asyncio
    async def test_prefilled_with_current_date(self):
        """The input starts with the current date."""
        app = PickerApp(date(2024, 12, 25))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.screen.query_one("#date_input").value == "25/12/2024"

    @pytest.mark.asyncio
    async def test_enter_returns_date(self):
        """Submitting a valid date dismisses with that date."""
        app = PickerApp(date(2024, 12, 25))
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#date_input").value = "01/01/2025"
            await pilot.press("enter")
            await pilot.pause()

        assert app.results == [date(2025, 1, 1)]

    @pytest.mark.asyncio
    async def test_escape_returns_none(self):
        """Cancelling dismisses with None."""
        app = PickerApp(date(2024, 12, 25))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()

        assert app.results == [None]

    @pytest.mark.asyncio
    async def test_invalid_input_keeps_dialog_open(self):
        """An invalid date shows an error and does not dismiss."""
        app = PickerApp(date(2024, 12, 25))
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#date_input").value = "99/99/9999"
            await pilot.press("enter")
            await pilot.pause()

            assert isinstance(app.screen, DatePickerScreen)
            assert app.results == []
