"""TUI screen modules."""

from liturgia.screens.date_picker import DatePickerScreen
from liturgia.screens.liturgy import LiturgyScreen, LiturgyView

__all__ = [
    "DatePickerScreen",
    "LiturgyScreen",
    "LiturgyView",
]
