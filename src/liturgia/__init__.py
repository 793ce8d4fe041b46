"""Liturgia Diária - daily Catholic liturgy viewer.

This package provides:
- A client for the remote daily liturgy service
- A text formatter for verse-numbered liturgical passages
- A Textual TUI to browse the liturgy of any day
"""

__version__ = "0.1.0"
