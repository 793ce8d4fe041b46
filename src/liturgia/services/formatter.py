"""Text formatting for liturgical passages.

Passage bodies from the liturgy service embed verse numbers directly next to
the words they number ("12João disse"). This module splits such text into
plain and emphasized segments, and renders them either as inline markup or as
rich Text for the TUI.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from rich.text import Text

EMPHASIS_OPEN = "<b>"
EMPHASIS_CLOSE = "</b>"

# Latin letters, including the Latin-1 accented forms used in Portuguese
LETTER_CLASS = "A-Za-zÀ-ÖØ-öø-ÿ"

# A maximal digit run, the whitespace after it (possibly none), then a letter.
# The letter itself is not consumed.
_VERSE_NUMBER_RE = re.compile(rf"(?<![0-9])([0-9]+)(\s*)(?=[{LETTER_CLASS}])")

MONTHS_PT_BR = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]


@dataclass(frozen=True)
class TextSegment:
    """A run of text with a single emphasis state.

    Attributes:
        text: Segment text
        emphasized: Whether the segment is rendered bold
    """

    text: str
    emphasized: bool = False


def _append(segments: list[TextSegment], text: str, emphasized: bool = False) -> None:
    if not text:
        return
    if segments and segments[-1].emphasized == emphasized:
        segments[-1] = TextSegment(segments[-1].text + text, emphasized)
    else:
        segments.append(TextSegment(text, emphasized))


def segment_text(raw: str) -> list[TextSegment]:
    """Split raw passage text into plain and emphasized segments.

    Two rules are applied to every maximal run of digits that precedes a
    letter:

    1. Digits separated from the letter by whitespace are emphasized; the
       whitespace and the letter are kept verbatim.
    2. Digits immediately followed by the letter stay plain and get a single
       space inserted before the letter.

    A digit run handled by rule 1 is never touched by rule 2. All other
    characters, line breaks included, pass through unchanged.

    Args:
        raw: Raw passage text

    Returns:
        List of segments; empty for empty input
    """
    segments: list[TextSegment] = []
    position = 0

    for match in _VERSE_NUMBER_RE.finditer(raw):
        digits, spacing = match.group(1), match.group(2)
        _append(segments, raw[position:match.start()])
        if spacing:
            _append(segments, digits, emphasized=True)
            _append(segments, spacing)
        else:
            _append(segments, digits + " ")
        position = match.end()

    _append(segments, raw[position:])
    return segments


def render_markup(segments: Iterable[TextSegment]) -> str:
    """Render segments as a string with inline emphasis markers.

    Args:
        segments: Segments from segment_text()

    Returns:
        Text with emphasized runs wrapped in <b>...</b>
    """
    return "".join(
        f"{EMPHASIS_OPEN}{segment.text}{EMPHASIS_CLOSE}" if segment.emphasized else segment.text
        for segment in segments
    )


def format_text(raw: str) -> str:
    """Format raw passage text with emphasized verse numbers.

    Examples:
        "12João disse" -> "12 João disse"
        "12 João disse" -> "<b>12</b> João disse"

    Applying it again never double-wraps a number that is already
    emphasized, since the closing marker sits between it and the next word.

    Args:
        raw: Raw passage text

    Returns:
        Formatted text
    """
    return render_markup(segment_text(raw))


def to_rich_text(segments: Iterable[TextSegment]) -> Text:
    """Render segments as rich Text, emphasized runs in bold."""
    text = Text()
    for segment in segments:
        text.append(segment.text, style="bold" if segment.emphasized else None)
    return text


def format_long_date(value: date) -> str:
    """Format a date in long Brazilian Portuguese form.

    Args:
        value: Date to format

    Returns:
        Date string (e.g., "25 de dezembro de 2024")
    """
    return f"{value.day} de {MONTHS_PT_BR[value.month - 1]} de {value.year}"
