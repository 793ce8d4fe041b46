"""Services for liturgia.

Provides the liturgy service client, the fetcher and the text formatter.
"""

from liturgia.services.fetcher import FetchResult, LiturgyFetcher
from liturgia.services.formatter import TextSegment, format_text, segment_text
from liturgia.services.liturgy_client import LiturgyClient, LiturgyClientError

__all__ = [
    "FetchResult",
    "LiturgyClient",
    "LiturgyClientError",
    "LiturgyFetcher",
    "TextSegment",
    "format_text",
    "segment_text",
]
