"""
Google Play Review Extraction

Decodes the positional JSON returned by Google Play's review listing RPC
and pages through it with continuation tokens.
"""

__version__ = "1.0.0"

from .config.settings import Config
from .decoding import Review, parse_review
from .exceptions import TransportError
from .paging import RequestOptions, ReviewPaginator
from .crawlers import PlayStoreCrawler

__all__ = [
    "Config",
    "Review",
    "parse_review",
    "TransportError",
    "RequestOptions",
    "ReviewPaginator",
    "PlayStoreCrawler",
]
