# src/scifi_classes/quotes/__init__.py

"""
Public interface for the quotes stack.

    from scifi_classes.quotes import Quote, QuoteStore, parse_line
"""

from __future__ import annotations

from .quote import DEFAULT_DELIMITER, Quote, parse_line
from .store import NO_QUOTES_MESSAGE, QuoteStore

__all__ = [
    "DEFAULT_DELIMITER",
    "NO_QUOTES_MESSAGE",
    "Quote",
    "QuoteStore",
    "parse_line",
]
