"""
scifi_classes: small object-oriented exercises.

* ``Person`` produces greeting strings.
* ``QuoteStore`` loads ``text|speaker`` lines from a file and prints one.
"""

from scifi_classes.people import Person
from scifi_classes.quotes import Quote, QuoteStore, parse_line

__version__ = "0.1.0"

__all__ = [
    "Person",
    "Quote",
    "QuoteStore",
    "parse_line",
]
