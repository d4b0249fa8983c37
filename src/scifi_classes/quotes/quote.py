# src/scifi_classes/quotes/quote.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_DELIMITER = "|"


@dataclass(frozen=True, slots=True)
class Quote:
    """
    A single quotation and the person it is attributed to.

    Attributes:
        text: The quotation itself, e.g. "Live long and prosper".
        speaker: Who said it, e.g. "Spock".
    """
    text: str
    speaker: str

    def render(self) -> str:
        return f"{self.text} — {self.speaker}"

    def __str__(self) -> str:
        return self.render()


def parse_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> Optional[Quote]:
    """
    Parse one ``<text><delimiter><speaker>`` line into a Quote.

    Returns None for blank lines and for malformed ones: a missing
    delimiter, more than one delimiter, or an empty text/speaker field.
    A delimiter inside the quote text is not supported.

    Examples:
        "Live long and prosper|Spock" -> Quote("Live long and prosper", "Spock")
        "no delimiter here"           -> None
        "a|b|c"                       -> None
    """
    if not delimiter:
        raise ValueError("Quote delimiter must be a non-empty string")

    raw = line.rstrip("\r\n").lstrip("\ufeff")
    if not raw.strip():
        return None

    parts = raw.split(delimiter)
    if len(parts) != 2:
        return None

    text, speaker = (part.strip() for part in parts)
    if not text or not speaker:
        return None

    return Quote(text=text, speaker=speaker)
