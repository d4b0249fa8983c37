# src/scifi_classes/quotes/store.py

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from scifi_classes.core.exceptions import QuoteFileError
from scifi_classes.logging import get_logger
from scifi_classes.quotes.quote import DEFAULT_DELIMITER, Quote, parse_line

log = get_logger(__name__)

NO_QUOTES_MESSAGE = "No quotes available."


class QuoteStore:
    """
    Read-only, ordered collection of quotes loaded from a flat file.

    The backing list is private; callers use len(), iteration, indexing,
    ``quotes`` (a tuple snapshot), ``first()`` and ``random_quote()``.
    """

    def __init__(
        self,
        quotes: Iterable[Quote] = (),
        *,
        skipped: int = 0,
        source: Optional[Path] = None,
    ):
        self._quotes: List[Quote] = list(quotes)
        self.skipped = skipped
        self.source = source

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        delimiter: str = DEFAULT_DELIMITER,
        source: Optional[Path] = None,
    ) -> "QuoteStore":
        """Build a store from raw lines, dropping malformed ones."""
        quotes: List[Quote] = []
        skipped = 0

        for lineno, line in enumerate(lines, start=1):
            quote = parse_line(line, delimiter)
            if quote is not None:
                quotes.append(quote)
            elif line.strip():
                skipped += 1
                log.debug(f"Skipping malformed line {lineno}: {line.rstrip()!r}")

        return cls(quotes, skipped=skipped, source=source)

    @classmethod
    def load(
        cls,
        file_path: Union[str, Path],
        *,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "QuoteStore":
        """
        Load quotes from a UTF-8 text file, one ``text|speaker`` per line.

        Raises:
            QuoteFileError: if the file does not exist, is not a regular
                file, or cannot be read.
        """
        path = Path(file_path)
        log.info(f"Loading quotes: {path}")

        if not path.exists():
            log.info(f"Quotes file does not exist: {path}")
            raise QuoteFileError(path, "Quotes file not found")

        if not path.is_file():
            log.info(f"Quotes path is not a file: {path}")
            raise QuoteFileError(path, "Quotes path is not a file")

        try:
            with path.open("r", encoding="utf-8", errors="replace") as f:
                store = cls.from_lines(f, delimiter=delimiter, source=path)
        except OSError as exc:
            log.info(f"Could not read quotes file {path}: {exc}")
            raise QuoteFileError(path, "Quotes file could not be read") from exc

        log.info(f"Loaded {len(store)} quotes ({store.skipped} malformed lines skipped)")
        return store

    # ---------------------------------------------------------
    # Read-only access
    # ---------------------------------------------------------
    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._quotes)

    def __getitem__(self, index: int) -> Quote:
        return self._quotes[index]

    def __bool__(self) -> bool:
        return bool(self._quotes)

    @property
    def quotes(self) -> Tuple[Quote, ...]:
        return tuple(self._quotes)

    def first(self) -> Optional[Quote]:
        return self._quotes[0] if self._quotes else None

    def random_quote(self, rng: Optional[random.Random] = None) -> Optional[Quote]:
        """Pick one quote uniformly at random, or None when empty."""
        if not self._quotes:
            return None
        return (rng or random).choice(self._quotes)

    def select(self, mode: str = "random", rng: Optional[random.Random] = None) -> Optional[Quote]:
        mode = mode.lower().strip()
        if mode == "random":
            return self.random_quote(rng)
        elif mode == "first":
            return self.first()
        else:
            raise ValueError(f"Unknown selection mode: {mode}")

    # ---------------------------------------------------------
    # Printing
    # ---------------------------------------------------------
    def print_quote(
        self,
        mode: str = "random",
        stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Quote]:
        quote = self.select(mode, rng)
        out = stream or sys.stdout

        if quote is None:
            log.info("Quote requested from an empty store")
            print(NO_QUOTES_MESSAGE, file=out)
            return None

        print(quote.render(), file=out)
        return quote

    def print_random_quote(
        self,
        stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Quote]:
        """Print one random quote as ``<text> — <speaker>``."""
        return self.print_quote("random", stream=stream, rng=rng)
