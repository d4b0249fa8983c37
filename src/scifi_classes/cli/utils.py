from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from scifi_classes.config import get_config
from scifi_classes.core.exceptions import QuoteFileError
from scifi_classes.quotes import QuoteStore
from scifi_classes.utils import default_quotes_path

console = Console()
err_console = Console(stderr=True)


def load_quotes(
    path: Optional[Path],
    *,
    delimiter: Optional[str] = None,
    verbose: bool = False,
) -> QuoteStore:
    """
    Load a QuoteStore, falling back to the configured file and delimiter.

    A missing or unreadable file is reported on stderr and ends the
    command with exit code 1.
    """
    cfg = get_config()
    target = path or default_quotes_path()

    t0 = time.perf_counter()
    try:
        store = QuoteStore.load(target, delimiter=delimiter or cfg.delimiter)
    except QuoteFileError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(
            f"Loaded {len(store)} quotes from {target} in {elapsed:.3f}s "
            f"({store.skipped} skipped)"
        )

    return store


def print_one_quote(
    path: Optional[Path] = None,
    *,
    delimiter: Optional[str] = None,
    first: bool = False,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """Load the quotes file and print a single quote to stdout."""
    cfg = get_config()
    store = load_quotes(path, delimiter=delimiter, verbose=verbose)

    mode = "first" if first else cfg.selection
    rng = random.Random(seed) if seed is not None else None
    try:
        store.print_quote(mode, rng=rng)
    except ValueError as exc:
        err_console.print(
            f"[red]Error:[/red] {escape(str(exc))} (check quotes.selection in config)",
            highlight=False,
        )
        raise typer.Exit(code=1) from exc
