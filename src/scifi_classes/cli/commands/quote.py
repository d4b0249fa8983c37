from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from scifi_classes.cli.utils import print_one_quote


def quote_command(
    quotes_file: Optional[Path] = typer.Argument(
        None,
        help="Quotes file (defaults to paths.quotes_file from config)",
    ),
    first: bool = typer.Option(
        False,
        "--first",
        help="Print the first quote instead of a random one",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for reproducible random selection",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Field delimiter (defaults to quotes.delimiter from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and counts on stderr",
    ),
):
    """
    Print one quote from a quotes file.
    """
    print_one_quote(
        quotes_file,
        delimiter=delimiter,
        first=first,
        seed=seed,
        verbose=verbose,
    )
