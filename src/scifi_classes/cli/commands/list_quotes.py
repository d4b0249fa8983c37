from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from scifi_classes.cli.utils import console, load_quotes


def list_command(
    quotes_file: Optional[Path] = typer.Argument(
        None,
        help="Quotes file (defaults to paths.quotes_file from config)",
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
    Show every quote in a quotes file.
    """
    store = load_quotes(quotes_file, delimiter=delimiter, verbose=verbose)

    table = Table(title=f"Quotes ({len(store)} loaded, {store.skipped} skipped)")
    table.add_column("#", justify="right")
    table.add_column("Quote", style="bold")
    table.add_column("Speaker")

    for index, quote in enumerate(store, start=1):
        table.add_row(str(index), quote.text, quote.speaker)

    console.print(table)
