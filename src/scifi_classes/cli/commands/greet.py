from __future__ import annotations

from typing import Optional

import typer

from scifi_classes.config import get_config
from scifi_classes.people import Person


def greet_command(
    name: Optional[str] = typer.Argument(
        None,
        help="Who is greeting (defaults to person.default_name from config)",
    ),
    time_of_day: Optional[str] = typer.Option(
        None,
        "--time",
        "-t",
        help='Time of day, e.g. "morning"; cannot be combined with --greeting',
    ),
    greeting: Optional[str] = typer.Option(
        None,
        "--greeting",
        "-g",
        help="Custom greeting placed before the name; cannot be combined with --time",
    ),
):
    """
    Print a greeting from a Person.
    """
    if time_of_day is not None and greeting is not None:
        raise typer.BadParameter(
            "--greeting cannot be combined with --time", param_hint="--greeting"
        )

    person = Person(name, default_name=get_config().default_name)

    if time_of_day is not None:
        person.print_greeting_at_time(person.name, time_of_day)
    else:
        person.print_greeting(greeting)
