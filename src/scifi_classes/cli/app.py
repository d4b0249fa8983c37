from __future__ import annotations

import typer

from scifi_classes.cli.commands.greet import greet_command
from scifi_classes.cli.commands.list_quotes import list_command
from scifi_classes.cli.commands.quote import quote_command
from scifi_classes.cli.utils import print_one_quote

app = typer.Typer(
    name="scifi-classes",
    help="Sci-fi quotes and greetings",
    add_completion=False,
)

app.command("quote")(quote_command)
app.command("list")(list_command)
app.command("greet")(greet_command)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """
    With no command, print one quote from the configured quotes file.
    """
    if ctx.invoked_subcommand is None:
        print_one_quote()


def main():
    app()


if __name__ == "__main__":
    main()
