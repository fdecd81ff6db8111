from __future__ import annotations

import typer

from treeyaml.cli.commands.check import check_command
from treeyaml.cli.commands.export import export_command
from treeyaml.cli.commands.fmt import fmt_command
from treeyaml.cli.commands.stats import stats_command

app = typer.Typer(
    name="treeyaml",
    help="Check, format, inspect and export indented tree files",
    add_completion=False,
)

app.command("check")(check_command)
app.command("export")(export_command)
app.command("fmt")(fmt_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
