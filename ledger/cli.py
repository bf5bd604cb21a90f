"""Command-line harness: read transactions as JSON, print the balance sheet."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .logging_setup import configure_logging
from .rational import MalformedLiteral
from .service import LedgerService, MalformedDocument

app = typer.Typer(
    name="ledger-balances",
    help="Net per-account balances of double-entry transactions using exact fractions",
    add_completion=False,
)
err_console = Console(stderr=True)


@app.command()
def balances(
    input_path: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="JSON file of transactions (default: stdin)"),
    ] = None,
    indent: Annotated[int, typer.Option(help="Indentation of the JSON output")] = 2,
    log_level: Annotated[
        Optional[str], typer.Option(envvar="LEDGER_LOG_LEVEL", help="Log level (DEBUG, INFO, ...)")
    ] = None,
) -> None:
    """Read a list of {"credits": {...}, "debits": {...}} records and print net balances."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    if input_path is not None:
        if not input_path.exists():
            err_console.print(f"[red]Error:[/red] File not found: {input_path}")
            raise typer.Exit(1)
        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            err_console.print(f"[red]Error reading file:[/red] {escape(str(e))}", highlight=False)
            raise typer.Exit(1)
    else:
        text = sys.stdin.read()

    try:
        sheet = LedgerService().balance_json(text)
    except (MalformedLiteral, MalformedDocument) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    typer.echo(sheet.to_json(indent=indent or None))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
