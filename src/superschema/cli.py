from __future__ import annotations
import logging
import typer
from rich import print as rprint
from rich.markup import escape

from .errors import ConfigError, PatternError
from .integration import default_validator
from .loader import load_document, load_pattern, select

app = typer.Typer(add_completion=False)

@app.callback()
def main(verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each check.")):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(name)s: %(message)s")

@app.command()
def check(
    data: str,
    pattern: str = typer.Option(..., "-p", "--pattern", help="TOML or JSON pattern document."),
    name: str = typer.Option(None, "-n", "--name", help="Label used in error messages."),
    key: str = typer.Option(None, "-k", "--key", help="Dotted key of the value to check."),
):
    try:
        value = select(load_document(data), key)
        default_validator().check(value, load_pattern(pattern), name or key)
    except PatternError as exc:
        rprint(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(1)
    except ConfigError as exc:
        rprint(f"[yellow]{escape(exc.message)}[/yellow]")
        raise typer.Exit(2)
    rprint("[green]OK[/green]")

@app.command()
def types():
    for type_name in default_validator().registry.names():
        print(type_name)
