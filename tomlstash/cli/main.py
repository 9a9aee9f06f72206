"""
Main CLI application using Typer

Entry point for the TomlStash CLI.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from tomlstash.cli import entries
from tomlstash.helpers.config import StoreConfig
from tomlstash.helpers.constants import VERSION
from tomlstash.helpers.logging import log_manager
from tomlstash.helpers.ui_utils import console

# Create Typer app
app = typer.Typer(
    name="tomlstash",
    help="TomlStash - local TOML settings store",
    add_completion=False,
    no_args_is_help=True,
)

# Register sub-commands
entries.register_to_main_app(app)


@app.callback()
def main_callback(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "--path", "-p",
        help="Settings directory (default: $TOMLSTASH_PATH or ~/.config/tomlstash)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """
    TomlStash - named settings entries stored as TOML files
    """
    try:
        config = StoreConfig.from_env(base_path=path, log_level=log_level)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    log_manager.configure(level=config.log_level)

    # Manager is created lazily by the commands that need it
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["manager"] = None


@app.command()
def version():
    """Show version information"""
    console.print(f"[cyan]TomlStash[/cyan] v{VERSION}")


def cli_main():
    """
    Entry point for CLI

    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if "DEBUG" in (arg.upper() for arg in sys.argv):
            raise
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
