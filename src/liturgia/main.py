"""CLI entry point for liturgia.

Provides the `liturgia` command for launching the Textual interface and
printing the liturgy of a day to the terminal.
"""

import asyncio
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from liturgia import __version__
from liturgia.config import AppConfig, ensure_app_config_exists, get_app_config_path
from liturgia.logging_config import LOG_FILENAME, setup_logging
from liturgia.screens.date_picker import parse_date_input
from liturgia.services.fetcher import FetchResult, LiturgyFetcher
from liturgia.services.formatter import format_long_date, format_text, segment_text, to_rich_text
from liturgia.services.liturgy_client import LiturgyClient
from liturgia.state import SelectionState

app = typer.Typer(
    name="liturgia",
    help="Liturgia Diária - daily Catholic liturgy reader",
    no_args_is_help=False,
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """Liturgia Diária - read the liturgy of any day."""
    if version:
        console.print(f"liturgia version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _load_config(config_path: Optional[Path]) -> AppConfig:
    """Load the config file, or create the default one.

    Args:
        config_path: Explicit config file, if given

    Returns:
        AppConfig instance
    """
    try:
        if config_path:
            return AppConfig.load(config_path)
        return ensure_app_config_exists()
    except FileNotFoundError as e:
        console.print(f"[red]Config file not found: {e}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(1)


def _parse_date(value: Optional[str]) -> date:
    """Parse the --date option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return parse_date_input(value)
    except ValueError as e:
        console.print(Text(str(e), style="red"))
        raise typer.Exit(1)


async def _fetch_once(config: AppConfig, value: date) -> FetchResult:
    client = LiturgyClient(config.api_url, timeout=config.timeout)
    fetcher = LiturgyFetcher(SelectionState(selected_date=value), client)
    return await fetcher.fetch_liturgy(value)


@app.command()
def run(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    date_option: str = typer.Option(
        None,
        "--date",
        "-d",
        help="Date to open (DD/MM/AAAA or AAAA-MM-DD), defaults to today",
    ),
) -> None:
    """Launch the TUI application."""
    config = _load_config(config_path)
    initial_date = _parse_date(date_option)

    logger = setup_logging(config.log_dir, config.log_level)
    logger.info(f"Liturgy service: {config.api_url}")
    console.print(f"[dim]Session log: {config.log_dir / LOG_FILENAME}[/dim]")

    from liturgia.app import LiturgiaApp

    try:
        app_instance = LiturgiaApp(config, initial_date=initial_date)
        logger.info("Launching TUI application")
        app_instance.run()
        logger.info("Application exited normally")
    except KeyboardInterrupt:
        logger.info("Application interrupted by user (Ctrl+C)")
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(0)
    except Exception as e:
        logger.exception(f"Application error: {e}")
        console.print(f"[red]Error running app: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def show(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    date_option: str = typer.Option(
        None,
        "--date",
        "-d",
        help="Date to show (DD/MM/AAAA or AAAA-MM-DD), defaults to today",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print passages with inline <b> markers instead of styling",
    ),
) -> None:
    """Print the liturgy of a day."""
    config = _load_config(config_path)
    value = _parse_date(date_option)
    setup_logging(config.log_dir, config.log_level)

    result = asyncio.run(_fetch_once(config, value))
    if not result.ok:
        console.print(Text(f"Erro ao buscar dados da liturgia: {result.error}", style="red"))
        raise typer.Exit(1)

    document = result.document
    console.print(
        Panel.fit(
            Text.assemble(
                (format_long_date(value), "bold"),
                "\n",
                f"COR LITÚRGICA: {document.liturgical_color.upper()}",
                "\n",
                (document.liturgy_name, "bold"),
            ),
            title="Liturgia Diária",
            border_style="yellow",
        )
    )

    for unit in document.display_units(format_psalm=config.format_psalm):
        console.print(Rule(unit.label))
        console.print(Text(unit.passage.title, style="bold"))
        console.print(Text(unit.passage.reference, style="dim"))
        if not unit.formatted:
            console.print(Text(unit.passage.text))
        elif raw:
            console.print(format_text(unit.passage.text), markup=False, highlight=False)
        else:
            console.print(to_rich_text(segment_text(unit.passage.text)))
        console.print()


@app.command()
def config() -> None:
    """Show the application configuration."""
    config_path = get_app_config_path()

    if not config_path.exists():
        console.print(f"[yellow]No config file at {config_path}[/yellow]")
        console.print("Run [bold]liturgia run[/bold] to create default config.")
        return

    config = AppConfig.load(config_path)
    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print(f"[bold]Liturgy service:[/bold] {config.api_url}")
    console.print(f"[bold]Timeout:[/bold] {config.timeout if config.timeout is not None else 'none'}")
    console.print(f"[bold]Format psalm:[/bold] {config.format_psalm}")
    console.print(f"[bold]Log dir:[/bold] {config.log_dir}")


def cli_entry() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli_entry()
