"""
Main CLI application entry point.

This module contains the main Typer application and command handlers
for Love CLI.
"""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from love_cli import VERSION
from love_cli.config.env_loader import EnvFileLoader
from love_cli.config.settings import LoveSettings, get_settings
from love_cli.core.client import (
    ConfigurationError,
    LoveClient,
    LoveError,
    create_love_client,
    create_user_friendly_message,
)
from love_cli.utils.logging_setup import setup_logging

# Create the main Typer application
app = typer.Typer(
    name="love",
    help="Love CLI - send love to your coworkers from the command line",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich console for output
console = Console()

EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold magenta]Love CLI[/bold magenta] version [green]{VERSION}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Load this .env file instead of searching for one",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Love CLI - send love to your coworkers from the command line.

    Configure it with LOVE_API_KEY, LOVE_BASE_URL and LOVE_SENDER, either
    in the environment or in a .env file.
    """
    try:
        EnvFileLoader().load_env_file(env_file)
    except FileNotFoundError as e:
        _fail(ConfigurationError(str(e)))
    settings = _load_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)


def _load_settings() -> LoveSettings:
    try:
        return get_settings()
    except ValidationError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_CONFIG_ERROR)


def _fail(error: LoveError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(create_user_friendly_message(error))}")
    if isinstance(error, ConfigurationError):
        raise typer.Exit(EXIT_CONFIG_ERROR)
    raise typer.Exit(EXIT_API_ERROR)


def _require(settings: LoveSettings, field: str) -> str:
    value = getattr(settings, field)
    if not value:
        _fail(ConfigurationError(f"No {field.replace('_', ' ')} configured", config_field=field))
    return value


def _create_client(settings: LoveSettings) -> LoveClient:
    return create_love_client(
        _require(settings, "api_key"),
        _require(settings, "base_url"),
        timeout=settings.timeout,
    )


@app.command("send")
def send_command(
    recipient: str = typer.Argument(..., help="Recipient username, or several separated by commas"),
    message: List[str] = typer.Argument(..., help="Message to send"),
    sender: Optional[str] = typer.Option(None, "--sender", "-s", help="Send as this user instead of LOVE_SENDER"),
) -> None:
    """Send love to one or more users."""
    settings = _load_settings()
    sender = sender or _require(settings, "sender")
    text = " ".join(message)

    with _create_client(settings) as client:
        try:
            client.send_love(sender, recipient, text)
        except LoveError as e:
            _fail(e)

    console.print(f"[green]Love sent to {escape(recipient)}![/green]")


@app.command("history")
def history_command(
    sender: Optional[str] = typer.Option(None, "--sender", "-s", help="Only love sent by this user"),
    recipient: Optional[str] = typer.Option(None, "--recipient", "-r", help="Only love sent to this user"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=0, help="Maximum number of loves (0 for no limit)"
    ),
) -> None:
    """Show love sent by and/or to a user."""
    settings = _load_settings()
    if limit is None:
        limit = settings.default_limit

    with _create_client(settings) as client:
        try:
            loves = client.get_love(sender or "", recipient or "", limit)
        except LoveError as e:
            _fail(e)

    if not loves:
        console.print("[dim]No love found[/dim]")
        return

    table = Table(title="Love", show_header=True, header_style="bold magenta")
    table.add_column("Sent", style="dim", no_wrap=True)
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Message", style="green")

    for love in loves:
        table.add_row(
            love.timestamp.strftime("%Y-%m-%d %H:%M"),
            escape(love.sender),
            escape(love.recipient),
            escape(love.message),
        )

    console.print(table)


@app.command("autocomplete")
def autocomplete_command(
    term: str = typer.Argument("", help="Part of a username, first or last name"),
) -> None:
    """Look up usernames matching a search term."""
    settings = _load_settings()

    with _create_client(settings) as client:
        try:
            suggestions = client.autocomplete(term)
        except LoveError as e:
            _fail(e)

    if not suggestions:
        console.print(f"[dim]No users matching '{escape(term)}'[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Username", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")

    for suggestion in suggestions:
        table.add_row(escape(suggestion.username), escape(suggestion.display))

    console.print(table)


@app.command("config")
def config_command(
    show: bool = typer.Option(False, "--show", "-s", help="Show current configuration"),
    init: bool = typer.Option(False, "--init", help="Create an example .love/.env file"),
) -> None:
    """Show or initialize Love CLI configuration."""
    if init:
        _init_env_file()
        return

    if show:
        _show_current_config(_load_settings())
        return

    # Default: show help
    console.print("[yellow]Use one of the following options:[/yellow]")
    console.print("  --show         Show current configuration")
    console.print("  --init         Create an example .love/.env file")


def _show_current_config(settings: LoveSettings) -> None:
    """Show current configuration values."""
    table = Table(title="Current Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in settings.to_dict().items():
        table.add_row(key, "Not set" if value is None else escape(str(value)))

    console.print(table)

    if not settings.is_configured:
        console.print("[yellow]LOVE_API_KEY and LOVE_BASE_URL must be set to talk to a Love instance.[/yellow]")


def _init_env_file() -> None:
    """Create an example .env file in the working directory."""
    try:
        path = EnvFileLoader().create_example_env_file()
    except FileExistsError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
        return

    console.print(f"[green]✓[/green] Created example .env file: {escape(str(path))}")
    console.print("[dim]Edit it to set LOVE_API_KEY, LOVE_BASE_URL and LOVE_SENDER[/dim]")


def main() -> None:
    """Run the Love CLI."""
    app()
