"""Doctor and configure commands for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from holidayapi.adapters.http_client import build_async_client
from holidayapi.client import HolidayAPI
from holidayapi.core.config import ClientSettings, get_user_env_file, write_user_env_vars
from holidayapi.core.errors import HolidayAPIError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_key(settings: ClientSettings) -> tuple[bool, str]:
    """Spend one request on `languages` to confirm the key is accepted."""

    try:
        api = HolidayAPI.from_settings(settings)
        languages = await api.languages().get()
    except HolidayAPIError as exc:
        return False, str(exc)
    return True, f"{len(languages)} languages available"


@app.command()
def run(
    live: bool = typer.Option(False, "--live", help="Also send one authenticated request."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = ClientSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    table = Table(title="holidayapi Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    key_ok = False
    if not settings.api_key:
        table.add_row("API key", "MISSING", "Set HOLIDAYAPI_API_KEY or run `holidayapi doctor configure`")
    else:
        try:
            HolidayAPI.is_valid_key(settings.api_key)
            key_ok = True
            table.add_row("API key", "OK", "UUID shaped")
        except HolidayAPIError as exc:
            table.add_row("API key", "FAIL", str(exc))
    table.add_row("Base URL", "OK", f"{settings.base_url.rstrip('/')}/v{settings.version}/")
    table.add_row("User config", "OK", str(get_user_env_file()))

    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    if live and key_ok:
        ok_key, detail_key = asyncio.run(_check_key(settings))
        table.add_row("Authenticated request", "OK" if ok_key else "FAIL", detail_key)

    _console.print(table)


@app.command(name="configure")
def configure() -> None:
    """Store the API key in the user config .env (no manual editing needed)."""

    api_key = typer.prompt("Holiday API key", hide_input=True, confirmation_prompt=False).strip()
    try:
        HolidayAPI.is_valid_key(api_key)
    except HolidayAPIError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({"HOLIDAYAPI_API_KEY": api_key})
    _console.print(f"[green]Saved[/green] to {env_path}")
