"""holidayapi command-line tool (Typer + Rich)."""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any, Optional

import typer
from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as SettingsError
from rich.console import Console

from holidayapi.cli import doctor
from holidayapi.cli.ui_components import (
    build_countries_table,
    build_holidays_table,
    build_languages_table,
    build_workday_panel,
    print_banner,
)
from holidayapi.client import HolidayAPI
from holidayapi.core.errors import HolidayAPIError, InvalidCredentialError

app = typer.Typer(no_args_is_help=True, help="Query the Holiday API from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("holidayapi")


def _client() -> HolidayAPI:
    try:
        return HolidayAPI.from_settings()
    except InvalidCredentialError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        _err_console.print("Set HOLIDAYAPI_API_KEY or run `holidayapi doctor configure`.")
        raise typer.Exit(code=2) from exc
    except (HolidayAPIError, SettingsError) as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc


def _execute(call: Callable[[HolidayAPI], Awaitable[Any]]) -> Any:
    api = _client()
    try:
        return asyncio.run(call(api))
    except HolidayAPIError as exc:
        _err_console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _dump(items: Any) -> None:
    if isinstance(items, list):
        payload = [i.model_dump(mode="json", by_alias=True, exclude_none=True) for i in items]
    elif isinstance(items, BaseModel):
        payload = items.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = items
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("countries")
def countries_cmd(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by name substring."),
    country: Optional[str] = typer.Option(None, "--country", "-c", help="Return one country by code."),
    public: Optional[bool] = typer.Option(None, "--public/--all", help="Only countries with public holidays."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List supported countries."""

    async def _run(api: HolidayAPI):
        request = api.countries()
        if search is not None:
            request.search(search)
        if country is not None:
            request.country(country)
        if public is not None:
            request.public(public)
        return await request.get()

    result = _execute(_run)
    if as_json:
        _dump(result)
        return
    print_banner(_console)
    _console.print(build_countries_table(result))


@app.command("languages")
def languages_cmd(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by name substring."),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Return one language by code."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List supported languages."""

    async def _run(api: HolidayAPI):
        request = api.languages()
        if search is not None:
            request.search(search)
        if language is not None:
            request.language(language)
        return await request.get()

    result = _execute(_run)
    if as_json:
        _dump(result)
        return
    print_banner(_console)
    _console.print(build_languages_table(result))


@app.command("holidays")
def holidays_cmd(
    country: str = typer.Argument(..., help="Country or subdivision code (e.g. US, US-CA)."),
    year: int = typer.Argument(..., help="Year, 1970 or later."),
    month: Optional[int] = typer.Option(None, "--month", "-m"),
    day: Optional[int] = typer.Option(None, "--day", "-d"),
    language: Optional[str] = typer.Option(None, "--language", "-l"),
    search: Optional[str] = typer.Option(None, "--search", "-s"),
    public: Optional[bool] = typer.Option(None, "--public/--all"),
    subdivisions: bool = typer.Option(False, "--subdivisions", help="Include subdivision holidays."),
    previous: bool = typer.Option(False, "--previous", help="Holidays before month/day."),
    upcoming: bool = typer.Option(False, "--upcoming", help="Holidays after month/day."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List holidays for COUNTRY in YEAR."""

    async def _run(api: HolidayAPI):
        request = api.holidays(country, year)
        if month is not None:
            request.month(month)
        if day is not None:
            request.day(day)
        if language is not None:
            request.language(language)
        if search is not None:
            request.search(search)
        if public is not None:
            request.public(public)
        if subdivisions:
            request.subdivisions(True)
        if previous:
            request.previous(True)
        if upcoming:
            request.upcoming(True)
        return await request.get()

    result = _execute(_run)
    if as_json:
        _dump(result)
        return
    print_banner(_console)
    _console.print(build_holidays_table(result))


@app.command("workday")
def workday_cmd(
    country: str = typer.Argument(...),
    start: str = typer.Argument(..., metavar="YYYY-MM-DD"),
    days: int = typer.Argument(..., help="Working days to advance (negative goes back)."),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    """Find the working day DAYS working days after START."""

    result = _execute(lambda api: api.workday(country, start, days).get())
    if as_json:
        _dump(result)
        return
    _console.print(build_workday_panel(result))


@app.command("workdays")
def workdays_cmd(
    country: str = typer.Argument(...),
    start: str = typer.Argument(..., metavar="YYYY-MM-DD"),
    end: str = typer.Argument(..., metavar="YYYY-MM-DD"),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    """Count working days between START and END."""

    result = _execute(lambda api: api.workdays(country, start, end).get())
    if as_json:
        _dump({"workdays": result})
        return
    _console.print(f"[bold]{result}[/bold] working days between {start} and {end}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
