"""Rich UI components for the CLI.

Keeps command logic apart from presentation so tables can be reused.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from holidayapi.core.domain.models import Country, Holiday, Language, Workday


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in --json mode)."""

    title = Text("holidayapi", style="bold cyan")
    subtitle = Text("Countries • Languages • Holidays", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_countries_table(countries: list[Country]) -> Table:
    table = Table(title=f"Countries ({len(countries)})")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Languages", style="magenta")
    table.add_column("Subdivisions", style="dim", justify="right")
    for country in countries:
        table.add_row(
            country.code,
            f"{country.flag} {country.name}" if country.flag else country.name,
            ", ".join(country.languages),
            str(len(country.subdivisions)),
        )
    return table


def build_languages_table(languages: list[Language]) -> Table:
    table = Table(title=f"Languages ({len(languages)})")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for language in languages:
        table.add_row(language.code, language.name)
    return table


def build_holidays_table(holidays: list[Holiday]) -> Table:
    table = Table(title=f"Holidays ({len(holidays)})")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Observed", style="dim", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Country", style="magenta")
    table.add_column("Public", style="green")
    for holiday in holidays:
        table.add_row(
            holiday.date,
            holiday.observed,
            holiday.name,
            holiday.country,
            "yes" if holiday.public else "no",
        )
    return table


def build_workday_panel(workday: Workday) -> Panel:
    body = Text()
    body.append(workday.date, style="bold")
    body.append(f"  ({workday.weekday.name})", style="dim")
    return Panel(body, title=Text("Workday", style="bold yellow"), border_style="yellow")
