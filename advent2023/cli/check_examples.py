#!/usr/bin/env python3
"""Run every day's embedded examples and compare with the expected answers."""

from __future__ import annotations
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.env import load_settings
from ..core.logs import setup_logging
from ..days import day05, get_days
from ..harness import check_examples

app = typer.Typer()
console = Console()


def format_answer(actual: str | None, expected: str) -> str:
    """Color an answer by whether it matches."""
    if actual is None:
        return "[red]-[/]"
    if actual == expected:
        return f"[green]{actual}[/]"
    return f"[red]{actual}[/] (expected {expected})"


@app.command()
def main(
    log_level: str = typer.Option(None, help="Override ADVENT_LOG_LEVEL"),
):
    """
    Self-test: every registered day must reproduce its example answers.

    Example:
        python -m advent2023.cli.check_examples
    """
    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)
    day05.select_search(settings.almanac_search)
    setup_logging(log_level or settings.log_level)

    console.rule("[bold cyan]Example Check")
    checks = check_examples(get_days())

    table = Table(show_lines=True)
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Part 1", justify="right")
    table.add_column("Part 2", justify="right")
    table.add_column("Status")

    for check in checks:
        actual = check.actual or (None, None)
        status = "[green]pass[/]" if check.passed else f"[red]fail[/] {escape(check.error or '')}"
        table.add_row(
            str(check.day_num),
            format_answer(actual[0], check.expected[0]),
            format_answer(actual[1], check.expected[1]),
            status,
        )
    console.print(table)

    failed = [c for c in checks if not c.passed]
    if failed:
        console.print(f"[red]{len(failed)} of {len(checks)} days failed[/]")
        raise typer.Exit(1)
    console.print(f"[green]All {len(checks)} days match their examples[/]")


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
