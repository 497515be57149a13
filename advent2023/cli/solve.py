from __future__ import annotations

from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape

from ..core.env import load_env, load_settings
from ..core.logs import setup_logging
from ..days import day05, get_day, get_days
from ..harness import DayResult, run_days, write_results

app = typer.Typer()
console = Console()


def print_day(result: DayResult) -> None:
    console.print(f"[bold]Day {result.day_num}:[/] [italic]{result.title}[/]")
    if not result.ok:
        console.print(f"[red]{escape(result.error)}[/]")
    else:
        part1, part2 = result.rendered()
        console.print(f"Part 1: {part1}")
        console.print(f"Part 2: {part2}")
    console.print(f"[dim]{result.elapsed * 1000:.1f} ms[/]")
    console.print()


@app.command()
def main(
    puzzle: Optional[int] = typer.Argument(None, help="Day to run (defaults to the latest day)"),
    all_days: bool = typer.Option(False, "--all", help="Run every day in order"),
    parallel: bool = typer.Option(False, "--parallel", help="Run every day on its own thread"),
    example: bool = typer.Option(False, "--example", help="Use the embedded examples"),
    inputs_dir: str = typer.Option(None, help="Override ADVENT_INPUTS_DIR"),
    out_path: str = typer.Option(None, "--out", help="Append results as JSON lines"),
    log_level: str = typer.Option(None, help="Override ADVENT_LOG_LEVEL"),
    debug: bool = False,
):
    """
    Solve Advent of Code 2023 puzzles.

    Inputs are read from <inputs-dir>/dayNN.txt (or ../<inputs-dir>/dayNN.txt).

    Example:
        python -m advent2023.cli.solve 5
        python -m advent2023.cli.solve --all --example
    """
    seen = load_env()
    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)
    day05.select_search(settings.almanac_search)
    setup_logging("DEBUG" if debug else (log_level or settings.log_level))
    if debug:
        rprint({"env_keys_detected": seen})
        rprint({"settings": settings})

    console.rule("[bold blue]Advent Of Code 2023")

    if all_days or parallel:
        days = get_days()
    else:
        try:
            day_num, day = get_day(puzzle)
        except KeyError as e:
            console.print(f"[red]{e.args[0]}[/]")
            raise typer.Exit(1)
        days = {day_num: day}

    results = run_days(
        days,
        example=example,
        inputs_dir=inputs_dir or settings.inputs_dir,
        parallel=parallel,
    )
    for result in results:
        print_day(result)

    if out_path:
        write_results(results, out_path)
        console.print(f"✓ Results appended to: {out_path}")

    failures = [r for r in results if not r.ok]
    if failures:
        console.print(f"[red]{len(failures)} of {len(results)} days failed[/]")
        raise typer.Exit(1)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
