from __future__ import annotations
import typer
from rich.console import Console
from rich.table import Table

from ..days import get_days

app = typer.Typer()
console = Console()


@app.command()
def main():
    """List the registered puzzles."""
    table = Table(title="Registered Days", show_lines=True)
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Title")
    table.add_column("Examples")
    table.add_column("Expected", justify="right")

    for day_num, day in get_days().items():
        examples = day.get_examples()
        kind = "shared" if examples.same else "one per part"
        table.add_row(str(day_num), day.get_title(), kind, " / ".join(day.get_expected()))

    console.print(table)


if __name__ == "__main__":
    app()
