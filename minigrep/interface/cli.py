# minigrep/interface/cli.py

from typing import List

from rich.console import Console
from rich.markup import escape

from minigrep.domain.models import LineMatch


error_console = Console(stderr=True)


def display_matches(matches: List[LineMatch]) -> None:
    # Plain print: rich would expand tabs and drop control characters
    for match in matches:
        print(match.text)


def display_error(message: str) -> None:
    error_console.print(f"[bold red]✗[/bold red] {escape(message)}", highlight=False)


def display_usage(usage_line: str) -> None:
    error_console.print(f"[dim]Usage:[/dim] {escape(usage_line)}", highlight=False)
