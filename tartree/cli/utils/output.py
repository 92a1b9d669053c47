# tartree/cli/utils/output.py
"""Output formatting utilities"""

from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_WARNING
from ...models import OperationStats
from ...utils.file_utils import format_size

console = Console()


def format_stats(stats: OperationStats, title: str) -> None:
    """Format and display operation statistics"""
    lines = [
        f"[bold]Source:[/bold] {stats.source}",
        f"[bold]Destination:[/bold] {stats.destination}",
        f"[bold]Files:[/bold] {stats.processed_files}",
    ]

    if stats.processed_dirs:
        lines.append(f"[bold]Directories:[/bold] {stats.processed_dirs}")

    lines.append(f"[bold]Data:[/bold] {format_size(stats.processed_size)}")

    if stats.result_size:
        lines.append(f"[bold]Output size:[/bold] {format_size(stats.result_size)}")

    lines.append(f"[bold]Duration:[/bold] {stats.duration:.2f}s")

    panel = Panel(
        "\n".join(lines),
        title=title,
        border_style="green"
    )
    console.print(panel)

    if stats.skipped:
        print_warning(f"Skipped {len(stats.skipped)} item(s)")
        for path in stats.skipped:
            console.print(f"  • {path}")


def format_contents(contents: List[Tuple[str, int, bool]], title: Optional[str] = None) -> None:
    """Format and display archive contents"""
    if not contents:
        console.print("[yellow]Archive is empty[/yellow]")
        return

    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Name", style="cyan")
    table.add_column("Size", style="green")
    table.add_column("Type", style="yellow")

    for name, size, is_dir in contents:
        table.add_row(
            name,
            "-" if is_dir else format_size(size),
            "Directory" if is_dir else "File"
        )

    console.print(table)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]{EMOJI_WARNING} Warning:[/yellow] {message}")
