"""Rich UI components for the CLI.

Kept apart from the commands so formatting does not leak into command logic.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import StageReceipt


def print_banner(console: Console) -> None:
    title = Text("binstage", style="bold cyan")
    subtitle = Text("cargo build • stage • done", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def confirmation_line(receipt: StageReceipt) -> Text:
    """Single line naming the staged artifact path."""

    return Text.assemble(
        ("Copied ", "green"),
        (receipt.binary_name, "bold"),
        (" to ", "green"),
        (receipt.destination, "magenta"),
    )


def build_doctor_table() -> Table:
    table = Table(title="binstage doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
