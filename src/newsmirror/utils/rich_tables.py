# ABOUTME: Rich table utilities for scrape summaries, dataset slices and logging status
# ABOUTME: Provides pre-configured table generators for the CLI

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from newsmirror.models import Record, RunSummary


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_records_table(records: list[Record], title: str) -> Table:
    """Create a zebra-striped table of story records."""
    table = Table(
        title=f"[bold cyan]{title}[/bold cyan]",
        box=ROUNDED,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        row_styles=["", "dim"],
        expand=True,
    )

    table.add_column("ID", style="blue", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Points", style="green", justify="right")
    table.add_column("Comments", style="yellow", justify="right")
    table.add_column("Author", style="cyan")
    table.add_column("Time", style="dim")

    for record in records:
        table.add_row(
            str(record.id),
            record.title or "(untitled)",
            str(record.points),
            str(record.comments),
            record.author or "-",
            record.time or "-",
        )

    return table


def create_run_summary_table(summary: RunSummary) -> Table:
    """Create a scrape run completion summary table."""
    summary_data = {
        "🔀 Strategy": summary.strategy,
        "📄 Pages Fetched": str(summary.pages_fetched),
        "📰 Records": f"{summary.record_count:,}",
        "♻️ Duplicates Dropped": str(summary.duplicates_dropped),
        "💾 Dataset": str(summary.output_path),
        "⏱️ Duration": f"{summary.duration_seconds:.2f}s",
    }

    return create_key_value_table(
        title="🔄 Scrape Summary",
        data=summary_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
        box_style=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    # Add log files if they exist
    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
