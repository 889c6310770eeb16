# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to run a scrape, query the dataset, and inspect logging

import sys

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from newsmirror.config import get_config
from newsmirror.core.pipeline import ScrapePipeline
from newsmirror.errors import NewsMirrorError
from newsmirror.models import RecordList
from newsmirror.persistence import load_dataset, query_records
from newsmirror.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from newsmirror.utils.rich_tables import (
    create_logging_status_table,
    create_records_table,
    create_run_summary_table,
    print_rich_table,
)

console = Console()


@click.command()
@click.pass_context
async def scrape(ctx):
    """
    🕷️ Scrape the listing pages once and rewrite the dataset.

    Strategy, page count, concurrency and output path come from NEWSMIRROR_* settings.
    """
    await _scrape_async(ctx.obj["json_output"])


async def _scrape_async(json_output: bool):
    """Run one full refresh with optional UI display."""
    config = get_config()

    with with_pipeline_context("scrape", strategy=config.strategy) as logger:
        logger.info("Starting scrape run", base_url=config.base_url, dataset_path=str(config.dataset_path))

        if not json_output:
            console.print(
                Panel.fit(
                    f"📰 [bold cyan]newsmirror[/bold cyan]\nSource: {config.base_url}\nStrategy: {config.strategy}",
                    border_style="magenta",
                )
            )

        pipeline = ScrapePipeline()
        try:
            if json_output:
                summary = await pipeline.run()
            else:
                with console.status("Scraping listing pages..."):
                    summary = await pipeline.run()
        except NewsMirrorError as e:
            logger.error("Scrape failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ {e}[/red]")
            sys.exit(1)
        finally:
            await pipeline.close()

        logger.info("Scrape run complete", record_count=summary.record_count, pages=summary.pages_fetched)

        if not json_output:
            print_rich_table(console, create_run_summary_table(summary))


@click.command()
@click.option("--order-by", type=click.Choice(["points", "comments"]), default="comments", help="Sort field")
@click.option("--order", type=click.Choice(["asc", "desc"]), default="desc", help="Sort direction")
@click.option("--limit", type=click.IntRange(min=0), default=10, help="Number of records to return")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Records to skip before the slice")
@click.option("--dataset", type=click.Path(dir_okay=False), default=None, help="Dataset file (defaults to config)")
@click.pass_context
async def query(ctx, order_by: str, order: str, limit: int, offset: int, dataset: str | None):
    """
    🔎 Show a sorted slice of the persisted dataset.
    """
    path = dataset or get_config().dataset_path
    try:
        records = load_dataset(path)
    except NewsMirrorError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)

    result = query_records(records, order_by=order_by, order=order, limit=limit, offset=offset)

    if ctx.obj["json_output"]:
        click.echo(RecordList.dump_json(result.records, indent=2).decode())
        return

    title = f"Top stories by {order_by} ({order}), {result.count} shown from offset {offset}"
    print_rich_table(console, create_records_table(result.records, title))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📰 newsmirror - front page mirror for a news aggregator

    Scrape paginated story listings into a flat JSON dataset and query it
    sorted by points or comments.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(scrape)
app.add_command(query)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
