"""
CLI Utilities - Shared helpers for console output.

User-facing messages go through these helpers; diagnostics go through
``logging``.
"""

import logging
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from ..core.graph import ProductTagGraph

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross to stderr.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    """WARNING by default, DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def echo_summary(graph: "ProductTagGraph", output: str) -> None:
    """Print the post-run counts."""
    echo_success(f"Wrote {output}")
    click.echo(f"• Products: {graph.product_count}")
    click.echo(f"• Tags: {graph.tag_count}")
    click.echo(f"• Edges: {graph.edge_count}")
    if graph.skipped_rows:
        echo_info(f"Skipped {graph.skipped_rows} rows with an empty title")


def echo_empty_graph_warning() -> None:
    """
    Explain the usual causes of a graph with no products.

    The page is still written; it just has nothing to show.
    """
    click.echo()
    echo_warning("No products found!")
    click.echo(click.style("   Every row had an empty Title.", fg="yellow"))
    click.echo()
    click.echo("   Troubleshooting:")
    click.echo("   1. Is this a product export (one row per product or variant)?")
    click.echo("   2. Is the file comma-separated with a header row?")
    click.echo()


def print_top_tags(graph: "ProductTagGraph", limit: int) -> None:
    """Render the most connected tags as a rich table."""
    table = Table(title=f"Top {limit} tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Id", style="dim")
    table.add_column("Edges", justify="right")

    for node, degree in graph.tag_degrees()[:limit]:
        table.add_row(escape(node.label), escape(node.id), str(degree))

    Console().print(table)
