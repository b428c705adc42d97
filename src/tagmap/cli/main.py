"""
tagmap CLI - Main entry point.

    tagmap [INPUT=products.csv] [OUTPUT=graph.html]

Reads a Shopify-style product export, builds the product/tag graph and
writes a self-contained interactive HTML page.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import DEFAULT_INPUT, DEFAULT_OUTPUT, load_config
from ..core.columns import resolve_columns
from ..core.errors import TagmapError
from ..core.graph import build_graph
from ..io.reader import read_rows
from ..render.html import open_in_browser, write_html
from .utils import (
    configure_logging,
    echo_empty_graph_warning,
    echo_error,
    echo_info,
    echo_summary,
    print_top_tags,
)

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(package_name="tagmap")
@click.argument(
    "input_path",
    default=DEFAULT_INPUT,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("output_path", default=DEFAULT_OUTPUT, type=click.Path(dir_okay=False, path_type=Path))
@click.option("-d", "--delimiter", default=None, help="Tag separator inside the Tags cell (default: ',')")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file (default: ./tagmap.yaml if present)",
)
@click.option("--top", default=0, type=click.IntRange(min=0), help="Show the N most connected tags")
@click.option("--open", "open_browser", is_flag=True, help="Open the result in the default browser")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(
    input_path: Path,
    output_path: Path,
    delimiter: Optional[str],
    config_path: Optional[Path],
    top: int,
    open_browser: bool,
    verbose: bool,
):
    """
    Build an interactive Product-Tag graph from a product CSV export.

    \b
    Examples:
      tagmap
      tagmap "products_export_1.csv" graph.html
      tagmap export.csv tags.html --delimiter ";" --top 20
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path).with_overrides(tag_delimiter=delimiter)
        records = read_rows(input_path)
        columns = resolve_columns(records)
    except TagmapError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.info(f"Building graph from {len(records)} records in {input_path}")
    graph = build_graph(
        records,
        columns,
        delimiter=config.tag_delimiter,
        product_shape=config.product_shape,
        tag_shape=config.tag_shape,
    )

    write_html(graph, output_path, config)
    echo_summary(graph, str(output_path))

    if graph.product_count == 0:
        echo_empty_graph_warning()

    if top:
        print_top_tags(graph, top)

    if open_browser:
        open_in_browser(output_path)
    else:
        echo_info("Open the HTML file in your browser to explore the mindmap.")


if __name__ == "__main__":
    main()
