"""
Document Emitter.

Renders the graph into a single HTML page. The page skeleton, stylesheet
and viewer script are static package assets; the only per-run content is
the embedded JSON payload and a handful of header values.

The payload sits in a ``<script type="application/json">`` block and is
read with ``JSON.parse``, so it is never evaluated as code.
"""

import html
import json
import logging
import re
import webbrowser
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Union

from ..config import TagmapConfig
from ..core.graph import ProductTagGraph

logger = logging.getLogger(__name__)

TEMPLATE_FILE = "template.html"
ASSET_FILES = (TEMPLATE_FILE, "viewer.css", "viewer.js")
_PLACEHOLDER = re.compile(r"__([A-Z_]+)__")


def _read_asset(name: str) -> str:
    return resources.files("tagmap.render").joinpath("assets").joinpath(name).read_text(encoding="utf-8")


def load_assets() -> Dict[str, str]:
    """Read every static page asset, keyed by file name."""
    return {name: _read_asset(name) for name in ASSET_FILES}


def _escape_script_value(value: str) -> str:
    """
    Make a JSON string safe for an inline script block.

    ``</`` would let a label close the surrounding ``<script>`` tag early and
    ``<!--`` would switch the HTML parser into its escaped script state;
    the line/paragraph separators are escaped for older JS parsers.
    """
    return (
        value.replace("</", "<\\/")
        .replace("<!--", "<\\u0021--")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _fill(template: str, values: Dict[str, str]) -> str:
    """
    Substitute ``__NAME__`` placeholders in one pass.

    Substituted text is never rescanned, so a CSV label that happens to
    contain ``__GRAPH_DATA__`` stays inert.
    """
    def _sub(match: "re.Match[str]") -> str:
        key = match.group(1)
        return values[key] if key in values else match.group(0)

    return _PLACEHOLDER.sub(_sub, template)


def graph_payload(graph: ProductTagGraph, config: TagmapConfig) -> str:
    """Serialize graph data plus viewer options as escaped JSON."""
    data = graph.to_dict()
    data["options"] = {"batchSize": config.batch_size}
    return _escape_script_value(json.dumps(data, ensure_ascii=False, separators=(",", ":")))


def generate_html(graph: ProductTagGraph, config: Optional[TagmapConfig] = None) -> str:
    """
    Generate the HTML content for the product/tag graph.
    """
    config = config or TagmapConfig()
    assets = load_assets()
    values = {
        "PAGE_TITLE": html.escape(config.page_title),
        "HEADING": html.escape(config.heading),
        "PRODUCT_COUNT": str(graph.product_count),
        "TAG_COUNT": str(graph.tag_count),
        "EDGE_COUNT": str(graph.edge_count),
        "VIS_NETWORK_URL": html.escape(config.vis_network_url, quote=True),
        "VIEWER_CSS": assets["viewer.css"],
        "VIEWER_JS": assets["viewer.js"],
        "GRAPH_DATA": graph_payload(graph, config),
    }
    return _fill(assets[TEMPLATE_FILE], values)


def write_html(
    graph: ProductTagGraph,
    output_path: Union[str, Path],
    config: Optional[TagmapConfig] = None,
) -> Path:
    """Render the page and write it to ``output_path``. Write errors propagate."""
    out_file = Path(output_path)
    content = generate_html(graph, config)
    out_file.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {len(content)} characters to {out_file}")
    return out_file


def open_in_browser(path: Union[str, Path]) -> str:
    """Open a written page in the default browser and return its URI."""
    uri = Path(path).resolve().as_uri()
    webbrowser.open(uri)
    return uri
