"""
Tabular Reader.

Thin wrapper around ``csv.DictReader``. The whole file is read up front;
exports are small enough that streaming buys nothing.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

# Shopify "Body (HTML)" cells routinely exceed the csv module's default
# 128 KiB field limit. 2**31 - 1 is the largest value a C long accepts on
# every platform.
MAX_FIELD_SIZE = 2**31 - 1
csv.field_size_limit(MAX_FIELD_SIZE)

CSV_ENCODING = "utf-8"


def parse_rows(text: str) -> List[Dict[Optional[str], str]]:
    """
    Parse CSV text with a header row into ordered records.

    A leading BOM, as written by spreadsheet tools, is dropped so it does
    not stick to the first header. Blank lines are skipped. Short rows get
    None for their missing cells, which the column resolver and graph
    builder treat as empty strings.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    reader = csv.DictReader(io.StringIO(text, newline=""))
    return list(reader)


def read_rows(path: Union[str, Path]) -> List[Dict[Optional[str], str]]:
    """Read and parse a CSV file. OS and decode errors propagate to the caller."""
    csv_path = Path(path)
    records = parse_rows(csv_path.read_text(encoding=CSV_ENCODING))
    logger.debug(f"Read {len(records)} records from {csv_path}")
    return records
