"""
Column Resolver.

Shopify exports usually carry ``Title``, ``Handle`` and ``Tags`` headers,
but the casing drifts between tools. Headers are matched case-insensitively
against the first record.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from .errors import MissingColumnError
from .types import ColumnMap

logger = logging.getLogger(__name__)

REQUIRED_ROLES = ("title", "tags")


def _find_header(headers: Sequence[str], role: str) -> Optional[str]:
    return next((h for h in headers if h.lower() == role), None)


def resolve_columns(records: Sequence[Mapping[Any, Any]]) -> ColumnMap:
    """
    Locate the title, handle and tags columns.

    Args:
        records: Parsed CSV records. Only the keys of the first one are inspected.

    Returns:
        ColumnMap with the actual header strings.

    Raises:
        MissingColumnError: If "title" or "tags" is absent, or there are no records.
    """
    first = records[0] if records else {}
    # csv.DictReader files surplus cells under a None key
    headers: List[str] = [k for k in first.keys() if isinstance(k, str)]

    found = {role: _find_header(headers, role) for role in ("title", "handle", "tags")}
    missing = [role for role in REQUIRED_ROLES if found[role] is None]
    if missing:
        raise MissingColumnError(missing, headers)

    columns = ColumnMap(title=found["title"], tags=found["tags"], handle=found["handle"])
    logger.debug(f"Resolved columns: {columns.model_dump()}")
    if columns.handle is None:
        logger.debug("No Handle column; product ids derive from titles")
    return columns
