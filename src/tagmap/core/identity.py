"""
Identifier derivation and cell normalization.

Every node id is derived deterministically from a display string, so the
same product or tag always lands on the same node no matter how many rows
mention it.
"""

import re
from typing import Any, List

PRODUCT_PREFIX = "product:"
TAG_PREFIX = "tag:"
DEFAULT_DELIMITER = ","

_WHITESPACE_RUN = re.compile(r"\s+")
_UNSAFE_CHARS = re.compile(r"[^a-z0-9\-_:.]")


def normalize(value: Any) -> str:
    """Coerce a raw cell to a trimmed string; None becomes ''."""
    if value is None:
        return ""
    return str(value).strip()


def id_safe(value: Any) -> str:
    """
    Reduce a string to the id alphabet.

    Lowercases, turns each whitespace run into a single hyphen and drops
    anything outside ``[a-z0-9-_:.]``.

    Examples:
        >>> id_safe("  Earl Grey Supreme ")
        'earl-grey-supreme'
        >>> id_safe("Café & Co.")
        'caf--co.'
    """
    lowered = normalize(value).lower()
    return _UNSAFE_CHARS.sub("", _WHITESPACE_RUN.sub("-", lowered))


def split_tags(cell: Any, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """
    Split a tags cell into trimmed, non-empty labels.

    Order and repetitions are preserved: "green, green" yields two labels.
    """
    return [token.strip() for token in normalize(cell).split(delimiter) if token.strip()]


def product_id(title: str, handle: str = "") -> str:
    """Namespaced product id, preferring the handle over the title."""
    key = handle if normalize(handle) else title
    return f"{PRODUCT_PREFIX}{id_safe(key)}"


def tag_id(label: str) -> str:
    """Namespaced tag id."""
    return f"{TAG_PREFIX}{id_safe(label)}"
