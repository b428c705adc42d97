"""
Exception hierarchy for tagmap.

Only schema and configuration problems are modelled here. I/O failures
(missing or unreadable files) propagate as the builtin OSError family.
"""

from typing import List, Sequence


class TagmapError(Exception):
    """Base class for errors reported to the operator."""


class MissingColumnError(TagmapError):
    """
    Raised when a required column cannot be found in the CSV headers.

    Attributes:
        missing: Canonical role names that could not be resolved ("title", "tags").
        headers: The header strings that were actually present.
    """

    def __init__(self, missing: Sequence[str], headers: Sequence[str]):
        self.missing: List[str] = list(missing)
        self.headers: List[str] = list(headers)
        seen = ", ".join(self.headers) if self.headers else "(none)"
        super().__init__(
            "Could not find 'Title' and/or 'Tags' columns in CSV headers. "
            f"Missing: {', '.join(self.missing)}. Found: {seen}"
        )


class ConfigError(TagmapError):
    """Raised when a configuration file cannot be loaded or is invalid."""
