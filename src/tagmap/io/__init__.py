"""Input readers."""

from .reader import parse_rows, read_rows

__all__ = ["parse_rows", "read_rows"]
