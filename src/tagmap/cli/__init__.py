"""Command line interface for tagmap."""
