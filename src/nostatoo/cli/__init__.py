"""Command line interface for nostatoo."""
