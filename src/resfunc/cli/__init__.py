"""Command-line interface for resfunc."""
