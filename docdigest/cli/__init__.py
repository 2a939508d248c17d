"""Command-line interface for docdigest."""
