"""Command-line interface for cowry."""
