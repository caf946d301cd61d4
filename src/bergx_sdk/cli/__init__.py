"""Command-line interface for the Bergx SDK."""
