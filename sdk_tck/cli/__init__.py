"""Command-line interface for sdk_tck."""
