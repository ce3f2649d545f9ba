"""Command-line interface for handle-failure."""
