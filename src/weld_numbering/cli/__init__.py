"""Command-line interface for weld-numbering."""
