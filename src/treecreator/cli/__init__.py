"""Command-line interface for treecreator."""
