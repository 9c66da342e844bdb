"""Command-line interface for PERSONA."""
