"""Command line interface for rolling dice patterns."""
