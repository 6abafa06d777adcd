"""Command line interface for nipsearch."""
