"""Command line interface for nativepack."""
