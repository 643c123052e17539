"""Command handlers (one per command)."""
