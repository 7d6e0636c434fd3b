"""Command implementations for the slngraph CLI."""
