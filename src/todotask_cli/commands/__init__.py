"""Command modules for TodoTask CLI."""
