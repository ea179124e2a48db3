"""Service layer for TodoTask CLI."""
