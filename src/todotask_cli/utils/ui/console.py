"""Console utilities for TodoTask CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """The shared Rich console every command and formatter prints through."""
    return Console()


def configure_console(color: bool) -> Console:
    """Apply the ``output.color`` setting to the shared console."""
    console = get_console()
    console.no_color = not color
    return console
