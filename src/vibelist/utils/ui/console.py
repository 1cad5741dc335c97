"""Shared rich console for VibeList output."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Console that every command and formatter prints through.

    Highlighting is off so digits and punctuation inside task text keep
    the plain style.
    """
    return Console(highlight=False)


def set_color(enabled: bool) -> None:
    """Turn ANSI colour on or off for the shared console."""
    get_console().no_color = not enabled
