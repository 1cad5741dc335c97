"""Repository interfaces for VibeList.

This package contains the abstract storage port ("Port" in the Hexagonal
Architecture). Implementations (Adapters) are in ``vibelist.adapters``.
"""

from .repository import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
