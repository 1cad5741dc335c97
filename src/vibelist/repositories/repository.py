"""Repository abstraction layer for VibeList.

Defines the key-value storage port the persistent store writes through,
following the hexagonal architecture (Ports & Adapters) pattern. The
contract mirrors browser ``localStorage``: string values under string keys,
each write fully replacing the previous value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueRepository(ABC):
    """Abstract base class for durable key-value storage.

    Adapters translate their own failures into the VibeList exception
    hierarchy so the store can absorb them uniformly.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Namespace key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageReadCorruptError: If the backing medium cannot be read
        """
        raise NotImplementedError(
            "KeyValueRepository.get_item() must be implemented by adapter"
        )

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Namespace key
            value: Serialized payload

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageWriteFailure: If the write is rejected
        """
        raise NotImplementedError(
            "KeyValueRepository.set_item() must be implemented by adapter"
        )

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageWriteFailure: If the removal is rejected
        """
        raise NotImplementedError(
            "KeyValueRepository.remove_item() must be implemented by adapter"
        )

