"""Adapters module - Key-value repository implementations.

This package contains concrete implementations (adapters) for the
repository interface:
- json_file: one JSON object on disk (default)
- sqlite: a SQLite ``kv_store`` table
- memory: in-process dict with an optional quota
"""

from .json_file import JsonFileKeyValueRepository
from .memory import InMemoryKeyValueRepository
from .sqlite import SqliteKeyValueRepository

__all__ = [
    "JsonFileKeyValueRepository",
    "SqliteKeyValueRepository",
    "InMemoryKeyValueRepository",
]
