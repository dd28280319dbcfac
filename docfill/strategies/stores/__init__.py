"""Concrete document store implementations."""

from docfill.strategies.stores.memory import InMemoryDocumentStore
from docfill.strategies.stores.sql import SQLDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "SQLDocumentStore",
]
