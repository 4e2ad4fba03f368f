"""In-memory storage substrate.

Stands in for the storage network in tests and local runs.
"""

from .client import InMemoryStorageClient
from .handles import (
    InMemoryAppendableList,
    InMemoryDataIdentifier,
    InMemoryStructuredRecord,
)
from .network import InMemoryNetwork, Locator

__all__ = [
    "InMemoryAppendableList",
    "InMemoryDataIdentifier",
    "InMemoryNetwork",
    "InMemoryStorageClient",
    "InMemoryStructuredRecord",
    "Locator",
]
