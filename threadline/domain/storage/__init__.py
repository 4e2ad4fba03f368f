"""Storage substrate contract.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from threadline.domain.storage.appendable import AppendableList
from threadline.domain.storage.client import StorageClient
from threadline.domain.storage.disposable import Disposable
from threadline.domain.storage.identifier import DataIdentifier
from threadline.domain.storage.structured import StructuredRecord

__all__ = [
    "AppendableList",
    "DataIdentifier",
    "Disposable",
    "StorageClient",
    "StructuredRecord",
]
