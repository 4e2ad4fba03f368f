"""Storage client contract.

The network client itself (retrieval, persistence, sessions) lives outside
this package. Anything that implements StorageClient can back the comment
model; threadline.persistence.inmemory ships an in-process implementation.
"""

from abc import ABC, abstractmethod

from threadline.domain.storage.appendable import AppendableList
from threadline.domain.storage.identifier import DataIdentifier
from threadline.domain.storage.structured import StructuredRecord
from threadline.domain.value import TypeTag


class StorageClient(ABC):
    """Factory for storage handles.

    Every handle returned is owned by the caller.
    """

    @abstractmethod
    async def deserialize_identifier(self, data: bytes) -> DataIdentifier:
        """Turn serialized identifier bytes into a live handle.

        Raises:
            MalformedPayloadError: If the bytes are not a valid identifier
        """
        pass

    @abstractmethod
    async def put_immutable(self, content: bytes) -> DataIdentifier:
        """Store an immutable blob and return its content identifier."""
        pass

    @abstractmethod
    async def get_immutable(self, identifier: DataIdentifier) -> bytes:
        """Read an immutable blob.

        Raises:
            NotFoundError: If the identifier does not resolve to a blob
        """
        pass

    @abstractmethod
    async def create_structured(
        self, name: str, type_tag: TypeTag, payload: bytes
    ) -> StructuredRecord:
        """Create an unsaved structured record."""
        pass

    @abstractmethod
    async def structured_from_identifier(
        self, identifier: DataIdentifier
    ) -> StructuredRecord:
        """Resolve a stored structured record.

        The caller keeps ownership of ``identifier``.

        Raises:
            NotFoundError: If the identifier does not resolve
        """
        pass

    @abstractmethod
    async def create_appendable(self, seed: str) -> AppendableList:
        """Create an unsaved, empty append-only list named by ``seed``."""
        pass

    @abstractmethod
    async def appendable_from_identifier(
        self, identifier: DataIdentifier
    ) -> AppendableList:
        """Resolve a stored append-only list.

        The caller keeps ownership of ``identifier``.

        Raises:
            NotFoundError: If the identifier does not resolve
        """
        pass
