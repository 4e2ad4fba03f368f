"""Versioned structured record contract."""

from abc import abstractmethod

from threadline.domain.storage.disposable import Disposable
from threadline.domain.storage.identifier import DataIdentifier
from threadline.domain.value import StructuredMetadata


class StructuredRecord(Disposable):
    """Handle to a storage unit named by (name, type tag).

    Each saved overwrite increments the record's version counter.
    """

    @abstractmethod
    async def save(self) -> None:
        """Persist the handle's payload.

        The first save of a newly created record stores it at version 0;
        later saves after update_payload bump the version.

        Raises:
            StorageWriteError: If the write is rejected
        """
        pass

    @abstractmethod
    async def read_payload(self) -> bytes:
        """Read the current stored payload.

        Raises:
            NotFoundError: If the record is not stored
        """
        pass

    @abstractmethod
    async def update_payload(self, payload: bytes) -> None:
        """Replace the payload held by this handle; call save() to persist."""
        pass

    @abstractmethod
    async def get_metadata(self) -> StructuredMetadata:
        """Read the current stored metadata.

        Raises:
            NotFoundError: If the record is not stored
        """
        pass

    @abstractmethod
    async def to_identifier(self) -> DataIdentifier:
        """Return a fresh identifier handle owned by the caller."""
        pass
