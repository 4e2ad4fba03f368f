"""Append-only ordered list contract."""

from abc import abstractmethod

from threadline.domain.storage.disposable import Disposable
from threadline.domain.storage.identifier import DataIdentifier
from threadline.domain.value import AppendableMetadata


class AppendableList(Disposable):
    """Handle to an append-only list of data identifiers.

    Length equals the number of appends that returned successfully.
    """

    @abstractmethod
    async def save(self) -> None:
        """Persist a newly created (empty) list.

        Raises:
            StorageWriteError: If the write is rejected
        """
        pass

    @abstractmethod
    async def append(self, identifier: DataIdentifier) -> None:
        """Append an identifier. The caller keeps ownership of it.

        Raises:
            StorageWriteError: If the append is rejected
        """
        pass

    @abstractmethod
    async def get_metadata(self) -> AppendableMetadata:
        """Read the current stored metadata."""
        pass

    @abstractmethod
    async def at(self, index: int) -> DataIdentifier:
        """Return a fresh handle to the identifier stored at ``index``.

        Raises:
            IndexOutOfRangeError: If index is not in [0, length)
        """
        pass

    @abstractmethod
    async def to_identifier(self) -> DataIdentifier:
        """Return a fresh identifier handle owned by the caller."""
        pass
