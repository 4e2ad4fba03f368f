"""Reply list adapter.

A thin sequencing layer over an append-only list of data identifiers. No
buffering and no caching: every call reaches the storage substrate, so
length() can change between calls as other writers append.
"""

from typing import Self

from threadline.domain.error import IndexOutOfRangeError
from threadline.domain.storage import (
    AppendableList,
    DataIdentifier,
    Disposable,
    StorageClient,
)
from threadline.domain.value import SerializedId


class ReplyList(Disposable):
    """Ordered replies of one comment. Owns its list handle."""

    def __init__(self, handle: AppendableList) -> None:
        self._handle = handle

    @classmethod
    async def create(cls, storage: StorageClient, seed: str) -> Self:
        """Create and save a new, empty reply list.

        Args:
            storage: Storage client
            seed: Name of the new list

        Raises:
            StorageWriteError: If the list cannot be saved
        """
        handle = await storage.create_appendable(seed)
        try:
            await handle.save()
        except Exception:
            await handle.dispose()
            raise
        return cls(handle)

    @classmethod
    async def from_identifier(
        cls, storage: StorageClient, identifier: DataIdentifier
    ) -> Self:
        """Resolve an existing reply list. The caller keeps ``identifier``."""
        return cls(await storage.appendable_from_identifier(identifier))

    async def append(self, identifier: DataIdentifier) -> None:
        await self._handle.append(identifier)

    async def length(self) -> int:
        return (await self._handle.get_metadata()).length

    async def at(self, index: int) -> DataIdentifier:
        """Return a fresh handle to the identifier stored at ``index``.

        Raises:
            IndexOutOfRangeError: If index is not in [0, length)
        """
        length = await self.length()
        if index < 0 or index >= length:
            raise IndexOutOfRangeError(index, length)
        return await self._handle.at(index)

    async def to_identifier(self) -> DataIdentifier:
        return await self._handle.to_identifier()

    async def serialize(self) -> SerializedId:
        async with await self.to_identifier() as identifier:
            return await identifier.serialize()

    async def dispose(self) -> None:
        await self._handle.dispose()
