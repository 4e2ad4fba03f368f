"""Data identifier handle contract."""

from abc import abstractmethod

from threadline.domain.storage.disposable import Disposable
from threadline.domain.value import SerializedId


class DataIdentifier(Disposable):
    """Handle to an opaque, serializable reference to a unit of storage.

    Two handles refer to the same storage unit iff their serialized bytes
    are equal; handle identity carries no meaning.
    """

    @abstractmethod
    async def serialize(self) -> SerializedId:
        """Serialize the identifier to bytes.

        The bytes can be turned back into a handle with
        StorageClient.deserialize_identifier, in this or another process.
        """
        pass
