"""In-memory storage client."""

import logfire

from threadline.domain.error import NotFoundError
from threadline.domain.hashing import content_digest
from threadline.domain.storage import (
    AppendableList,
    DataIdentifier,
    StorageClient,
    StructuredRecord,
)
from threadline.domain.value import TypeTag

from .handles import (
    InMemoryAppendableList,
    InMemoryDataIdentifier,
    InMemoryStructuredRecord,
)
from .network import InMemoryNetwork, Locator


class InMemoryStorageClient(StorageClient):
    """StorageClient over an InMemoryNetwork.

    Holds no state of its own; several clients on one network share data.
    """

    def __init__(self, network: InMemoryNetwork) -> None:
        self.network = network

    async def _locate(self, identifier: DataIdentifier) -> Locator:
        return Locator.from_bytes(await identifier.serialize())

    async def deserialize_identifier(self, data: bytes) -> DataIdentifier:
        return InMemoryDataIdentifier(self.network, Locator.from_bytes(data))

    async def put_immutable(self, content: bytes) -> DataIdentifier:
        digest = content_digest(content)
        self.network.blobs.setdefault(digest, content)
        logfire.debug("Immutable data stored", name=digest, size=len(content))
        return InMemoryDataIdentifier(
            self.network, Locator(kind="immutable", name=digest)
        )

    async def get_immutable(self, identifier: DataIdentifier) -> bytes:
        locator = await self._locate(identifier)
        content = self.network.blobs.get(locator.name)
        if locator.kind != "immutable" or content is None:
            raise NotFoundError("Immutable data", locator.name)
        return content

    async def create_structured(
        self, name: str, type_tag: TypeTag, payload: bytes
    ) -> StructuredRecord:
        return InMemoryStructuredRecord(self.network, name, type_tag, payload=payload)

    async def structured_from_identifier(
        self, identifier: DataIdentifier
    ) -> StructuredRecord:
        locator = await self._locate(identifier)
        if (
            locator.kind != "structured"
            or locator.type_tag is None
            or (locator.name, locator.type_tag) not in self.network.records
        ):
            raise NotFoundError("Structured data", locator.name)
        return InMemoryStructuredRecord(
            self.network, locator.name, locator.type_tag, stored=True
        )

    async def create_appendable(self, seed: str) -> AppendableList:
        return InMemoryAppendableList(self.network, seed)

    async def appendable_from_identifier(
        self, identifier: DataIdentifier
    ) -> AppendableList:
        locator = await self._locate(identifier)
        if locator.kind != "appendable" or locator.name not in self.network.lists:
            raise NotFoundError("Appendable data", locator.name)
        return InMemoryAppendableList(self.network, locator.name, stored=True)
