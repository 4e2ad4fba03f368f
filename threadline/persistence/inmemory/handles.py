"""In-memory storage handles."""

from typing import Optional

from threadline.domain.error import (
    DisposedError,
    IndexOutOfRangeError,
    NotFoundError,
    StorageWriteError,
)
from threadline.domain.storage import (
    AppendableList,
    DataIdentifier,
    StructuredRecord,
)
from threadline.domain.value import (
    AppendableMetadata,
    SerializedId,
    StructuredMetadata,
)

from .network import InMemoryNetwork, Locator, StoredRecord


class _HandleLifetime:
    """Open-handle accounting shared by all in-memory handles."""

    def __init__(self, network: InMemoryNetwork) -> None:
        self._network = network
        self._disposed = False
        network.open_handles += 1

    def _check_live(self) -> None:
        if self._disposed:
            raise DisposedError(f"{type(self).__name__} used after dispose")

    async def dispose(self) -> None:
        self._check_live()
        self._disposed = True
        self._network.open_handles -= 1


class InMemoryDataIdentifier(_HandleLifetime, DataIdentifier):
    """Identifier handle backed by a Locator."""

    def __init__(self, network: InMemoryNetwork, locator: Locator) -> None:
        super().__init__(network)
        self.locator = locator

    async def serialize(self) -> SerializedId:
        self._check_live()
        return self.locator.to_bytes()


class InMemoryStructuredRecord(_HandleLifetime, StructuredRecord):
    """Structured record handle.

    A handle from create_structured holds its payload until the first
    save(); a handle resolved from an identifier reads through to the
    network.
    """

    def __init__(
        self,
        network: InMemoryNetwork,
        name: str,
        type_tag: int,
        payload: Optional[bytes] = None,
        stored: bool = False,
    ) -> None:
        super().__init__(network)
        self.name = name
        self.type_tag = type_tag
        self._pending = payload
        self._stored = stored

    @property
    def _key(self) -> tuple[str, int]:
        return (self.name, self.type_tag)

    def _locator(self) -> Locator:
        return Locator(kind="structured", name=self.name, type_tag=self.type_tag)

    def _lookup(self) -> StoredRecord:
        record = self._network.records.get(self._key)
        if record is None:
            raise NotFoundError("Structured data", self.name)
        return record

    async def save(self) -> None:
        self._check_live()
        if not self._stored:
            if self._key in self._network.records:
                raise StorageWriteError(f"Structured data already exists: {self.name}")
            self._network.records[self._key] = StoredRecord(payload=self._pending or b"")
            self._stored = True
            self._pending = None
            return

        if self._pending is not None:
            record = self._lookup()
            record.payload = self._pending
            record.version += 1
            self._pending = None

    async def read_payload(self) -> bytes:
        self._check_live()
        return self._lookup().payload

    async def update_payload(self, payload: bytes) -> None:
        self._check_live()
        self._pending = payload

    async def get_metadata(self) -> StructuredMetadata:
        self._check_live()
        return StructuredMetadata(version=self._lookup().version)

    async def to_identifier(self) -> DataIdentifier:
        self._check_live()
        return InMemoryDataIdentifier(self._network, self._locator())


class InMemoryAppendableList(_HandleLifetime, AppendableList):
    """Append-only list handle."""

    def __init__(
        self, network: InMemoryNetwork, seed: str, stored: bool = False
    ) -> None:
        super().__init__(network)
        self.seed = seed
        self._stored = stored

    def _entries(self) -> list[bytes]:
        entries = self._network.lists.get(self.seed)
        if entries is None:
            raise NotFoundError("Appendable data", self.seed)
        return entries

    async def save(self) -> None:
        self._check_live()
        if self._stored:
            return
        if self.seed in self._network.lists:
            raise StorageWriteError(f"Appendable data already exists: {self.seed}")
        self._network.lists[self.seed] = []
        self._stored = True

    async def append(self, identifier: DataIdentifier) -> None:
        self._check_live()
        entry = await identifier.serialize()
        entries = self._network.lists.get(self.seed)
        if entries is None:
            raise StorageWriteError(f"Appendable data not saved: {self.seed}")
        entries.append(entry)

    async def get_metadata(self) -> AppendableMetadata:
        self._check_live()
        return AppendableMetadata(length=len(self._entries()))

    async def at(self, index: int) -> DataIdentifier:
        self._check_live()
        entries = self._entries()
        if index < 0 or index >= len(entries):
            raise IndexOutOfRangeError(index, len(entries))
        return InMemoryDataIdentifier(self._network, Locator.from_bytes(entries[index]))

    async def to_identifier(self) -> DataIdentifier:
        self._check_live()
        return InMemoryDataIdentifier(
            self._network, Locator(kind="appendable", name=self.seed)
        )
