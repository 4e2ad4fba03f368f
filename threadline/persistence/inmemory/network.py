"""In-process state of the in-memory storage network."""

from dataclasses import dataclass, field
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from threadline.domain.error import MalformedPayloadError
from threadline.domain.hashing import canonical_json
from threadline.domain.value import SerializedId

LocatorKind = Literal["immutable", "structured", "appendable"]


class Locator(BaseModel):
    """What a serialized data identifier points at."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    kind: LocatorKind
    name: str
    type_tag: Optional[int] = None

    def to_bytes(self) -> SerializedId:
        return SerializedId(canonical_json(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Locator":
        """Parse serialized identifier bytes.

        Raises:
            MalformedPayloadError: If the bytes are not an identifier
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise MalformedPayloadError(f"Not a data identifier: {e}") from e


@dataclass
class StoredRecord:
    """A saved structured record."""

    payload: bytes
    version: int = 0


@dataclass
class InMemoryNetwork:
    """Everything stored on the in-memory network.

    One instance stands in for the whole network; every client built on it
    sees the same data. ``open_handles`` counts handles that have been
    handed out and not yet disposed.
    """

    blobs: dict[str, bytes] = field(default_factory=dict)
    records: dict[tuple[str, int], StoredRecord] = field(default_factory=dict)
    lists: dict[str, list[bytes]] = field(default_factory=dict)
    open_handles: int = 0
