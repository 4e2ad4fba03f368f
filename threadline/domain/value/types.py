"""Domain value objects for threadline."""

import base64
import binascii
import re

from pydantic import Field, field_validator

from threadline.domain.value.common import RootValueObject, ValueObject
from threadline.domain.value.identifiers import SerializedId


class Ref(RootValueObject[str]):
    """URL-safe text form of a serialized data identifier.

    Used wherever an identifier has to travel through a URL or JSON body.
    """

    @field_validator("root")
    @classmethod
    def validate_ref_format(cls, v: str) -> str:
        """Validate ref is non-empty URL-safe base64."""
        if not re.fullmatch(r"[A-Za-z0-9_-]+", v):
            raise ValueError("Ref must be non-empty URL-safe base64 without padding")
        try:
            base64.urlsafe_b64decode(v + "=" * (-len(v) % 4))
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Ref is not valid base64: {e}") from e
        return v

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ref":
        """Build a ref from serialized identifier bytes."""
        return cls(base64.urlsafe_b64encode(data).decode("ascii").rstrip("="))

    def to_bytes(self) -> SerializedId:
        """Decode back to serialized identifier bytes."""
        padded = self.root + "=" * (-len(self.root) % 4)
        return SerializedId(base64.urlsafe_b64decode(padded))


class StructuredMetadata(ValueObject):
    """Metadata of a versioned structured record."""

    version: int = Field(ge=0)


class AppendableMetadata(ValueObject):
    """Metadata of an append-only list."""

    length: int = Field(ge=0)
