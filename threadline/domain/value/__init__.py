"""Domain value objects for threadline."""

from threadline.domain.value.identifiers import Digest, SerializedId, TypeTag
from threadline.domain.value.types import (
    AppendableMetadata,
    Ref,
    StructuredMetadata,
)

__all__ = [
    # Identifiers
    "SerializedId",
    "Digest",
    "TypeTag",
    # Types
    "Ref",
    "StructuredMetadata",
    "AppendableMetadata",
]
