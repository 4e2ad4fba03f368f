"""Typed primitives for storage addressing.

Handles to storage objects are live resources; these types are the plain
values that name them and survive serialization.
"""

from typing import NewType

# Bytes produced by DataIdentifier.serialize()
SerializedId = NewType("SerializedId", bytes)

# Hex digest naming a structured record
Digest = NewType("Digest", str)

# Structured data type tag
TypeTag = NewType("TypeTag", int)
