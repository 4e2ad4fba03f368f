"""Wire codec for comment payloads.

The stored form is a flat JSON object:

    {
        "owner": "alice",
        "text": "nice video",
        "date": "2017-03-01T12:00:00.000Z",
        "isRootComment": false,
        "parentVersion": 0,
        "parent": "<base64 serialized identifier>",
        "replies": "<base64 serialized identifier>"
    }

Decoding is strict. Records come from an untyped store that anyone can
write to, so every field is checked for presence and primitive type and
nothing is coerced.
"""

import base64
import binascii
import json
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from threadline.domain.error import MalformedPayloadError
from threadline.domain.hashing import canonical_json
from threadline.domain.model.comment import CommentInfo


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError("date must be an ISO-8601 string")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"date out of range in UTC: {e}") from e


def _format_timestamp(value: datetime) -> str:
    # Same shape as JavaScript's Date.prototype.toISOString()
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _decode_base64(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValueError("expected a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64: {e}") from e


def _encode_base64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


WireTimestamp = Annotated[datetime, BeforeValidator(_parse_timestamp)]
WireBytes = Annotated[bytes, BeforeValidator(_decode_base64)]


class CommentWire(BaseModel):
    """Strict wire model of a stored comment."""

    model_config = ConfigDict(
        strict=True,  # Reject rather than coerce
        frozen=True,
        extra="ignore",
    )

    owner: str = Field(min_length=1)
    text: str
    date: WireTimestamp
    is_root_comment: bool = Field(alias="isRootComment")
    parent_version: int = Field(alias="parentVersion", ge=0)
    parent: WireBytes
    replies: WireBytes

    @field_validator("parent_version", mode="before")
    @classmethod
    def reject_bool_version(cls, v: Any) -> Any:
        """bool is an int subclass; never accept it as a version."""
        if isinstance(v, bool):
            raise ValueError("parentVersion must be an integer, not a boolean")
        return v

    def to_info(self) -> CommentInfo:
        return CommentInfo(**self.model_dump())


def encode_comment(info: CommentInfo) -> dict[str, Any]:
    """Encode a comment payload into its flat wire dict.

    Args:
        info: Logical comment payload

    Returns:
        Dict with camelCase keys, base64 identifiers and an ISO-8601 date
    """
    return {
        "owner": info.owner,
        "text": info.text,
        "date": _format_timestamp(info.date),
        "isRootComment": info.is_root_comment,
        "parentVersion": info.parent_version,
        "parent": _encode_base64(info.parent),
        "replies": _encode_base64(info.replies),
    }


def decode_comment(wire: Any) -> CommentInfo:
    """Validate and decode a wire dict.

    Args:
        wire: Object read from storage

    Returns:
        The decoded comment payload

    Raises:
        MalformedPayloadError: If any field is missing, mistyped or malformed
    """
    if not isinstance(wire, dict):
        raise MalformedPayloadError(
            f"Malformed comment info: expected an object, got {type(wire).__name__}"
        )
    try:
        return CommentWire.model_validate(wire).to_info()
    except ValidationError as e:
        raise MalformedPayloadError(f"Malformed comment info: {e}") from e


def dump_payload(info: CommentInfo) -> bytes:
    """Serialize a comment payload to canonical JSON bytes."""
    return canonical_json(encode_comment(info))


def load_payload(payload: bytes) -> CommentInfo:
    """Parse and decode stored payload bytes.

    Raises:
        MalformedPayloadError: If the bytes are not a valid comment object
    """
    try:
        wire = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedPayloadError(f"Malformed comment info: {e}") from e
    return decode_comment(wire)
