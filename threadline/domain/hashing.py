"""Deterministic hashing of comment payloads.

The digest names the structured record a comment is stored under, so the
serialization feeding it must be canonical: same logical payload, same
bytes, whatever the dict insertion order.
"""

import hashlib
import json
from typing import Any

from threadline.domain.value import Digest


def canonical_json(data: Any) -> bytes:
    """Serialize data to canonical JSON bytes.

    Uses sorted keys, compact separators, and UTF-8 encoding.

    Args:
        data: Any JSON-serializable object (dict, list, str, int, ...)

    Returns:
        UTF-8 encoded bytes of the canonical JSON string
    """
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def content_digest(payload: bytes) -> Digest:
    """Compute the SHA-256 hex digest of a serialized payload."""
    return Digest(hashlib.sha256(payload).hexdigest())
