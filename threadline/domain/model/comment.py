"""Comment payload.

The part of a comment that is actually written to storage. Live handles to
the parent and reply list are held by VideoComment; here they appear only
as serialized identifier bytes.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from threadline.domain.model.common import DomainModel


class CommentInfo(DomainModel):
    """Logical payload of a stored comment.

    - parent_version: version of the parent record when this comment was
      written. A snapshot; it goes stale if the parent is rewritten.
    - is_root_comment: True when parent is a video rather than a comment.
    """

    owner: str = Field(min_length=1)
    text: str
    date: datetime
    parent_version: int = Field(ge=0)
    is_root_comment: bool
    parent: bytes
    replies: bytes

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        """Store dates as whole seconds in UTC."""
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        try:
            utc = v.astimezone(timezone.utc)
        except OverflowError as e:
            raise ValueError(f"date out of range in UTC: {e}") from e
        return utc.replace(microsecond=0)
