"""Shared comment response model."""

from datetime import datetime

from pydantic import BaseModel

from threadline.domain.value import Ref
from threadline.domain.video_comment import VideoComment


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_ref: str
    owner: str
    text: str
    date: datetime
    parent_ref: str
    parent_version: int
    is_root_comment: bool
    num_replies: int


async def to_comment_item(comment: VideoComment) -> CommentItem:
    """Build a response item. Does not dispose ``comment``."""
    async with await comment.identifier() as identifier:
        comment_ref = Ref.from_bytes(await identifier.serialize())

    return CommentItem(
        comment_ref=comment_ref.root,
        owner=comment.owner,
        text=comment.text,
        date=comment.date,
        parent_ref=Ref.from_bytes(comment.to_info().parent).root,
        parent_version=comment.parent_version,
        is_root_comment=comment.is_root_comment,
        num_replies=await comment.num_replies(),
    )
