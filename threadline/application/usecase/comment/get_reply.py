"""Get reply use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.comment.common import (
    CommentItem,
    to_comment_item,
)
from threadline.domain.service import CommentService
from threadline.domain.value import Ref


class GetReplyRequest(BaseModel):
    """Get reply request."""

    comment_ref: Ref  # Parent comment
    index: int


class GetReplyResponse(BaseModel):
    """Get reply response."""

    reply: CommentItem


class GetReplyUseCase(BaseUseCase):
    """Use case for reading one reply by position."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetReplyRequest) -> GetReplyResponse:
        """Execute get reply flow.

        Raises:
            IndexOutOfRangeError: If index is outside the reply list
            NotFoundError: If the parent or the reply does not exist
            MalformedPayloadError: If stored data is not a comment
        """
        reply = await self.comment_service.get_reply(
            request.comment_ref.to_bytes(), request.index
        )
        async with reply:
            return GetReplyResponse(reply=await to_comment_item(reply))
