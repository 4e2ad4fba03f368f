"""Reply to comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.comment.common import (
    CommentItem,
    to_comment_item,
)
from threadline.domain.service import CommentService
from threadline.domain.value import Ref


class ReplyToCommentRequest(BaseModel):
    """Reply to comment request."""

    comment_ref: Ref  # Parent comment
    text: str


class ReplyToCommentResponse(BaseModel):
    """Reply to comment response."""

    reply: CommentItem


class ReplyToCommentUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ReplyToCommentRequest) -> ReplyToCommentResponse:
        """Execute reply flow.

        Steps:
        1. Read the parent comment
        2. Store the reply with the parent's current version
        3. Append the reply to the parent's reply list

        Raises:
            NotFoundError: If the parent comment does not exist
            MalformedPayloadError: If the parent is not a valid comment
            NoUserNameError: If no display name is selected
        """
        reply = await self.comment_service.reply(
            request.comment_ref.to_bytes(), request.text
        )
        async with reply:
            return ReplyToCommentResponse(reply=await to_comment_item(reply))
