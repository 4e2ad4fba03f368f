"""Get comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.comment.common import (
    CommentItem,
    to_comment_item,
)
from threadline.domain.service import CommentService
from threadline.domain.value import Ref


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_ref: Ref


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem
    parent_stale: bool  # Parent rewritten since this comment was made


class GetCommentUseCase(BaseUseCase):
    """Use case for reading one comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            MalformedPayloadError: If the stored data is not a comment
        """
        comment = await self.comment_service.get_comment(
            request.comment_ref.to_bytes()
        )
        async with comment:
            return GetCommentResponse(
                comment=await to_comment_item(comment),
                parent_stale=await self.comment_service.is_parent_stale(comment),
            )
