"""Create comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.comment.common import (
    CommentItem,
    to_comment_item,
)
from threadline.domain.service import CommentService
from threadline.domain.value import Ref


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    video_ref: Ref
    text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a video."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored root comment

        Raises:
            NoUserNameError: If no display name is selected
            StorageWriteError: If the comment cannot be stored
        """
        comment = await self.comment_service.comment_on_video(
            request.video_ref.to_bytes(), request.text
        )
        async with comment:
            return CreateCommentResponse(comment=await to_comment_item(comment))
