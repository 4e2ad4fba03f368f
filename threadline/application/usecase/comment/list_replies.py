"""List replies use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.comment.common import (
    CommentItem,
    to_comment_item,
)
from threadline.domain.service import CommentService
from threadline.domain.value import Ref


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_ref: Ref


class ListRepliesResponse(BaseModel):
    """List replies response."""

    comment_ref: str
    replies: list[CommentItem]
    total: int


class ListRepliesUseCase(BaseUseCase):
    """Use case for reading every reply of a comment in list order."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        """Execute list replies flow.

        Raises:
            NotFoundError: If the comment does not exist
            MalformedPayloadError: If stored data is not a comment
        """
        replies = await self.comment_service.list_replies(
            request.comment_ref.to_bytes()
        )
        items: list[CommentItem] = []
        try:
            for reply in replies:
                items.append(await to_comment_item(reply))
        finally:
            for reply in replies:
                await reply.dispose()

        return ListRepliesResponse(
            comment_ref=request.comment_ref.root,
            replies=items,
            total=len(items),
        )
