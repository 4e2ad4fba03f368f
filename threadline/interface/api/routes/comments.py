"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, ValidationError

from threadline.application.usecase.comment import (
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetReplyRequest,
    GetReplyResponse,
    GetReplyUseCase,
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from threadline.domain.error import DomainError, MalformedPayloadError
from threadline.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def _bad_ref(error: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("/{comment_ref}", response_model=GetCommentResponse)
async def get_comment(
    comment_ref: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment with its reply count.

    Args:
        comment_ref: Ref of the comment
        get_comment_use_case: Get comment use case from DI

    Returns:
        The comment and whether its parent changed since it was written

    Raises:
        HTTPException: 404 if missing, 422 if the stored data is corrupt
    """
    try:
        use_case_request = GetCommentRequest(comment_ref=comment_ref)
    except ValidationError as e:
        raise _bad_ref(e)

    try:
        return await get_comment_use_case.execute(use_case_request)
    except MalformedPayloadError as e:
        logfire.warn("Corrupt comment requested", comment_ref=comment_ref)
        raise to_http_exception(e)
    except DomainError as e:
        raise to_http_exception(e)


class ReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    text: str = Field(max_length=10000)


@router.post(
    "/{comment_ref}/replies",
    response_model=ReplyToCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_ref: str,
    request: ReplyAPIRequest,
    reply_use_case: FromDishka[ReplyToCommentUseCase],
) -> ReplyToCommentResponse:
    """Reply to a comment as the current user.

    Args:
        comment_ref: Ref of the parent comment
        request: Reply text
        reply_use_case: Reply use case from DI

    Returns:
        The stored reply
    """
    try:
        use_case_request = ReplyToCommentRequest(
            comment_ref=comment_ref, text=request.text
        )
    except ValidationError as e:
        raise _bad_ref(e)

    try:
        return await reply_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{comment_ref}/replies", response_model=ListRepliesResponse)
async def list_replies(
    comment_ref: str,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
) -> ListRepliesResponse:
    """List every reply of a comment in reply-list order.

    Args:
        comment_ref: Ref of the parent comment
        list_replies_use_case: List replies use case from DI

    Returns:
        Replies in the order they were appended
    """
    try:
        use_case_request = ListRepliesRequest(comment_ref=comment_ref)
    except ValidationError as e:
        raise _bad_ref(e)

    try:
        return await list_replies_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{comment_ref}/replies/{index}", response_model=GetReplyResponse)
async def get_reply(
    comment_ref: str,
    index: int,
    get_reply_use_case: FromDishka[GetReplyUseCase],
) -> GetReplyResponse:
    """Get the reply at a position in a comment's reply list.

    Args:
        comment_ref: Ref of the parent comment
        index: Zero-based reply position
        get_reply_use_case: Get reply use case from DI

    Returns:
        The reply

    Raises:
        HTTPException: 404 if the index is out of range
    """
    try:
        use_case_request = GetReplyRequest(comment_ref=comment_ref, index=index)
    except ValidationError as e:
        raise _bad_ref(e)

    try:
        return await get_reply_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)
