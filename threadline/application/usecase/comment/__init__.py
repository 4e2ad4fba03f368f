"""Comment use cases."""

from .common import CommentItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_reply import GetReplyRequest, GetReplyResponse, GetReplyUseCase
from .list_replies import (
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
)
from .reply_to_comment import (
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetReplyRequest",
    "GetReplyResponse",
    "GetReplyUseCase",
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
    "ReplyToCommentRequest",
    "ReplyToCommentResponse",
    "ReplyToCommentUseCase",
]
