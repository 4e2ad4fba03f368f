"""Application layer DI providers."""

from dishka import Scope, provide

from threadline.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentUseCase,
    GetReplyUseCase,
    ListRepliesUseCase,
    ReplyToCommentUseCase,
)
from threadline.application.usecase.video import GetVideoUseCase, RegisterVideoUseCase
from threadline.domain.service import CommentService, VideoService
from threadline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Video use cases
    @provide(scope=Scope.REQUEST)
    def get_register_video_use_case(
        self, video_service: VideoService
    ) -> RegisterVideoUseCase:
        """Provide register video use case."""
        return RegisterVideoUseCase(video_service=video_service)

    @provide(scope=Scope.REQUEST)
    def get_get_video_use_case(self, video_service: VideoService) -> GetVideoUseCase:
        """Provide get video use case."""
        return GetVideoUseCase(video_service=video_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReplyToCommentUseCase:
        """Provide reply to comment use case."""
        return ReplyToCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_reply_use_case(self, comment_service: CommentService) -> GetReplyUseCase:
        """Provide get reply use case."""
        return GetReplyUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self, comment_service: CommentService
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(comment_service=comment_service)
