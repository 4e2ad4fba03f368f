"""Domain layer DI providers."""

from dishka import Scope, provide

from threadline.config import StorageSettings
from threadline.domain.identity import IdentityProvider
from threadline.domain.service import CommentService, VideoService
from threadline.domain.storage import StorageClient
from threadline.domain.value import TypeTag
from threadline.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped so each request resolves the current
    identity afresh.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        storage: StorageClient,
        identity: IdentityProvider,
        storage_settings: StorageSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            storage=storage,
            identity=identity,
            type_tag=TypeTag(storage_settings.type_tag),
        )

    @provide
    def get_video_service(self, storage: StorageClient) -> VideoService:
        """Provide video domain service."""
        return VideoService(storage=storage)
