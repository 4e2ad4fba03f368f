"""Video domain service."""

import logfire

from threadline.domain.storage import StorageClient
from threadline.domain.value import SerializedId

from .base import Service


class VideoService(Service):
    """Domain service for video references.

    Videos themselves live elsewhere; here a video is an immutable blob
    (its reference) whose content identifier root comments point at.
    """

    def __init__(self, storage: StorageClient) -> None:
        self.storage = storage

    async def register(self, content: bytes) -> SerializedId:
        """Store a video reference blob.

        Args:
            content: Opaque video reference

        Returns:
            Serialized content identifier of the blob
        """
        with logfire.span("video_service.register", content_length=len(content)):
            async with await self.storage.put_immutable(content) as video_id:
                serialized = await video_id.serialize()
            logfire.info("Video registered", content_length=len(content))
            return serialized

    async def get_content(self, video: bytes) -> bytes:
        """Read a video reference blob.

        Raises:
            NotFoundError: If no blob is stored under the identifier
        """
        with logfire.span("video_service.get_content"):
            async with await self.storage.deserialize_identifier(video) as video_id:
                return await self.storage.get_immutable(video_id)
