"""Get video use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.domain.error import MalformedPayloadError
from threadline.domain.service import VideoService
from threadline.domain.value import Ref


class GetVideoRequest(BaseModel):
    """Get video request."""

    video_ref: Ref


class GetVideoResponse(BaseModel):
    """Get video response."""

    video_ref: str
    content: str


class GetVideoUseCase(BaseUseCase):
    """Use case for reading back a registered video reference."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: GetVideoRequest) -> GetVideoResponse:
        """Execute get video flow.

        Raises:
            NotFoundError: If no video is stored under the ref
            MalformedPayloadError: If the stored content is not UTF-8 text
        """
        content = await self.video_service.get_content(request.video_ref.to_bytes())
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError(f"Video reference is not text: {e}") from e

        return GetVideoResponse(video_ref=request.video_ref.root, content=text)
