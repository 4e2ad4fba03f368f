"""Register video use case."""

from pydantic import BaseModel, Field

from threadline.application.usecase.base import BaseUseCase
from threadline.domain.service import VideoService
from threadline.domain.value import Ref


class RegisterVideoRequest(BaseModel):
    """Register video request."""

    content: str = Field(min_length=1)  # Opaque video reference, e.g. a URL


class RegisterVideoResponse(BaseModel):
    """Register video response."""

    video_ref: str


class RegisterVideoUseCase(BaseUseCase):
    """Use case for storing a video reference that comments can point at."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: RegisterVideoRequest) -> RegisterVideoResponse:
        video = await self.video_service.register(request.content.encode("utf-8"))
        return RegisterVideoResponse(video_ref=Ref.from_bytes(video).root)
