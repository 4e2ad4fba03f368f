"""Video routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, ValidationError

from threadline.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from threadline.application.usecase.video import (
    GetVideoRequest,
    GetVideoResponse,
    GetVideoUseCase,
    RegisterVideoRequest,
    RegisterVideoResponse,
    RegisterVideoUseCase,
)
from threadline.domain.error import DomainError
from threadline.interface.error import to_http_exception

router = APIRouter(prefix="/videos", tags=["videos"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=RegisterVideoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_video(
    request: RegisterVideoRequest,
    register_video_use_case: FromDishka[RegisterVideoUseCase],
) -> RegisterVideoResponse:
    """Store a video reference that comments can point at.

    Args:
        request: Video reference content
        register_video_use_case: Register video use case from DI

    Returns:
        Ref of the stored video
    """
    try:
        return await register_video_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{video_ref}", response_model=GetVideoResponse)
async def get_video(
    video_ref: str,
    get_video_use_case: FromDishka[GetVideoUseCase],
) -> GetVideoResponse:
    """Read back a registered video reference.

    Args:
        video_ref: Ref of the video
        get_video_use_case: Get video use case from DI

    Returns:
        The stored video reference content

    Raises:
        HTTPException: 400 if the ref is invalid, 404 if no video is stored
    """
    try:
        use_case_request = GetVideoRequest(video_ref=video_ref)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await get_video_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a video."""

    text: str = Field(max_length=10000)


@router.post(
    "/{video_ref}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    video_ref: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a video as the current user.

    Args:
        video_ref: Ref of the video
        request: Comment text
        create_comment_use_case: Create comment use case from DI

    Returns:
        The stored comment

    Raises:
        HTTPException: If the ref is invalid, no user is selected or storage fails
    """
    try:
        use_case_request = CreateCommentRequest(video_ref=video_ref, text=request.text)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)
