"""Video use cases."""

from .get_video import GetVideoRequest, GetVideoResponse, GetVideoUseCase
from .register_video import (
    RegisterVideoRequest,
    RegisterVideoResponse,
    RegisterVideoUseCase,
)

__all__ = [
    "GetVideoRequest",
    "GetVideoResponse",
    "GetVideoUseCase",
    "RegisterVideoRequest",
    "RegisterVideoResponse",
    "RegisterVideoUseCase",
]
