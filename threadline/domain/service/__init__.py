"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .video_service import VideoService

__all__ = [
    "CommentService",
    "Service",
    "VideoService",
]
