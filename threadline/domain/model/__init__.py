"""Domain models."""

from .comment import CommentInfo
from .common import DomainModel

__all__ = [
    "CommentInfo",
    "DomainModel",
]
