"""Scoped release of storage handles.

Every handle handed out by a StorageClient is a live resource owned by
exactly one holder, who must release it once. ``async with handle:`` is the
usual way to guarantee that on every exit path.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Self


class Disposable(ABC):
    """A resource that must be released exactly once."""

    @abstractmethod
    async def dispose(self) -> None:
        """Release the resource.

        Raises:
            DisposedError: If the resource was already released
        """
        pass

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.dispose()
