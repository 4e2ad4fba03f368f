"""Identity port.

Who is writing a reply is decided outside this package. The provider is
passed explicitly to VideoComment.add_reply instead of being read from a
process-wide config object.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IdentityProvider(ABC):
    """Resolves the display name of the current user."""

    @abstractmethod
    async def get_current_user_display_name(self) -> Optional[str]:
        """Return the current user's display name, or None if none is selected."""
        pass
