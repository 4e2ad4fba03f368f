"""Identity providers.

Display names are chosen outside this service; these adapters only report
the current choice.
"""

from typing import Optional

from threadline.config import IdentitySettings
from threadline.domain.identity import IdentityProvider


class SettingsIdentityProvider(IdentityProvider):
    """Reads the display name from configuration.

    Set IDENTITY__DISPLAY_NAME to select a name.
    """

    def __init__(self, identity_settings: IdentitySettings) -> None:
        self.identity_settings = identity_settings

    async def get_current_user_display_name(self) -> Optional[str]:
        return self.identity_settings.display_name


class StaticIdentityProvider(IdentityProvider):
    """Always reports the same display name (or none)."""

    def __init__(self, display_name: Optional[str]) -> None:
        self.display_name = display_name

    async def get_current_user_display_name(self) -> Optional[str]:
        return self.display_name
