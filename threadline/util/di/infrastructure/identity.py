"""Identity infrastructure providers."""

from dishka import Scope, provide

from threadline.adapter.identity import SettingsIdentityProvider
from threadline.config import IdentitySettings
from threadline.domain.identity import IdentityProvider
from threadline.util.di.base import ProviderBase


class IdentityComponentProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityComponentProvider(IdentityComponentProvider):
    """Production identity provider backed by settings."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_identity_provider(
        self, identity_settings: IdentitySettings
    ) -> IdentityProvider:
        """Provide settings-backed identity provider."""
        return SettingsIdentityProvider(identity_settings)
