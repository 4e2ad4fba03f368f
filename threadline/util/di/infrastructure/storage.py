"""Storage infrastructure providers."""

from dishka import Scope, provide
import logfire

from threadline.domain.storage import StorageClient
from threadline.persistence.inmemory import InMemoryNetwork, InMemoryStorageClient
from threadline.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider.

    Serves every request from one in-process network that lives as long as
    the app. A network-backed StorageClient replaces get_storage_client.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_network(self) -> InMemoryNetwork:
        """Provide the in-process storage network."""
        logfire.info("In-memory storage network created")
        return InMemoryNetwork()

    @provide(scope=Scope.APP)
    def get_storage_client(self, network: InMemoryNetwork) -> StorageClient:
        """Provide storage client."""
        return InMemoryStorageClient(network)
