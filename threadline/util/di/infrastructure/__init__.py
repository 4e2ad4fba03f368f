"""Infrastructure DI providers."""

from .identity import IdentityComponentProvider, ProdIdentityComponentProvider
from .storage import ProdStorageProvider, StorageProvider

__all__ = [
    "IdentityComponentProvider",
    "ProdIdentityComponentProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
