"""Mock providers for testing."""

from .identity import TEST_DISPLAY_NAME, MockIdentityComponentProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockIdentityComponentProvider",
    "MockStorageProvider",
    "TEST_DISPLAY_NAME",
    "build_test_container",
]
