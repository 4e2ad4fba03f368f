"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from threadline.domain.video_comment import VideoComment
from threadline.domain.value import SerializedId
from threadline.persistence.inmemory import InMemoryNetwork, InMemoryStorageClient

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

FIXED_DATE = datetime(2017, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


async def serialized_id(comment: VideoComment) -> SerializedId:
    """Serialized identifier of a comment's stored record."""
    async with await comment.identifier() as identifier:
        return await identifier.serialize()


@pytest.fixture
def network() -> InMemoryNetwork:
    """Fresh in-memory storage network."""
    return InMemoryNetwork()


@pytest.fixture
def storage(network: InMemoryNetwork) -> InMemoryStorageClient:
    """Storage client over the test network."""
    return InMemoryStorageClient(network)
