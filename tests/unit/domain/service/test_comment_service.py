"""Unit tests for CommentService."""

import pytest

from threadline.adapter.identity import StaticIdentityProvider
from threadline.domain.error import (
    IndexOutOfRangeError,
    MalformedPayloadError,
    NotFoundError,
    NoUserNameError,
    StorageWriteError,
)
from threadline.domain.service import CommentService, VideoService
from threadline.domain.storage import StorageClient
from threadline.domain.video_comment import TYPE_TAG_VERSIONED
from threadline.persistence.inmemory import InMemoryNetwork, InMemoryStructuredRecord
from tests.conftest import serialized_id
from tests.di import TEST_DISPLAY_NAME
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register_video(unit_env, content: bytes = b"https://videos.example/1"):
    video_service = await unit_env.get(VideoService)
    return await video_service.register(content)


class TestCommentOnVideo:
    """Tests for CommentService.comment_on_video."""

    @pytest.mark.asyncio
    async def test_creates_root_comment(self, unit_env):
        """Root comments belong to the current user and point at the video."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)

        # Act
        async with await comment_service.comment_on_video(video, "hi") as comment:
            # Assert
            assert comment.owner == TEST_DISPLAY_NAME
            assert comment.text == "hi"
            assert comment.is_root_comment is True
            assert comment.parent_version == 0
            assert comment.to_info().parent == video
            assert await comment.num_replies() == 0

    @pytest.mark.asyncio
    async def test_requires_display_name(self, unit_env):
        """Without a display name nothing should be stored."""
        # Arrange
        storage = await unit_env.get(StorageClient)
        network = await unit_env.get(InMemoryNetwork)
        comment_service = CommentService(
            storage=storage,
            identity=StaticIdentityProvider(None),
            type_tag=TYPE_TAG_VERSIONED,
        )
        video = await register_video(unit_env)

        # Act & Assert
        with pytest.raises(NoUserNameError):
            await comment_service.comment_on_video(video, "hi")

        assert network.records == {}
        assert network.open_handles == 0

    @pytest.mark.asyncio
    async def test_malformed_video_identifier(self, unit_env):
        """Bytes that are not an identifier should be rejected up front."""
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)

        with pytest.raises(MalformedPayloadError):
            await comment_service.comment_on_video(b"not an identifier", "hi")

        assert network.open_handles == 0

    @pytest.mark.asyncio
    async def test_releases_parent_on_failure(self, unit_env, monkeypatch):
        """A failed write should release the video handle it resolved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)
        video = await register_video(unit_env)

        async def failing_save(self):
            raise StorageWriteError("network unavailable")

        monkeypatch.setattr(InMemoryStructuredRecord, "save", failing_save)

        # Act & Assert
        with pytest.raises(StorageWriteError):
            await comment_service.comment_on_video(video, "hi")

        assert network.records == {}
        assert network.open_handles == 0


class TestGetComment:
    """Tests for CommentService.get_comment."""

    @pytest.mark.asyncio
    async def test_reads_back_comment(self, unit_env):
        """A stored comment should be readable by its identifier."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            identifier = await serialized_id(comment)
            info = comment.to_info()

        # Act
        async with await comment_service.get_comment(identifier) as read:
            # Assert
            assert read.to_info() == info

    @pytest.mark.asyncio
    async def test_video_is_not_a_comment(self, unit_env):
        """A video identifier should not resolve as a comment."""
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment(video)

    @pytest.mark.asyncio
    async def test_corrupt_record_is_malformed(self, unit_env):
        """Corrupt stored data should be distinguishable from missing data."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            identifier = await serialized_id(comment)

        (record,) = network.records.values()
        record.payload = b'{"owner":"bob","text":"x","date":"not-a-date"}'

        # Act & Assert
        with pytest.raises(MalformedPayloadError):
            await comment_service.get_comment(identifier)

        assert network.open_handles == 0


class TestReplies:
    """Tests for reply, get_reply and list_replies."""

    @pytest.mark.asyncio
    async def test_reply_links_to_parent(self, unit_env):
        """A reply should be appended to its parent's reply list."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)

        # Act
        async with await comment_service.reply(parent_id, "nice video") as reply:
            reply_id = await serialized_id(reply)

        # Assert
        async with await comment_service.get_reply(parent_id, 0) as first:
            assert await serialized_id(first) == reply_id
            assert first.text == "nice video"
            assert first.owner == TEST_DISPLAY_NAME
            assert first.is_root_comment is False
            assert first.to_info().parent == parent_id

    @pytest.mark.asyncio
    async def test_get_reply_out_of_range(self, unit_env):
        """Asking past the end of the reply list should fail."""
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)

        with pytest.raises(IndexOutOfRangeError):
            await comment_service.get_reply(parent_id, 0)

    @pytest.mark.asyncio
    async def test_list_replies_in_order(self, unit_env):
        """Replies should come back in the order they were made."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)
        for text in ("one", "two", "three"):
            async with await comment_service.reply(parent_id, text):
                pass

        # Act
        replies = await comment_service.list_replies(parent_id)

        # Assert
        try:
            assert [reply.text for reply in replies] == ["one", "two", "three"]
        finally:
            for reply in replies:
                await reply.dispose()
        assert network.open_handles == 0

    @pytest.mark.asyncio
    async def test_list_replies_empty(self, unit_env):
        """A comment without replies should list nothing."""
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)

        assert await comment_service.list_replies(parent_id) == []


class TestIsParentStale:
    """Tests for CommentService.is_parent_stale."""

    @pytest.mark.asyncio
    async def test_root_comment_never_stale(self, unit_env):
        """Videos are immutable, so root comments are never stale."""
        comment_service = await unit_env.get(CommentService)
        video = await register_video(unit_env)

        async with await comment_service.comment_on_video(video, "hi") as comment:
            assert await comment_service.is_parent_stale(comment) is False

    @pytest.mark.asyncio
    async def test_reply_goes_stale_when_parent_rewritten(self, unit_env):
        """A reply is stale once its parent moves past the recorded version."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)

        async with await comment_service.reply(parent_id, "first") as reply:
            assert await comment_service.is_parent_stale(reply) is False

            # Act
            for record in network.records.values():
                if b'"isRootComment":true' in record.payload:
                    record.version += 1

            # Assert
            assert await comment_service.is_parent_stale(reply) is True

    @pytest.mark.asyncio
    async def test_reply_with_missing_parent_is_stale(self, unit_env):
        """A parent that no longer resolves is reported, not raised."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        network = await unit_env.get(InMemoryNetwork)
        video = await register_video(unit_env)
        async with await comment_service.comment_on_video(video, "hi") as comment:
            parent_id = await serialized_id(comment)

        async with await comment_service.reply(parent_id, "first") as reply:
            for key, record in list(network.records.items()):
                if b'"isRootComment":true' in record.payload:
                    del network.records[key]

            # Act & Assert
            assert await comment_service.is_parent_stale(reply) is True
