"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from threadline.domain.identity import IdentityProvider
from threadline.domain.error import NotFoundError, NoUserNameError
from threadline.domain.storage import StorageClient
from threadline.domain.value import TypeTag
from threadline.domain.video_comment import VideoComment

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Takes and returns serialized identifiers so callers never juggle raw
    storage handles. Every VideoComment returned is owned by the caller.
    """

    def __init__(
        self,
        storage: StorageClient,
        identity: IdentityProvider,
        type_tag: TypeTag,
    ) -> None:
        """Initialize comment service.

        Args:
            storage: Storage client
            identity: Resolves the current user's display name
            type_tag: Structured data type tag for comment records
        """
        self.storage = storage
        self.identity = identity
        self.type_tag = type_tag

    async def comment_on_video(self, video: bytes, text: str) -> VideoComment:
        """Create a root comment on a video.

        Args:
            video: Serialized identifier of the video
            text: Comment text

        Returns:
            Created comment

        Raises:
            NoUserNameError: If no display name is selected
            StorageWriteError: If the comment cannot be stored
        """
        with logfire.span("comment_service.comment_on_video"):
            owner = await self.identity.get_current_user_display_name()
            if not owner:
                logfire.warn("Comment rejected, no display name selected")
                raise NoUserNameError()

            parent = await self.storage.deserialize_identifier(video)
            try:
                comment = await VideoComment.create(
                    self.storage,
                    owner,
                    text,
                    datetime.now(timezone.utc),
                    0,  # Videos are immutable, always version 0
                    True,
                    parent,
                    type_tag=self.type_tag,
                )
            except Exception:
                await parent.dispose()
                raise

            logfire.info("Root comment created", owner=owner)
            return comment

    async def get_comment(self, identifier: bytes) -> VideoComment:
        """Get a comment by serialized identifier.

        Raises:
            NotFoundError: If the identifier does not resolve
            MalformedPayloadError: If the stored data is not a comment
        """
        with logfire.span("comment_service.get_comment"):
            async with await self.storage.deserialize_identifier(identifier) as did:
                return await VideoComment.read_from(
                    self.storage, did, type_tag=self.type_tag
                )

    async def reply(self, identifier: bytes, text: str) -> VideoComment:
        """Reply to a comment.

        Args:
            identifier: Serialized identifier of the parent comment
            text: Reply text

        Returns:
            Created reply

        Raises:
            NoUserNameError: If no display name is selected
            NotFoundError: If the parent does not resolve
            StorageWriteError: If storing or linking the reply fails
        """
        with logfire.span("comment_service.reply"):
            async with await self.get_comment(identifier) as parent:
                return await parent.add_reply(text, self.identity)

    async def get_reply(self, identifier: bytes, index: int) -> VideoComment:
        """Get the reply at ``index`` of a comment.

        Raises:
            IndexOutOfRangeError: If index is out of range
        """
        with logfire.span("comment_service.get_reply", index=index):
            async with await self.get_comment(identifier) as parent:
                return await parent.get_reply(index)

    async def list_replies(self, identifier: bytes) -> list[VideoComment]:
        """Get every reply of a comment, in list order.

        Replies appended while listing may or may not be included.
        """
        with logfire.span("comment_service.list_replies"):
            replies: list[VideoComment] = []
            async with await self.get_comment(identifier) as parent:
                count = await parent.num_replies()
                try:
                    for index in range(count):
                        replies.append(await parent.get_reply(index))
                except Exception:
                    for reply in replies:
                        await reply.dispose()
                    raise
            logfire.info("Replies retrieved", count=len(replies))
            return replies

    async def is_parent_stale(self, comment: VideoComment) -> bool:
        """Whether a reply's parent has been rewritten since the reply was made.

        Compares the reply's parent_version snapshot against the parent's
        current version. Root comments point at immutable videos and are
        never stale. A parent that no longer resolves counts as stale.
        """
        if comment.is_root_comment:
            return False
        with logfire.span("comment_service.is_parent_stale"):
            try:
                record = await self.storage.structured_from_identifier(
                    comment.parent
                )
            except NotFoundError as e:
                logfire.warn("Parent of reply not found", error=str(e))
                return True
            async with record:
                current = (await record.get_metadata()).version
            stale = current != comment.parent_version
            if stale:
                logfire.info(
                    "Parent changed since reply",
                    parent_version=comment.parent_version,
                    current_version=current,
                )
            return stale
