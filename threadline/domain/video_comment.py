"""Comment aggregate.

A comment is stored as a versioned structured record named by the digest of
its payload. The payload points at the comment's parent (a video or another
comment) and at an append-only list holding the identifiers of its replies.
The tree is never held in memory: each VideoComment knows only its
immediate parent and its reply list, and replies are read on demand.

Handles are owned. A VideoComment owns its parent identifier, its reply
list and its structured record, and releases all three in dispose().
"""

from contextlib import AsyncExitStack
from datetime import datetime, timezone
from typing import Optional, Self
from uuid import uuid4

import logfire

from threadline.domain.codec import dump_payload, load_payload
from threadline.domain.error import (
    DisposedError,
    MalformedPayloadError,
    NoUserNameError,
)
from threadline.domain.hashing import content_digest
from threadline.domain.identity import IdentityProvider
from threadline.domain.model.comment import CommentInfo
from threadline.domain.replies import ReplyList
from threadline.domain.storage import (
    DataIdentifier,
    Disposable,
    StorageClient,
    StructuredRecord,
)
from threadline.domain.value import TypeTag

# Structured data type tag for versioned records
TYPE_TAG_VERSIONED = TypeTag(500)


class VideoComment(Disposable):
    """A comment on a video, or a reply to another comment.

    Build one with create() or read_from(); never through the constructor.
    Must be disposed exactly once, e.g. with ``async with comment:``.
    """

    def __init__(
        self,
        storage: StorageClient,
        info: CommentInfo,
        parent: DataIdentifier,
        replies: ReplyList,
        record: StructuredRecord,
        type_tag: TypeTag,
    ) -> None:
        self._storage = storage
        self._info = info
        self._record = record
        self._type_tag = type_tag
        self._disposed = False

        self.parent = parent
        self.replies = replies

    def to_info(self) -> CommentInfo:
        """The payload as stored."""
        return self._info

    @property
    def owner(self) -> str:
        return self._info.owner

    @property
    def text(self) -> str:
        return self._info.text

    @property
    def date(self) -> datetime:
        return self._info.date

    @property
    def parent_version(self) -> int:
        return self._info.parent_version

    @property
    def is_root_comment(self) -> bool:
        return self._info.is_root_comment

    @classmethod
    async def create(
        cls,
        storage: StorageClient,
        owner: str,
        text: str,
        date: datetime,
        parent_version: int,
        is_root_comment: bool,
        parent: DataIdentifier,
        *,
        type_tag: TypeTag = TYPE_TAG_VERSIONED,
        seed: Optional[str] = None,
    ) -> Self:
        """Create and store a new comment.

        Steps, each completing before the next:
        1. Create and save a new, empty reply list
        2. Encode the payload and digest it
        3. Store the payload as a structured record named by the digest

        Creation is not idempotent: the date and a fresh reply-list seed
        end up in the payload. Passing both ``date`` and ``seed`` makes it
        deterministic.

        Args:
            storage: Storage client
            owner: Author display name
            text: Comment body
            date: Time of the write
            parent_version: Version of the parent record at write time
            is_root_comment: True if parent is a video
            parent: Parent identifier; owned by the comment on success only
            type_tag: Structured data type tag
            seed: Reply-list name (random if omitted)

        Returns:
            The stored comment

        Raises:
            StorageWriteError: If the reply list or record cannot be saved
            NoUserNameError: If owner is empty
            ValueError: If parent_version is negative
        """
        if not owner:
            raise NoUserNameError()
        if parent_version < 0:
            raise ValueError("parent_version must be non-negative")

        seed = seed or uuid4().hex
        with logfire.span(
            "video_comment.create",
            owner=owner,
            is_root_comment=is_root_comment,
            parent_version=parent_version,
            seed=seed,
        ):
            async with AsyncExitStack() as stack:
                replies = await ReplyList.create(storage, seed)
                stack.push_async_callback(replies.dispose)

                info = CommentInfo(
                    owner=owner,
                    text=text,
                    date=date,
                    parent_version=parent_version,
                    is_root_comment=is_root_comment,
                    parent=await parent.serialize(),
                    replies=await replies.serialize(),
                )
                payload = dump_payload(info)
                digest = content_digest(payload)

                record = await storage.create_structured(digest, type_tag, payload)
                stack.push_async_callback(record.dispose)
                try:
                    await record.save()
                except Exception as e:
                    logfire.warn(
                        "Comment record save failed, reply list orphaned",
                        digest=digest,
                        seed=seed,
                        error=str(e),
                    )
                    raise

                # Stored; the comment takes over every handle
                stack.pop_all()

            logfire.info("Comment stored", digest=digest, owner=owner)
            return cls(storage, info, parent, replies, record, type_tag)

    @classmethod
    async def read_from(
        cls,
        storage: StorageClient,
        identifier: DataIdentifier,
        *,
        type_tag: TypeTag = TYPE_TAG_VERSIONED,
    ) -> Self:
        """Read a stored comment.

        The caller keeps ownership of ``identifier``.

        Args:
            storage: Storage client
            identifier: Identifier of the comment's structured record
            type_tag: Type tag used for replies created from this comment

        Returns:
            The comment with fresh parent and reply-list handles

        Raises:
            NotFoundError: If the identifier does not resolve
            MalformedPayloadError: If the stored payload is not a comment
        """
        with logfire.span("video_comment.read_from"):
            async with AsyncExitStack() as stack:
                record = await storage.structured_from_identifier(identifier)
                stack.push_async_callback(record.dispose)

                try:
                    info = load_payload(await record.read_payload())
                except MalformedPayloadError as e:
                    logfire.error("Malformed comment payload", error=str(e))
                    raise

                parent = await storage.deserialize_identifier(info.parent)
                stack.push_async_callback(parent.dispose)

                async with await storage.deserialize_identifier(
                    info.replies
                ) as replies_id:
                    replies = await ReplyList.from_identifier(storage, replies_id)
                stack.push_async_callback(replies.dispose)

                stack.pop_all()

            return cls(storage, info, parent, replies, record, type_tag)

    async def identifier(self) -> DataIdentifier:
        """Return a fresh handle to this comment's record, owned by the caller."""
        self._ensure_live()
        return await self._record.to_identifier()

    async def version(self) -> int:
        """Current version of this comment's stored record."""
        self._ensure_live()
        return (await self._record.get_metadata()).version

    async def add_reply(
        self,
        text: str,
        identity: IdentityProvider,
        *,
        date: Optional[datetime] = None,
        seed: Optional[str] = None,
    ) -> "VideoComment":
        """Reply to this comment.

        The reply records this comment's current version as its
        parent_version and this comment's identifier as its parent, then
        its own identifier is appended to this comment's reply list.

        Args:
            text: Reply body
            identity: Resolves the reply's author
            date: Time of the write (now if omitted)
            seed: Reply-list name for the new reply (random if omitted)

        Returns:
            The stored reply; the caller owns it

        Raises:
            NoUserNameError: If no display name is selected
            StorageWriteError: If storing or linking the reply fails
        """
        self._ensure_live()
        owner = await identity.get_current_user_display_name()
        if not owner:
            raise NoUserNameError()

        with logfire.span("video_comment.add_reply", owner=owner):
            parent_version = await self.version()
            parent = await self.identifier()
            try:
                reply = await VideoComment.create(
                    self._storage,
                    owner,
                    text,
                    date or datetime.now(timezone.utc),
                    parent_version,
                    False,
                    parent,
                    type_tag=self._type_tag,
                    seed=seed,
                )
            except Exception:
                await parent.dispose()
                raise

            try:
                async with await reply.identifier() as reply_id:
                    await self.replies.append(reply_id)
            except Exception as e:
                logfire.warn(
                    "Reply stored but not linked to parent", error=str(e)
                )
                await reply.dispose()
                raise

            logfire.info(
                "Reply added", owner=owner, parent_version=parent_version
            )
            return reply

    async def num_replies(self) -> int:
        """Current number of replies; may change between calls."""
        self._ensure_live()
        return await self.replies.length()

    async def get_reply(self, index: int) -> "VideoComment":
        """Read the reply at ``index``; the caller owns the result.

        Raises:
            IndexOutOfRangeError: If index is not in [0, num_replies())
            NotFoundError: If the stored identifier does not resolve
            MalformedPayloadError: If the reply's payload is not a comment
        """
        self._ensure_live()
        async with await self.replies.at(index) as reply_id:
            return await VideoComment.read_from(
                self._storage, reply_id, type_tag=self._type_tag
            )

    async def dispose(self) -> None:
        """Release the parent, reply-list and record handles.

        All three are released even if one fails; the first failure
        propagates.
        """
        self._ensure_live()
        self._disposed = True
        try:
            await self.parent.dispose()
        finally:
            try:
                await self.replies.dispose()
            finally:
                await self._record.dispose()

    def _ensure_live(self) -> None:
        if self._disposed:
            raise DisposedError("Comment has already been disposed")
