"""Unit tests for the in-memory storage substrate."""

import pytest

from threadline.domain.error import (
    DisposedError,
    IndexOutOfRangeError,
    MalformedPayloadError,
    NotFoundError,
    StorageWriteError,
)
from threadline.domain.hashing import content_digest
from threadline.persistence.inmemory import InMemoryStorageClient, Locator

TAG = 500


class TestLocator:
    """Tests for identifier serialization."""

    def test_round_trip(self):
        """Serialized locators should parse back to themselves."""
        locator = Locator(kind="structured", name="abc", type_tag=TAG)

        assert Locator.from_bytes(locator.to_bytes()) == locator

    def test_serialization_is_canonical(self):
        """Equal locators should serialize to equal bytes."""
        assert Locator(kind="immutable", name="x").to_bytes() == (
            b'{"kind":"immutable","name":"x","type_tag":null}'
        )

    @pytest.mark.parametrize(
        "data",
        [b"", b"not json", b'{"kind":"folder","name":"x"}', b'{"name":"x"}'],
    )
    def test_rejects_garbage(self, data):
        """Bytes that are not an identifier should be malformed."""
        with pytest.raises(MalformedPayloadError):
            Locator.from_bytes(data)


class TestImmutableData:
    """Tests for content-addressed blobs."""

    @pytest.mark.asyncio
    async def test_put_and_get(self, storage):
        """Stored content should be readable through its identifier."""
        async with await storage.put_immutable(b"video") as identifier:
            assert await storage.get_immutable(identifier) == b"video"

    @pytest.mark.asyncio
    async def test_named_by_content(self, storage, network):
        """Same content should map to the same identifier and one blob."""
        async with await storage.put_immutable(b"video") as first:
            async with await storage.put_immutable(b"video") as second:
                assert await first.serialize() == await second.serialize()

        assert list(network.blobs) == [content_digest(b"video")]

    @pytest.mark.asyncio
    async def test_get_unknown_not_found(self, storage):
        """An unknown blob should be NotFound."""
        data = Locator(kind="immutable", name="missing").to_bytes()

        async with await storage.deserialize_identifier(data) as identifier:
            with pytest.raises(NotFoundError):
                await storage.get_immutable(identifier)


class TestStructuredRecord:
    """Tests for versioned structured records."""

    @pytest.mark.asyncio
    async def test_first_save_is_version_zero(self, storage):
        """A new record should start at version 0."""
        async with await storage.create_structured("rec", TAG, b"payload") as record:
            await record.save()

            assert await record.read_payload() == b"payload"
            assert (await record.get_metadata()).version == 0

    @pytest.mark.asyncio
    async def test_update_bumps_version(self, storage):
        """Each saved update should bump the version by one."""
        async with await storage.create_structured("rec", TAG, b"v0") as record:
            await record.save()
            await record.update_payload(b"v1")
            await record.save()
            await record.update_payload(b"v2")
            await record.save()

            assert await record.read_payload() == b"v2"
            assert (await record.get_metadata()).version == 2

    @pytest.mark.asyncio
    async def test_save_without_update_keeps_version(self, storage):
        """Saving with nothing pending should not bump the version."""
        async with await storage.create_structured("rec", TAG, b"v0") as record:
            await record.save()
            await record.save()

            assert (await record.get_metadata()).version == 0

    @pytest.mark.asyncio
    async def test_writes_visible_through_other_handles(self, storage):
        """Metadata should be read fresh, not cached per handle."""
        async with await storage.create_structured("rec", TAG, b"v0") as record:
            await record.save()
            async with await record.to_identifier() as identifier:
                other = await storage.structured_from_identifier(identifier)

            async with other:
                await other.update_payload(b"v1")
                await other.save()

            assert (await record.get_metadata()).version == 1
            assert await record.read_payload() == b"v1"

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, storage):
        """A second record under the same name and tag cannot be created."""
        async with await storage.create_structured("rec", TAG, b"a") as record:
            await record.save()

        async with await storage.create_structured("rec", TAG, b"b") as duplicate:
            with pytest.raises(StorageWriteError):
                await duplicate.save()

    @pytest.mark.asyncio
    async def test_type_tag_is_part_of_the_name(self, storage, network):
        """The same name under another tag is a different record."""
        for tag in (TAG, TAG + 1):
            async with await storage.create_structured("rec", tag, b"x") as record:
                await record.save()

        assert set(network.records) == {("rec", TAG), ("rec", TAG + 1)}

    @pytest.mark.asyncio
    async def test_unsaved_record_not_found(self, storage):
        """Reading a record that was never saved should be NotFound."""
        async with await storage.create_structured("rec", TAG, b"x") as record:
            with pytest.raises(NotFoundError):
                await record.read_payload()

    @pytest.mark.asyncio
    async def test_resolve_wrong_kind_not_found(self, storage):
        """A blob identifier does not resolve to a structured record."""
        async with await storage.put_immutable(b"video") as identifier:
            with pytest.raises(NotFoundError):
                await storage.structured_from_identifier(identifier)


class TestAppendableList:
    """Tests for append-only lists."""

    @pytest.mark.asyncio
    async def test_append_and_read(self, storage):
        """Entries should be kept in append order."""
        blob = await storage.put_immutable(b"video")

        async with await storage.create_appendable("seed") as entries:
            await entries.save()
            await entries.append(blob)
            await entries.append(blob)

            assert (await entries.get_metadata()).length == 2
            async with await entries.at(1) as entry:
                assert await entry.serialize() == await blob.serialize()

        await blob.dispose()

    @pytest.mark.asyncio
    async def test_append_before_save_fails(self, storage):
        """An unsaved list cannot be appended to."""
        async with await storage.put_immutable(b"video") as blob:
            async with await storage.create_appendable("seed") as entries:
                with pytest.raises(StorageWriteError):
                    await entries.append(blob)

    @pytest.mark.asyncio
    async def test_at_out_of_range(self, storage):
        """Reading past the end should fail."""
        async with await storage.create_appendable("seed") as entries:
            await entries.save()
            with pytest.raises(IndexOutOfRangeError):
                await entries.at(0)

    @pytest.mark.asyncio
    async def test_resolve_unknown_not_found(self, storage):
        """An unknown list should be NotFound."""
        data = Locator(kind="appendable", name="missing").to_bytes()

        async with await storage.deserialize_identifier(data) as identifier:
            with pytest.raises(NotFoundError):
                await storage.appendable_from_identifier(identifier)


class TestHandles:
    """Tests for handle lifetime accounting."""

    @pytest.mark.asyncio
    async def test_counts_open_handles(self, storage, network):
        """Every handle counts until disposed."""
        blob = await storage.put_immutable(b"video")
        entries = await storage.create_appendable("seed")
        assert network.open_handles == 2

        await blob.dispose()
        await entries.dispose()
        assert network.open_handles == 0

    @pytest.mark.asyncio
    async def test_double_dispose_fails(self, storage):
        """A handle can only be released once."""
        blob = await storage.put_immutable(b"video")
        await blob.dispose()

        with pytest.raises(DisposedError):
            await blob.dispose()

    @pytest.mark.asyncio
    async def test_use_after_dispose_fails(self, storage):
        """A released handle cannot be used."""
        blob = await storage.put_immutable(b"video")
        await blob.dispose()

        with pytest.raises(DisposedError):
            await blob.serialize()

    @pytest.mark.asyncio
    async def test_clients_share_a_network(self, storage, network):
        """Data written by one client is visible to another on the same network."""
        other = InMemoryStorageClient(network)

        async with await storage.put_immutable(b"video") as blob:
            data = await blob.serialize()

        async with await other.deserialize_identifier(data) as identifier:
            assert await other.get_immutable(identifier) == b"video"
