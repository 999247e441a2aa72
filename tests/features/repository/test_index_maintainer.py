"""Tests for secondary index maintenance."""

from unittest.mock import AsyncMock, call

import pytest

from neo_hashstore import DecodeError, IndexMaintainer

from sample_records import CounterRecord, ExampleRecord, SessionRecord


class TestIndexKeys:
    """Test index key computation."""

    def test_keys_for_set_values(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)

        keys = maintainer.index_keys(
            ExampleRecord(id="abc", test_field1="a", test_field2="b"),
            registry.resolve(ExampleRecord),
        )

        assert keys == ["example:testField1:a", "example:testField2:b"]

    def test_none_values_are_skipped(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)

        keys = maintainer.index_keys(ExampleRecord(id="abc", test_field1="a"), registry.resolve(ExampleRecord))

        assert keys == ["example:testField1:a"]

    def test_enum_values(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)

        keys = maintainer.index_keys(SessionRecord(id="s1", user_id="u1"), registry.resolve(SessionRecord))

        assert keys == ["session:user_id:u1", "session:status:active"]


class TestIndexMaintainer:
    """Test adding and removing index entries."""

    @pytest.mark.asyncio
    async def test_add_entries(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)
        record = ExampleRecord(id="abc", test_field1="a", test_field2="b")

        await maintainer.add_entries(record, "abc", registry.resolve(ExampleRecord))

        mock_store.set_add.assert_has_awaits([
            call("example:testField1:a", "abc"),
            call("example:testField2:b", "abc"),
        ], any_order=True)

    @pytest.mark.asyncio
    async def test_add_entries_without_indexed_fields(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)

        await maintainer.add_entries(CounterRecord(id="c1"), "c1", registry.resolve(CounterRecord))

        mock_store.set_add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_entries_uses_stored_values(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)
        loader = AsyncMock(return_value=ExampleRecord(id="abc", test_field1="stored", test_field2="b"))

        removed = await maintainer.remove_entries(registry.resolve(ExampleRecord), "abc", loader)

        loader.assert_awaited_once_with("abc")
        assert removed == ("example:testField1:stored", "example:testField2:b")
        mock_store.set_remove.assert_has_awaits([
            call("example:testField1:stored", "abc"),
            call("example:testField2:b", "abc"),
        ], any_order=True)

    @pytest.mark.asyncio
    async def test_remove_entries_skipped_when_record_is_gone(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)
        loader = AsyncMock(return_value=None)

        removed = await maintainer.remove_entries(registry.resolve(ExampleRecord), "abc", loader)

        assert removed == ()
        mock_store.set_remove.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, mock_store, registry):
        mock_store.set_add.side_effect = ConnectionError("store down")
        maintainer = IndexMaintainer(mock_store)

        with pytest.raises(ConnectionError):
            await maintainer.add_entries(
                ExampleRecord(id="abc", test_field1="a"), "abc", registry.resolve(ExampleRecord)
            )

    @pytest.mark.asyncio
    async def test_remove_entries_skipped_when_record_cannot_be_decoded(self, mock_store, registry):
        maintainer = IndexMaintainer(mock_store)
        loader = AsyncMock(side_effect=DecodeError(ExampleRecord, original_error=ValueError("bad")))

        removed = await maintainer.remove_entries(registry.resolve(ExampleRecord), "abc", loader)

        assert removed == ()
        mock_store.set_remove.assert_not_awaited()
