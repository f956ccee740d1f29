"""Tests for the AnnotationStore."""

from unittest.mock import patch

import pytest

from nafa_mvp.domain.annotation import AnnotationInput
from nafa_mvp.foundation.identifiers import AnnotationIdGenerator
from nafa_mvp.store.annotation_store import AnnotationStore

from tests.test_annotation import _valid_annotation


@pytest.fixture
def store() -> AnnotationStore:
    return AnnotationStore()


def _input(**kw) -> AnnotationInput:
    return AnnotationInput.model_validate(_valid_annotation(**kw))


def _frozen_clock(ms: int):
    """Freeze epoch_millis() as seen by the store."""
    return patch("nafa_mvp.store.annotation_store.epoch_millis", return_value=ms)


class TestAnnotationStore:
    @pytest.mark.asyncio
    async def test_insert_grows_list_by_one(self, store: AnnotationStore) -> None:
        before = await store.list_all()
        await store.insert(_input())
        after = await store.list_all()
        assert len(after) == len(before) + 1

    @pytest.mark.asyncio
    async def test_insert_returns_stored_record(self, store: AnnotationStore) -> None:
        ann = await store.insert(_input())
        assert (await store.list_all())[-1] == ann
        assert await store.get(ann.id) == ann

    @pytest.mark.asyncio
    async def test_visible_fields_match_input(self, store: AnnotationStore) -> None:
        data = _input()
        ann = await store.insert(data)
        stored = ann.model_dump(exclude={"id", "timestamp"})
        assert stored == data.model_dump()

    @pytest.mark.asyncio
    async def test_scenario_minimal_body(self, store: AnnotationStore) -> None:
        data = AnnotationInput.model_validate(
            {"locationId": "x", "locationName": "X", "noise": 4, "light": 6, "crowd": 3}
        )
        ann = await store.insert(data)
        assert ann.id.startswith("ann-")
        assert ann.notes is None
        assert ann.timestamp > 0
        assert ann in await store.list_all()

    @pytest.mark.asyncio
    async def test_timestamp_comes_from_clock(self, store: AnnotationStore) -> None:
        with _frozen_clock(1_700_000_000_123):
            ann = await store.insert(_input())
        assert ann.timestamp == 1_700_000_000_123
        assert ann.id == "ann-1700000000123"

    @pytest.mark.asyncio
    async def test_rapid_inserts_get_distinct_ids(self, store: AnnotationStore) -> None:
        with _frozen_clock(1000):
            first = await store.insert(_input(locationId="a"))
            second = await store.insert(_input(locationId="b"))
        assert first.id != second.id
        assert first.timestamp == second.timestamp == 1000
        assert [a.id for a in await store.list_all()] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, store: AnnotationStore) -> None:
        for loc in ("c", "a", "b"):
            await store.insert(_input(locationId=loc))
        assert [a.location_id for a in await store.list_all()] == ["c", "a", "b"]

    @pytest.mark.asyncio
    async def test_duplicate_submissions_are_kept(self, store: AnnotationStore) -> None:
        data = _input()
        await store.insert(data)
        await store.insert(data)
        assert await store.count() == 2

    @pytest.mark.asyncio
    async def test_list_all_returns_copy(self, store: AnnotationStore) -> None:
        await store.insert(_input())
        listing = await store.list_all()
        listing.clear()
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_get_returns_none_for_unknown(self, store: AnnotationStore) -> None:
        assert await store.get("ann-missing") is None

    @pytest.mark.asyncio
    async def test_custom_id_prefix(self) -> None:
        store = AnnotationStore(id_generator=AnnotationIdGenerator(prefix="note-"))
        ann = await store.insert(_input())
        assert ann.id.startswith("note-")
