# test_frequency_store.py
# Description: Tests for the async frequency store and its ranking
#
import asyncio
from unittest.mock import MagicMock

import pytest

from reaction_picker.DB.frequency_db import FrequencyDBError, FrequentlyUsedEmojisDB
from reaction_picker.Emoji.emoji_models import CustomEmoji, FrequencyRecord, StandardEmoji
from reaction_picker.Emoji.frequency_store import CountRankingPolicy, FrequencyStore, RankingPolicy


GRINNING = StandardEmoji("grinning")
SMILE = StandardEmoji("smile")
HEART = StandardEmoji("heart")
PARTYPARROT = CustomEmoji("partyparrot", "gif")


async def select(store, identity, times=1):
    for _ in range(times):
        await store.record_selection(identity)


class TestRecordSelection:

    @pytest.mark.asyncio
    async def test_first_selection_creates_record(self, frequency_store):
        record = await frequency_store.record_selection(GRINNING)

        assert record.id == "grinning"
        assert record.count == 1
        assert record.is_custom is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("times", [1, 2, 5, 12])
    async def test_count_matches_number_of_selections(self, frequency_store, times):
        await select(frequency_store, GRINNING, times)

        records = await frequency_store.ranked_records()
        assert [(r.id, r.count) for r in records] == [("grinning", times)]

    @pytest.mark.asyncio
    async def test_custom_selection_keeps_extension(self, frequency_store):
        await frequency_store.record_selection(PARTYPARROT)

        ranked = await frequency_store.ranked_list()
        assert ranked == [PARTYPARROT]
        assert ranked[0].extension == "gif"
        assert ranked[0].is_custom

    @pytest.mark.asyncio
    async def test_concurrent_double_selection_counts_twice(self, frequency_store):
        await asyncio.gather(
            frequency_store.record_selection(GRINNING),
            frequency_store.record_selection(GRINNING),
        )

        record = (await frequency_store.ranked_records())[0]
        assert record.count == 2

    @pytest.mark.asyncio
    async def test_many_concurrent_selections_on_file_store(self, temp_db_path):
        db = FrequentlyUsedEmojisDB(temp_db_path)
        store = FrequencyStore(db)
        try:
            await asyncio.gather(
                *[store.record_selection(GRINNING) for _ in range(20)],
                *[store.record_selection(SMILE) for _ in range(10)],
            )
            counts = {r.id: r.count for r in await store.ranked_records()}
        finally:
            store.close()

        assert counts == {"grinning": 20, "smile": 10}

    @pytest.mark.asyncio
    async def test_persistence_failure_is_swallowed(self, log_records):
        db = MagicMock(spec=FrequentlyUsedEmojisDB)
        db.increment.side_effect = FrequencyDBError("disk I/O error")
        store = FrequencyStore(db)

        result = await store.record_selection(GRINNING)

        assert result is None
        errors = [r for r in log_records if r["level"].name == "ERROR"]
        assert any("grinning" in r["message"] for r in errors)

    @pytest.mark.asyncio
    async def test_selection_on_closed_database_is_swallowed(self, memory_db):
        store = FrequencyStore(memory_db)
        memory_db.close()

        assert await store.record_selection(GRINNING) is None
        assert await store.ranked_list() == []

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_swallowed(self, log_records):
        db = MagicMock(spec=FrequentlyUsedEmojisDB)
        db.increment.side_effect = RuntimeError("executor shut down")
        store = FrequencyStore(db)

        assert await store.record_selection(GRINNING) is None
        errors = [r for r in log_records if r["level"].name == "ERROR"]
        assert any("grinning" in r["message"] for r in errors)

    def test_store_shared_across_event_loops(self, memory_db):
        store = FrequencyStore(memory_db)

        async def burst():
            await asyncio.gather(*[store.record_selection(GRINNING) for _ in range(3)])

        asyncio.run(burst())
        asyncio.run(burst())

        assert memory_db.get_record("grinning")["count"] == 6


class TestRankedList:

    @pytest.mark.asyncio
    async def test_empty_store(self, frequency_store):
        assert await frequency_store.ranked_list() == []

    @pytest.mark.asyncio
    async def test_standard_and_custom_ranked_by_count(self, frequency_store):
        await select(frequency_store, GRINNING, 3)
        await select(frequency_store, PARTYPARROT, 1)

        records = await frequency_store.ranked_records()
        assert [(r.id, r.count) for r in records] == [("grinning", 3), ("partyparrot", 1)]
        assert await frequency_store.ranked_list() == [GRINNING, PARTYPARROT]

    @pytest.mark.asyncio
    async def test_distinct_counts_descending(self, frequency_store):
        await select(frequency_store, SMILE, 2)
        await select(frequency_store, HEART, 5)
        await select(frequency_store, GRINNING, 1)

        counts = [r.count for r in await frequency_store.ranked_records()]
        assert counts == [5, 2, 1]

    @pytest.mark.asyncio
    async def test_ties_most_recent_write_first(self, frequency_store):
        await select(frequency_store, GRINNING)
        await select(frequency_store, SMILE)
        await select(frequency_store, HEART)

        first = await frequency_store.ranked_list()
        second = await frequency_store.ranked_list()

        assert first == [HEART, SMILE, GRINNING]
        assert first == second

    @pytest.mark.asyncio
    async def test_tie_broken_by_latest_increment(self, frequency_store):
        await select(frequency_store, GRINNING, 2)
        await select(frequency_store, SMILE, 2)
        await select(frequency_store, GRINNING, 1)
        await select(frequency_store, SMILE, 1)

        assert await frequency_store.ranked_list() == [SMILE, GRINNING]

    @pytest.mark.asyncio
    async def test_limit(self, frequency_store):
        await select(frequency_store, GRINNING, 3)
        await select(frequency_store, SMILE, 2)
        await select(frequency_store, HEART, 1)

        assert await frequency_store.ranked_list(limit=2) == [GRINNING, SMILE]
        assert await frequency_store.ranked_list(limit=0) == []

    @pytest.mark.asyncio
    async def test_read_failure_returns_empty(self, log_records):
        db = MagicMock(spec=FrequentlyUsedEmojisDB)
        db.fetch_records.side_effect = FrequencyDBError("database is locked")
        store = FrequencyStore(db)

        assert await store.ranked_list() == []
        assert any(r["level"].name == "ERROR" for r in log_records)

    @pytest.mark.asyncio
    async def test_custom_row_without_extension_skipped(self, memory_db, log_records):
        memory_db.increment("ghost", is_custom=True, extension=None)
        memory_db.increment("grinning", is_custom=False)
        store = FrequencyStore(memory_db)

        assert await store.ranked_list() == [GRINNING]
        warnings = [r for r in log_records if r["level"].name == "WARNING"]
        assert any("ghost" in r["message"] for r in warnings)

    @pytest.mark.asyncio
    async def test_custom_policy(self, frequency_store):
        class AlphabeticalPolicy(RankingPolicy):
            def rank(self, records):
                return sorted(records, key=lambda record: record.id)

        frequency_store.policy = AlphabeticalPolicy()
        await select(frequency_store, SMILE, 3)
        await select(frequency_store, GRINNING, 1)

        assert await frequency_store.ranked_list() == [GRINNING, SMILE]


class TestCountRankingPolicy:

    def test_count_then_recency(self):
        records = [
            FrequencyRecord("a", False, count=1, write_seq=1),
            FrequencyRecord("b", False, count=4, write_seq=2),
            FrequencyRecord("c", False, count=1, write_seq=3),
            FrequencyRecord("d", False, count=4, write_seq=4),
        ]

        ranked = CountRankingPolicy().rank(records)

        assert [r.id for r in ranked] == ["d", "b", "c", "a"]


class TestFrequencyRecordIdentity:

    def test_custom_record_keeps_extension(self):
        record = FrequencyRecord("partyparrot", True, extension="gif")

        assert record.to_identity() == PARTYPARROT
        assert record.to_identity().extension == "gif"

    def test_custom_record_without_extension_rejected(self):
        with pytest.raises(ValueError):
            FrequencyRecord("ghost", True, extension=None).to_identity()
