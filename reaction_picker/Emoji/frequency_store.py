# frequency_store.py
# Description: Async facade over the frequency database with pluggable ranking
#
# Imports
import asyncio
import weakref
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
#
# 3rd-party Libraries
from loguru import logger
#
# Local Imports
from ..DB.frequency_db import FrequencyDBError, FrequentlyUsedEmojisDB
from .emoji_models import EmojiIdentity, FrequencyRecord
#
#######################################################################################################################
#
# Ranking Policies:

class RankingPolicy(ABC):
    """Orders frequency records for display."""

    @abstractmethod
    def rank(self, records: Sequence[FrequencyRecord]) -> List[FrequencyRecord]:
        ...


class CountRankingPolicy(RankingPolicy):
    """
    Highest count first, ties broken by the most recent write.

    Counts are unbounded and never decay.
    """

    def rank(self, records: Sequence[FrequencyRecord]) -> List[FrequencyRecord]:
        return sorted(records, key=lambda record: (-record.count, -record.write_seq))

#
# Store:

class FrequencyStore:
    """
    Per-emoji selection counters.

    The store owns every write to the frequency table. Selections of the same
    emoji are serialized by a per-key lock, and the database increment is a
    single UPSERT, so back-to-back selections never lose an update. Errors are
    logged and never reach the caller.

    asyncio locks belong to the loop they first wait on, so the lock table is
    kept per running loop. A store may outlive the loop that created it.
    """

    def __init__(self, db: FrequentlyUsedEmojisDB, policy: Optional[RankingPolicy] = None):
        self.db = db
        self.policy = policy or CountRankingPolicy()
        self._locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, Dict[str, asyncio.Lock]]" = (
            weakref.WeakKeyDictionary()
        )

    def _lock_for(self, key: str) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        locks = self._locks.get(loop)
        if locks is None:
            locks = {}
            self._locks[loop] = locks
        lock = locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            locks[key] = lock
        return lock

    async def record_selection(self, identity: EmojiIdentity) -> Optional[FrequencyRecord]:
        """
        Count one selection of `identity`.

        Returns:
            The stored record, or None when the write failed.
        """
        extension = getattr(identity, "extension", None) if identity.is_custom else None
        try:
            async with self._lock_for(identity.key):
                row = await asyncio.to_thread(self.db.increment, identity.key, identity.is_custom, extension)
            return FrequencyRecord.from_row(row)
        except FrequencyDBError as e:
            logger.error(f"Failed to record selection of '{identity.key}': {e}")
        except Exception as e:
            logger.exception(f"Unexpected error recording selection of '{identity.key}': {e}")
        return None

    async def ranked_records(self, limit: Optional[int] = None) -> List[FrequencyRecord]:
        try:
            rows = await asyncio.to_thread(self.db.fetch_records)
        except FrequencyDBError as e:
            logger.error(f"Failed to read frequently used emoji: {e}")
            return []
        records = []
        for row in rows:
            record = FrequencyRecord.from_row(row)
            if record.is_custom and not record.extension:
                # No asset can be built for it
                logger.warning(f"Skipping custom emoji '{record.id}' stored without an extension")
                continue
            records.append(record)
        ranked = self.policy.rank(records)
        if limit is not None:
            ranked = ranked[:max(limit, 0)]
        return ranked

    async def ranked_list(self, limit: Optional[int] = None) -> List[EmojiIdentity]:
        """Frequently used identities, best ranked first; empty when nothing was selected yet."""
        return [record.to_identity() for record in await self.ranked_records(limit)]

    def close(self):
        self.db.close()

#
# End of frequency_store.py
#######################################################################################################################
