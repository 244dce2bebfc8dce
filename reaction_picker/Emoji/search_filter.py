# search_filter.py
# Description: Free-text filtering of the flattened emoji catalog
#
"""
search_filter.py
----------------

Case-insensitive substring search over emoji keys.

An empty query does not filter anything; it returns the fallback view shown
under an empty search bar: the frequently used emoji followed by a fixed
default set.
"""
#
# Imports
from typing import Iterable, List, Optional, Sequence
#
# 3rd-party Libraries
from loguru import logger
#
# Local Imports
from ..logging_config import truncate_query
from .emoji_categories import DEFAULT_EMOJIS
from .emoji_models import EmojiIdentity, StandardEmoji, dedupe_identities
from .frequency_store import FrequencyStore
#
#######################################################################################################################
#
# Functions:

def normalize_query(query: Optional[str]) -> str:
    """Lowercase the query and strip whitespace and short-name colons (':smi' -> 'smi')."""
    if not query:
        return ""
    return query.strip().strip(":").strip().lower()


def empty_query_view(
    frequently_used: Iterable[EmojiIdentity] = (),
    default_set: Sequence[str] = DEFAULT_EMOJIS,
) -> List[EmojiIdentity]:
    """Frequently used emoji, then the default set minus anything already listed."""
    return dedupe_identities([*frequently_used, *(StandardEmoji(code) for code in default_set)])


def search(
    query: Optional[str],
    flattened_catalog: Iterable[EmojiIdentity],
    frequently_used: Iterable[EmojiIdentity] = (),
    default_set: Sequence[str] = DEFAULT_EMOJIS,
) -> List[EmojiIdentity]:
    """
    Filter the catalog by a query.

    Args:
        query: Raw text typed by the user
        flattened_catalog: Every selectable emoji in precedence order
        frequently_used: Ranked frequently used emoji, used for an empty query
        default_set: Standard codes appended to the empty-query view

    Returns:
        Matching identities in catalog order. An empty list means no match
        when a query was given.
    """
    needle = normalize_query(query)
    if not needle:
        return empty_query_view(frequently_used, default_set)
    return dedupe_identities(
        identity for identity in flattened_catalog if needle in identity.key.lower()
    )

#
# Classes:

class SearchFilter:
    """Search bound to a frequency store for the empty-query fallback."""

    def __init__(self, store: FrequencyStore, default_set: Sequence[str] = DEFAULT_EMOJIS):
        self.store = store
        self.default_set = tuple(default_set)

    async def search(
        self,
        query: Optional[str],
        flattened_catalog: Iterable[EmojiIdentity],
    ) -> List[EmojiIdentity]:
        if normalize_query(query):
            results = search(query, flattened_catalog, default_set=self.default_set)
            logger.debug(f"Emoji search for {truncate_query(query)!r} matched {len(results)} entries")
            return results
        frequently_used = await self.store.ranked_list()
        return empty_query_view(frequently_used, self.default_set)

#
# End of search_filter.py
#######################################################################################################################
