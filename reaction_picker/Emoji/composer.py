# composer.py
# Description: Builds the ordered picker tabs from the catalog and the frequency store
#
# Imports
from typing import Iterable, List, Optional
#
# Local Imports
from .catalog_index import CatalogIndex
from .emoji_categories import CUSTOM_CATEGORY, FREQUENTLY_USED_CATEGORY
from .emoji_models import EmojiCategory, EmojiIdentity, Tab, dedupe_identities
from .frequency_store import FrequencyStore
#
#######################################################################################################################
#
# Classes:

class Composer:
    """
    Merges catalog and frequency data into picker tabs.

    Tab order is fixed: frequently used (only when non-empty), custom, then
    every standard category. Frequently used emoji stay in their own
    category tab as well.
    """

    def __init__(self, catalog: CatalogIndex, store: FrequencyStore):
        self.catalog = catalog
        self.store = store

    async def build_tabs(self, frequent_limit: Optional[int] = None) -> List[Tab]:
        tabs: List[Tab] = []

        frequent = dedupe_identities(await self.store.ranked_list(frequent_limit))
        if frequent:
            tabs.append(self._tab(FREQUENTLY_USED_CATEGORY, frequent))

        tabs.append(self._tab(CUSTOM_CATEGORY, self.catalog.custom_emojis()))

        for category in self.catalog.standard_categories():
            tabs.append(self._tab(category, self.catalog.entries_for(category.name)))
        return tabs

    @staticmethod
    def _tab(category: EmojiCategory, entries: Iterable[EmojiIdentity]) -> Tab:
        return Tab(
            role=category.role,
            label=category.label,
            entries=tuple(entries),
            category=category.name,
            icon=category.icon,
        )

    def flattened_catalog(self) -> List[EmojiIdentity]:
        """Custom emoji first, then the standard categories in order, one entry per key."""
        return dedupe_identities([*self.catalog.custom_emojis(), *self.catalog.standard_emojis()])

#
# End of composer.py
#######################################################################################################################
