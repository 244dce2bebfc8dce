# picker_service.py
# Description: Entry point the presentation layer uses to drive the emoji picker
#
"""
picker_service.py
-----------------

Wires the catalog index, frequency store, composer and search filter into
one object a picker widget talks to.

A widget opens a `PickerSession` when it is shown and closes it when it goes
away. Reads started through a session resolve to None once the session is
closed, so a slow database read cannot touch a picker that no longer exists.
"""
#
# Imports
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
#
# 3rd-party Libraries
from loguru import logger
#
# Local Imports
from ..DB.base_db import DatabaseError
from ..DB.frequency_db import FrequentlyUsedEmojisDB
from .catalog_index import CatalogIndex, CustomDefinitionSource
from .composer import Composer
from .display import SelectionResult, resolve_selection
from .emoji_categories import DEFAULT_EMOJIS
from .emoji_models import EmojiIdentity, Tab
from .frequency_store import FrequencyStore, RankingPolicy
from .search_filter import SearchFilter
#
#######################################################################################################################
#
# Classes:

class EmojiPickerService:
    """Facade over the emoji catalog and frequency ranking."""

    def __init__(
        self,
        catalog: CatalogIndex,
        store: FrequencyStore,
        base_url: str = "",
        frequent_limit: Optional[int] = None,
        default_set: Sequence[str] = DEFAULT_EMOJIS,
    ):
        self.catalog = catalog
        self.store = store
        self.base_url = base_url
        self.frequent_limit = frequent_limit
        self.composer = Composer(catalog, store)
        self.search_filter = SearchFilter(store, default_set)

    @classmethod
    def from_config(
        cls,
        config: Optional[Dict[str, Any]] = None,
        policy: Optional[RankingPolicy] = None,
    ) -> "EmojiPickerService":
        """
        Build a service from the loaded configuration.

        Without an explicit config, custom emoji definitions are re-read from
        the config cache on every catalog access. A frequency database that
        cannot be opened is replaced by an in-memory one for this process.
        """
        from ..config import get_custom_emoji_definitions, get_frequency_db_path, load_config

        custom_source: CustomDefinitionSource
        if config is None:
            config = load_config()
            db_path: Union[str, Path] = get_frequency_db_path()
            custom_source = get_custom_emoji_definitions
        else:
            db_path = config.get("database", {}).get("frequency_db_path", ":memory:")
            custom_source = lambda: get_custom_emoji_definitions(config)

        try:
            db = FrequentlyUsedEmojisDB(db_path)
        except DatabaseError as e:
            logger.error(f"Could not open frequency database at {db_path}: {e}. Counts will not persist.")
            db = FrequentlyUsedEmojisDB(":memory:")

        picker_section = config.get("picker", {})
        frequent_limit = picker_section.get("frequent_limit") or None
        default_set = picker_section.get("default_emojis") or DEFAULT_EMOJIS

        return cls(
            catalog=CatalogIndex(custom_source),
            store=FrequencyStore(db, policy),
            base_url=config.get("server", {}).get("base_url", ""),
            frequent_limit=frequent_limit,
            default_set=default_set,
        )

    async def on_emoji_selected(self, identity: EmojiIdentity) -> SelectionResult:
        """Count the selection, then resolve what the host should insert."""
        await self.store.record_selection(identity)
        return resolve_selection(identity, self.base_url)

    async def build_tabs(self) -> List[Tab]:
        return await self.composer.build_tabs(self.frequent_limit)

    async def search(self, query: Optional[str]) -> List[EmojiIdentity]:
        return await self.search_filter.search(query, self.flattened_catalog())

    def flattened_catalog(self) -> List[EmojiIdentity]:
        return self.composer.flattened_catalog()

    def open_session(self) -> "PickerSession":
        return PickerSession(self)

    def close(self):
        self.store.close()


class PickerSession:
    """Reads on behalf of one open picker; results arriving after `close` are dropped."""

    def __init__(self, service: EmojiPickerService):
        self.service = service
        self.closed = False

    async def load_tabs(self) -> Optional[List[Tab]]:
        tabs = await self.service.build_tabs()
        if self.closed:
            logger.debug("Discarding emoji tabs loaded for a closed picker")
            return None
        return tabs

    async def search(self, query: Optional[str]) -> Optional[List[EmojiIdentity]]:
        results = await self.service.search(query)
        if self.closed:
            logger.debug("Discarding emoji search results for a closed picker")
            return None
        return results

    async def select(self, identity: EmojiIdentity) -> SelectionResult:
        """Selections are recorded even if the picker closes meanwhile."""
        return await self.service.on_emoji_selected(identity)

    def close(self):
        self.closed = True

#
# End of picker_service.py
#######################################################################################################################
