# catalog_index.py
# Description: Category index over standard emoji and site-defined custom emoji
#
"""
catalog_index.py
----------------

Maps category names to ordered emoji identities.

Standard categories come from the fixed table in `emoji_categories` and are
loaded once per index. The custom category is rebuilt on every call from the
live definition set of the configuration collaborator, a mapping of
``name -> {"name": ..., "extension": ...}`` (or a zero-argument callable
returning one). A definition only enters the catalog when its declared name
matches its own key and it names an extension; anything else is skipped
without raising.
"""
#
# Imports
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union
#
# 3rd-party Libraries
from loguru import logger
#
# Local Imports
from .display import display_text, is_known_code
from .emoji_categories import (
    CUSTOM,
    CUSTOM_CATEGORY,
    EMOJIS_BY_CATEGORY,
    FREQUENTLY_USED,
    FREQUENTLY_USED_CATEGORY,
    STANDARD_CATEGORIES,
)
from .emoji_models import (
    CatalogEntry,
    CustomEmoji,
    EmojiCategory,
    EmojiIdentity,
    StandardEmoji,
    dedupe_identities,
)
#
#######################################################################################################################
#
# Types:

CustomDefinitions = Mapping[str, Mapping[str, Any]]
CustomDefinitionSource = Union[CustomDefinitions, Callable[[], Optional[CustomDefinitions]], None]

#
# Functions:

def normalize_custom_definitions(definitions: Optional[CustomDefinitions]) -> List[CustomEmoji]:
    """
    Turn raw custom definitions into identities, in definition order.

    Skips entries whose ``name`` differs from their key, entries without an
    extension and entries that are not mappings at all.
    """
    if not definitions:
        return []
    custom: List[CustomEmoji] = []
    for key, definition in definitions.items():
        if not isinstance(definition, Mapping):
            logger.debug(f"Skipping custom emoji '{key}': definition is not a mapping")
            continue
        if definition.get("name") != key:
            logger.debug(f"Skipping custom emoji '{key}': declared name {definition.get('name')!r} does not match")
            continue
        extension = definition.get("extension")
        if not extension or not isinstance(extension, str):
            logger.debug(f"Skipping custom emoji '{key}': no extension")
            continue
        custom.append(CustomEmoji(content=key, extension=extension))
    return custom

#
# Classes:

class CatalogIndex:
    """Ordered categories and their emoji identities."""

    def __init__(
        self,
        custom_definitions: CustomDefinitionSource = None,
        standard_categories: Sequence[EmojiCategory] = STANDARD_CATEGORIES,
        emojis_by_category: Mapping[str, Sequence[str]] = EMOJIS_BY_CATEGORY,
    ):
        self._custom_source = custom_definitions
        self._standard_categories: Tuple[EmojiCategory, ...] = tuple(standard_categories)
        self._standard_entries: Dict[str, Tuple[StandardEmoji, ...]] = {}
        self._category_by_code: Dict[str, str] = {}
        for category in self._standard_categories:
            codes = emojis_by_category.get(category.name, ())
            entries = tuple(dedupe_identities(StandardEmoji(code) for code in codes))
            self._standard_entries[category.name] = entries
            for entry in entries:
                self._category_by_code.setdefault(entry.code, category.name)
        logger.debug(
            f"CatalogIndex loaded {len(self._category_by_code)} standard emoji "
            f"in {len(self._standard_categories)} categories"
        )

    def categories(self) -> List[EmojiCategory]:
        """Every tab category in fixed order: frequently used, custom, then standard."""
        return [FREQUENTLY_USED_CATEGORY, CUSTOM_CATEGORY, *self._standard_categories]

    def standard_categories(self) -> List[EmojiCategory]:
        return list(self._standard_categories)

    def entries_for(self, category: str) -> List[EmojiIdentity]:
        """
        Ordered identities of one category.

        Raises:
            ValueError: For the frequently used category, which the
                frequency store serves.
            KeyError: For a category name the index does not know.
        """
        if category == CUSTOM:
            return list(self.custom_emojis())
        if category == FREQUENTLY_USED:
            raise ValueError("Frequently used emoji are served by the frequency store, not the catalog")
        try:
            return list(self._standard_entries[category])
        except KeyError:
            raise KeyError(f"Unknown emoji category: {category!r}") from None

    def custom_emojis(self) -> List[CustomEmoji]:
        """Currently defined custom emoji, read fresh from the collaborator."""
        source = self._custom_source
        try:
            definitions = source() if callable(source) else source
        except Exception as e:
            logger.warning(f"Custom emoji definitions unavailable, showing none: {e}")
            return []
        return normalize_custom_definitions(definitions)

    def category_of(self, identity: EmojiIdentity) -> Optional[str]:
        """Name of the category an identity is browsed under, if any."""
        if isinstance(identity, CustomEmoji):
            return CUSTOM
        return self._category_by_code.get(identity.code)

    def standard_emojis(self) -> List[StandardEmoji]:
        """All standard identities in category order."""
        return [
            entry
            for category in self._standard_categories
            for entry in self._standard_entries[category.name]
        ]

    def catalog_entries(self) -> List[CatalogEntry]:
        """
        The whole catalog as entries, custom emoji first.

        `display_text` is None for a standard code the emoji table cannot
        resolve to a glyph.
        """
        entries: List[CatalogEntry] = [
            CatalogEntry(identity=custom, category=CUSTOM, display_text=display_text(custom))
            for custom in self.custom_emojis()
        ]
        for category in self._standard_categories:
            for standard in self._standard_entries[category.name]:
                text = display_text(standard) if is_known_code(standard.code) else None
                entries.append(CatalogEntry(identity=standard, category=category.name, display_text=text))
        return entries

#
# End of catalog_index.py
#######################################################################################################################
