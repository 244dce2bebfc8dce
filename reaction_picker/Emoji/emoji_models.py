# emoji_models.py
# Description: Data models for the emoji catalog and frequency ranking
#
# Imports
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Tuple, Union
#
#######################################################################################################################
#
# Classes:

@dataclass(frozen=True)
class StandardEmoji:
    """A built-in pictograph named by its short code (e.g. 'grinning')."""
    code: str

    is_custom: ClassVar[bool] = False

    @property
    def key(self) -> str:
        return self.code


@dataclass(frozen=True)
class CustomEmoji:
    """
    A site-defined pictograph.

    `content` is the unique registry name and the identity of the emoji;
    `extension` selects the asset format and takes no part in equality.
    """
    content: str
    extension: str = field(compare=False)

    is_custom: ClassVar[bool] = True

    @property
    def key(self) -> str:
        return self.content


EmojiIdentity = Union[StandardEmoji, CustomEmoji]


def identity_key(identity: EmojiIdentity) -> str:
    """Return the textual key (standard code or custom content) of an identity."""
    return identity.key


def dedupe_identities(identities: Iterable[EmojiIdentity]) -> List[EmojiIdentity]:
    """Drop later entries whose key was already seen, keeping first-seen order."""
    seen = set()
    unique: List[EmojiIdentity] = []
    for identity in identities:
        if identity.key in seen:
            continue
        seen.add(identity.key)
        unique.append(identity)
    return unique


@dataclass
class FrequencyRecord:
    """
    Persisted selection counter for one identity.

    `write_seq` grows with every write to the store and orders records
    with equal counts (higher means written more recently).
    """
    id: str
    is_custom: bool
    count: int = 1
    extension: Optional[str] = None
    last_used_at: Optional[str] = None
    write_seq: int = 0

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "FrequencyRecord":
        return cls(
            id=row['id'],
            is_custom=bool(row['is_custom']),
            count=int(row['count']),
            extension=row.get('extension'),
            last_used_at=row.get('last_used_at'),
            write_seq=int(row.get('write_seq') or 0),
        )

    def to_identity(self) -> EmojiIdentity:
        if self.is_custom:
            if not self.extension:
                raise ValueError(f"Custom emoji record '{self.id}' has no extension")
            return CustomEmoji(content=self.id, extension=self.extension)
        return StandardEmoji(code=self.id)


class TabRole(Enum):
    """Role a picker tab plays; never inferred from its position."""
    FREQUENT = "frequent"
    CUSTOM = "custom"
    STANDARD = "standard"


@dataclass(frozen=True)
class EmojiCategory:
    name: str
    label: str
    icon: str
    role: TabRole = TabRole.STANDARD


@dataclass(frozen=True)
class CatalogEntry:
    identity: EmojiIdentity
    category: str
    display_text: Optional[str] = None


@dataclass(frozen=True)
class Tab:
    """
    One tab of picker data.

    `category` names the standard category for the STANDARD role and is
    the synthetic category name for the other roles.
    """
    role: TabRole
    label: str
    entries: Tuple[EmojiIdentity, ...]
    category: str
    icon: str = ""

    def __len__(self) -> int:
        return len(self.entries)

#
# End of emoji_models.py
#######################################################################################################################
