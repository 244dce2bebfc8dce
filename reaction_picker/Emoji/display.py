# display.py
# Description: Resolution of emoji identities into the form handed to the host UI
#
# Imports
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote
#
# 3rd-party Libraries
import emoji
#
# Local Imports
from .emoji_models import CustomEmoji, EmojiIdentity, StandardEmoji
#
#######################################################################################################################
#
# Functions:

def shortname(identity: EmojiIdentity) -> str:
    """Return the colon-wrapped short name, e.g. ':grinning:'."""
    return f":{identity.key}:"


def display_text(identity: EmojiIdentity) -> str:
    """
    Text inserted into a message for an identity.

    Standard codes become their glyph; a code the emoji table does not know
    is returned as its short name. Custom emoji are always sent as their
    short name and rendered from the asset by the receiving side.
    """
    if isinstance(identity, CustomEmoji):
        return shortname(identity)
    return emoji.emojize(shortname(identity), language="alias")


def is_known_code(code: str) -> bool:
    """Whether the emoji table resolves a standard short code to a glyph."""
    text = f":{code}:"
    return emoji.emojize(text, language="alias") != text


@dataclass(frozen=True)
class AssetReference:
    """Everything an external renderer needs to draw a custom emoji."""
    content: str
    extension: str
    base_url: str = ""

    @property
    def url(self) -> str:
        base = self.base_url.rstrip("/")
        return f"{base}/emoji-custom/{quote(self.content)}.{self.extension}"


@dataclass(frozen=True)
class SelectionResult:
    """What the picker forwards upward after a selection."""
    identity: EmojiIdentity
    text: str
    shortname: Optional[str] = None
    asset: Optional[AssetReference] = None


def resolve_selection(identity: EmojiIdentity, base_url: str = "") -> SelectionResult:
    if isinstance(identity, StandardEmoji):
        return SelectionResult(
            identity=identity,
            text=display_text(identity),
            shortname=shortname(identity),
        )
    return SelectionResult(
        identity=identity,
        text=shortname(identity),
        asset=AssetReference(identity.content, identity.extension, base_url),
    )

#
# End of display.py
#######################################################################################################################
