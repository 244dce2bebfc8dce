# emoji_picker.py
# Description: Textual modal screen that renders the emoji picker service
#
# Imports
from typing import List, Optional
#
# 3rd-party Libraries
from loguru import logger
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches, QueryError
from textual.message import Message
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widget import MountError
from textual.widgets import Button, Input, Static, TabbedContent, TabPane
#
# Local Imports
from ..Emoji.display import SelectionResult, display_text, shortname
from ..Emoji.emoji_models import EmojiIdentity, Tab, TabRole
from ..Emoji.picker_service import EmojiPickerService
#
########################################################################################################################
#
# Classes:

class EmojiSelected(Message):
    """Message sent when an emoji is selected from the picker."""
    def __init__(self, emoji: str, picker_id: Optional[str] = None, result: Optional[SelectionResult] = None) -> None:
        super().__init__()
        self.emoji: str = emoji
        self.picker_id: Optional[str] = picker_id
        self.result: Optional[SelectionResult] = result


class EmojiButton(Button):
    def __init__(self, identity: EmojiIdentity, **kwargs):
        super().__init__(label=display_text(identity), **kwargs)
        self.identity = identity
        self.tooltip = shortname(identity)


class EmojiGrid(VerticalScroll):
    COLUMN_COUNT = 12
    MAX_DISPLAY = 180  # Limit display for performance

    def __init__(self, emojis: List[EmojiIdentity], **kwargs):
        super().__init__(**kwargs)
        self.emojis = emojis

    def on_mount(self) -> None:
        if not self.children:
            self.populate_grid()

    def populate_grid(self, emojis_to_display: Optional[List[EmojiIdentity]] = None) -> None:
        for child in self.query("Horizontal, EmojiButton, Static.no_emojis_message"):
            child.remove()

        current_emojis = emojis_to_display if emojis_to_display is not None else self.emojis
        current_emojis = current_emojis[:self.MAX_DISPLAY]

        for start in range(0, len(current_emojis), self.COLUMN_COUNT):
            row = Horizontal(classes="emoji_row")
            self.mount(row)
            row.mount(*[
                EmojiButton(
                    identity,
                    classes="emoji_button custom_emoji_button" if identity.is_custom else "emoji_button",
                )
                for identity in current_emojis[start:start + self.COLUMN_COUNT]
            ])

        if not current_emojis:
            self.mount(Static("No emojis found.", classes="no_emojis_message"))


class EmojiPickerScreen(ModalScreen[str]):
    """
    Picker dialog backed by an `EmojiPickerService`.

    Tabs are loaded in a worker once the screen is mounted. Dismisses with
    the text to insert, or an empty string when cancelled.

    Keys 1-9 pick from the frequently used tab. The search input keeps
    digits for queries such as "100", so the shortcuts fire only once focus
    has left it (Tab or a click on the grid).
    """
    BINDINGS = [
        Binding("escape", "dismiss_picker", "Close Picker"),
        # Not priority bindings: a focused Input consumes digits first
        *[
            Binding(str(number), f"select_frequent({number - 1})", f"Frequent Emoji {number}", show=False)
            for number in range(1, 10)
        ],
        Binding("ctrl+left", "prev_category", "Previous Category", show=False),
        Binding("ctrl+right", "next_category", "Next Category", show=False),
    ]
    CSS = """
    EmojiPickerScreen { align: center middle; }
    #dialog {
        width: 80%;
        max-width: 120;
        height: 80%;
        max-height: 40;
        border: thick $primary;
        background: $surface;
        padding: 1;
    }
    #search-input {
        width: 100%;
        margin-bottom: 1;
        border: tall $primary-background;
    }
    #search-input:focus {
        border: tall $primary;
    }
    #tabs-container {
        height: 1fr;
    }
    TabbedContent#emoji-tabs {
        height: 1fr;
        border: none;
    }
    TabPane {
        padding: 0 1;
        height: 100%;
    }
    EmojiGrid {
        width: 100%;
        height: 100%;
        padding: 0;
    }
    .emoji_row {
        width: 100%;
        height: auto;
        align: left top;
        margin: 0;
    }
    EmojiButton.emoji_button {
        width: 4;
        height: 3;
        border: none;
        background: transparent;
        color: $text;
        padding: 0;
        text-align: center;
        content-align: center middle;
    }
    EmojiButton.custom_emoji_button {
        width: auto;
        min-width: 4;
        padding: 0 1;
    }
    EmojiButton.emoji_button:hover {
        background: $primary-background;
    }
    EmojiButton.emoji_button:focus {
        background: $primary-background-lighten-1;
    }
    .no_emojis_message, #loading-message {
        width: 100%;
        content-align: center middle;
        padding: 2;
        color: $text-muted;
        text-style: italic;
    }
    #footer {
        height: auto;
        width: 100%;
        dock: bottom;
        padding-top: 1;
        align: right middle;
    }
    .dialog-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }
    """

    SEARCH_DEBOUNCE_SECONDS = 0.3

    def __init__(
        self,
        service: EmojiPickerService,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(name, id, classes)
        self.service = service
        self.session = service.open_session()
        self.tabs: List[Tab] = []
        self._frequent: List[EmojiIdentity] = []
        self._search_timer: Optional[Timer] = None
        self._pending_search: Optional[str] = None

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static("Emoji Picker", classes="dialog-title")
            yield Input(placeholder="Search emojis (e.g., smile, cat, :+1:)", id="search-input")
            yield Static("Loading emojis...", id="loading-message")
            yield Vertical(id="tabs-container")
            yield EmojiGrid([], id="search-results-grid")
            with Horizontal(id="footer"):
                yield Button("Cancel", variant="error", id="cancel-button")

    def on_mount(self) -> None:
        self.query_one("#search-input", Input).focus()
        self.query_one("#search-results-grid", EmojiGrid).display = False
        self.run_worker(self._load_tabs(), exclusive=True, group="emoji-tabs", exit_on_error=False)

    def on_unmount(self) -> None:
        self.session.close()

    def _is_live(self) -> bool:
        return self.is_attached and not self.session.closed

    async def _load_tabs(self) -> None:
        tabs = await self.session.load_tabs()
        if tabs is None:
            return
        self.tabs = tabs
        # Built off-DOM, then mounted in one step; the screen may be gone by now
        tabbed = TabbedContent(id="emoji-tabs")
        for tab in tabs:
            if tab.role is TabRole.FREQUENT:
                self._frequent = list(tab.entries)
            tabbed.compose_add_child(TabPane(
                f"{tab.icon} {tab.label}".strip(),
                EmojiGrid(list(tab.entries), id=f"grid-{tab.category}"),
                id=f"tab-{tab.category}",
            ))
        if not self._is_live():
            return
        try:
            await self.query_one("#tabs-container", Vertical).mount(tabbed)
            self.query_one("#loading-message", Static).display = False
        except (MountError, NoMatches) as e:
            logger.debug(f"Emoji picker closed while loading tabs: {e}")
            return
        logger.debug(f"Emoji picker loaded {len(tabs)} tabs")

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes with debouncing."""
        self._pending_search = event.value
        if self._search_timer:
            self._search_timer.stop()
        self._search_timer = self.set_timer(self.SEARCH_DEBOUNCE_SECONDS, self._start_search)

    def _start_search(self) -> None:
        if self._pending_search is None:
            return
        query, self._pending_search = self._pending_search, None
        self.run_worker(self._perform_search(query), exclusive=True, group="emoji-search")

    async def _perform_search(self, query: str) -> None:
        if not self._is_live():
            return
        search_grid = self.query_one("#search-results-grid", EmojiGrid)
        tab_content = self.query_one("#tabs-container", Vertical)

        if not query.strip(" :"):
            search_grid.display = False
            tab_content.display = True
            return

        results = await self.session.search(query)
        if results is None or not self.is_attached:
            return
        tab_content.display = False
        search_grid.display = True
        search_grid.populate_grid(results)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, EmojiButton):
            event.stop()
            await self._select(event.button.identity)
        elif event.button.id == "cancel-button":
            self.action_dismiss_picker()

    async def _select(self, identity: EmojiIdentity) -> None:
        result = await self.session.select(identity)
        if not self.is_attached:
            return
        self.app.post_message(EmojiSelected(result.text, picker_id=self.id, result=result))
        self.dismiss(result.text)

    def action_dismiss_picker(self) -> None:
        self.dismiss("")  # Empty string signals cancellation

    async def action_select_frequent(self, index: int) -> None:
        """Select a frequently used emoji by its 0-based rank."""
        if index < len(self._frequent):
            await self._select(self._frequent[index])

    def _cycle_category(self, step: int) -> None:
        try:
            tab_content = self.query_one("#emoji-tabs", TabbedContent)
        except QueryError:
            return
        pane_ids = [pane.id for pane in tab_content.query(TabPane)]
        if not pane_ids or tab_content.active not in pane_ids:
            return
        index = pane_ids.index(tab_content.active)
        tab_content.active = pane_ids[(index + step) % len(pane_ids)]

    def action_prev_category(self) -> None:
        """Navigate to previous category tab."""
        self._cycle_category(-1)

    def action_next_category(self) -> None:
        """Navigate to next category tab."""
        self._cycle_category(1)

#
# End of emoji_picker.py
########################################################################################################################
