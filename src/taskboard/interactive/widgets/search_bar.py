"""Search input for filtering tasks by title."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input


class SearchBar(Widget):
    """Title search box with a clear button shown only while filtering."""

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        padding: 1 0 0 0;
    }

    SearchBar Horizontal {
        height: auto;
    }

    SearchBar #search-input {
        width: 1fr;
    }

    SearchBar #clear-filters-button {
        display: none;
        margin-left: 1;
    }

    SearchBar.-filtering #clear-filters-button {
        display: block;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Input(placeholder="Search by title", id="search-input")
            yield Button("Clear filters", variant="default", id="clear-filters-button")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search-input":
            return
        event.stop()
        self.set_class(bool(event.value), "-filtering")
        self.post_message(self.QueryChanged(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-filters-button":
            event.stop()
            self.post_message(self.FilterCleared())

    def sync(self, query: str) -> None:
        """Reflect the board's query without echoing it back as a change."""
        self.set_class(bool(query), "-filtering")
        search_input = self.query_one("#search-input", Input)
        if search_input.value != query:
            with search_input.prevent(Input.Changed):
                search_input.value = query

    class QueryChanged(Message):
        """Message sent when the search text changes."""

        def __init__(self, query: str) -> None:
            super().__init__()
            self.query = query

    class FilterCleared(Message):
        """Message sent when the clear-filters button is pressed."""
