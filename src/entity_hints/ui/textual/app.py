"""Textual application hosting the entity hint provider.

A single :class:`~entity_hints.ui.textual.entity_input.EntityInput` line
editing *language* text (``html`` by default), hinted through the
:class:`~entity_hints.hints.manager.HintManager` the configuration fills;
every submitted line is echoed twice, as typed and with its entities
decoded.

Keyboard shortcuts:
    Ctrl+K  Clear the output
    Ctrl+Q  Quit
"""

from __future__ import annotations

import html

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from entity_hints.config import HintsConfig
from entity_hints.hints.manager import HintManager, register_default_providers
from entity_hints.hints.special_char_hints import SpecialCharHints
from entity_hints.ui.textual.entity_input import EntityInput


class EntityHintsApp(App):
    """Entity hints playground."""

    TITLE = "entity-hints"

    CSS = """
    #output {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+k", "clear_output", "Clear"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: HintsConfig,
        manager: HintManager | None = None,
        language: str = "html",
    ) -> None:
        super().__init__()
        self.config = config
        self.language = language
        self.manager = manager or HintManager()
        self.provider: SpecialCharHints = register_default_providers(self.manager, config)

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="output")
        yield EntityInput(manager=self.manager, language=self.language, id="entity")
        yield Footer()

    def on_entity_input_submitted(self, event: EntityInput.Submitted) -> None:
        output = self.query_one("#output", VerticalScroll)
        line = Text.assemble((event.value, "bold"), "  →  ", html.unescape(event.value))
        output.mount(Static(line))
        output.scroll_end(animate=False)
        self.log.info("submitted", value=event.value)

    def action_clear_output(self) -> None:
        self.query_one("#output", VerticalScroll).remove_children()
