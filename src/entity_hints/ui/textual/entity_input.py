"""Text input widget with HTML entity autocomplete.

Wraps a Textual :class:`~textual.widgets.Input` with an
:class:`~entity_hints.ui.textual.entity_auto_complete.EntityAutoComplete`
overlay fed by the providers of a
:class:`~entity_hints.hints.manager.HintManager`.
"""

from __future__ import annotations

from typing import Optional

from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input

from entity_hints.hints.manager import HintManager
from entity_hints.ui.textual.entity_auto_complete import EntityAutoComplete


class EntityInput(Widget):
    """Composite widget: an input that suggests entities after ``&``.

    Args:
        manager: Hint manager holding the registered providers.
        language: Language identifier of the edited text.
        placeholder: Placeholder text shown when the input is empty.
        id: Optional widget identifier.
    """

    DEFAULT_CSS = """
    EntityInput {
        height: auto;
    }

    #entity_input {
        border: round $accent;
        padding: 0 1;
    }
    """

    value: reactive[str] = reactive("")

    def __init__(
        self,
        *,
        manager: HintManager,
        language: str = "html",
        placeholder: str = "Type HTML, entities start with &…",
        id: Optional[str] = None,
    ):
        super().__init__(id=id)
        self.manager = manager
        self.language = language
        self.placeholder = placeholder

    def compose(self):
        """Build the widget tree: an Input and an EntityAutoComplete overlay."""
        self._input = Input(
            placeholder=self.placeholder,
            id="entity_input",
        )
        self._autocomplete = EntityAutoComplete(
            target=self._input,
            manager=self.manager,
            language=self.language,
        )

        yield self._input
        yield self._autocomplete

    def on_mount(self) -> None:
        self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input is not self._input:
            return
        text = event.value or ""
        if not text:
            return

        self.value = text
        self.post_message(self.Submitted(text))
        self._input.value = ""

    class Submitted(Message):
        def __init__(self, value: str):
            super().__init__()
            self.value = value
