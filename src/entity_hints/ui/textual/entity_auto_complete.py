"""Entity-aware autocomplete overlay for Textual inputs.

Extends :class:`~textual_autocomplete.AutoComplete` so that candidates come
from the hint providers registered with a
:class:`~entity_hints.hints.manager.HintManager` and completions replace only
the entity typed before the cursor, leaving the rest of the input untouched.
"""

from __future__ import annotations

import html
from typing import Dict, List, Optional, Sequence

from textual_autocomplete import AutoComplete, DropdownItem
from textual_autocomplete._autocomplete import TargetState
from textual_autocomplete.fuzzy_search import FuzzySearch

from entity_hints.editor.editor import Editor
from entity_hints.hints.query import extract_query
from entity_hints.hints.manager import HintManager
from entity_hints.hints.special_char_hints import entity_from_hint


class PassThroughFuzzySearch(FuzzySearch):
    """Fuzzy search that bypasses query filtering.

    The provider already filters and sorts the hints, so every candidate
    gets a perfect score and keeps its position in the dropdown.
    """

    def match(self, query: str, candidate: str) -> tuple[float, Sequence[int]]:
        """Return a perfect match score regardless of *query*."""
        return super().match(candidate, candidate)

class EntityAutoComplete(AutoComplete):
    """AutoComplete subclass offering HTML entity hints.

    Every refresh builds a one-shot :class:`~entity_hints.editor.editor.Editor`
    over the input text and opens a hinting session on the manager for
    *language*; the character just before the cursor is the implicit
    trigger.

    Args:
        manager: Hint manager holding the registered providers.
        language: Language identifier of the edited text.
    """

    def __init__(self, *args, manager: HintManager, language: str = "html", **kwargs):
        super().__init__(*args, **kwargs)
        self._fuzzy_search = PassThroughFuzzySearch()
        self._manager = manager
        self._language = language
        self._hints: Dict[str, str] = {}

    def get_candidates(self, target_state: TargetState) -> List[DropdownItem]:
        """Return one dropdown item per hint for the current input state."""
        editor = Editor.from_text(target_state.text or "", target_state.cursor_position)
        implicit_char = self._implicit_char(target_state)

        self._hints = {}
        result = self._manager.begin(editor, self._language, implicit_char)
        if result is None:
            return []

        items = []
        for hint in result.hints:
            entity = entity_from_hint(hint)
            self._hints[entity] = hint
            items.append(DropdownItem(main=entity, prefix=f"{html.unescape(entity)} "))
        return items

    def get_search_string(self, target_state: TargetState) -> str:
        """Return the entity text typed so far (empty outside an entity)."""
        editor = Editor.from_text(target_state.text or "", target_state.cursor_position)
        return extract_query(editor) or ""

    def should_show_dropdown(self, search_string: str) -> bool:
        return bool(search_string) and self.option_list.option_count > 0

    def apply_completion(self, value: str, state: TargetState) -> None:
        """Insert the entity of *value* in place of the typed query.

        The manager session opened by the last :meth:`get_candidates` call
        still holds the editor built from the current input text.

        Args:
            value: The selected dropdown value (the entity text).
            state: Current autocomplete target state.
        """
        hint = self._hints.get(str(value))
        session = self._manager.session
        if hint is None or session is None:
            return

        editor = session.editor
        self._manager.insert(hint)

        target = self.target
        target.value = editor.document.get_text()
        # cursor justo después de lo insertado (no al final del input)
        target.cursor_position = editor.cursor_index()

        self._hints = {}

    # ──────────────────────────────
    # helpers
    # ──────────────────────────────

    @staticmethod
    def _implicit_char(state: TargetState) -> Optional[str]:
        cursor = state.cursor_position
        text = state.text or ""
        if cursor <= 0 or cursor > len(text):
            return None
        return text[cursor - 1]
