"""Shared helpers for building editors from marked-up text."""

from __future__ import annotations

from entity_hints.editor.editor import Editor

CURSOR = "|"


def make_editor(marked: str) -> Editor:
    """Build an editor from *marked*; ``|`` marks the cursor (default: end)."""
    index = marked.find(CURSOR)
    if index == -1:
        return Editor.from_text(marked)
    return Editor.from_text(marked.replace(CURSOR, "", 1), index)
