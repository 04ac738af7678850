"""Locate the entity reference being typed before the cursor.

Provides :func:`extract_query`, which decides whether the cursor sits in a
partially typed entity reference (``&am|``) and returns the text typed so
far.
"""

from __future__ import annotations

from typing import Optional

from entity_hints.editor.document import Position
from entity_hints.editor.editor import Editor
from entity_hints.editor.html_utils import get_tag_attributes

ENTITY_START = "&"
ENTITY_END = ";"


def extract_query(editor: Editor) -> Optional[str]:
    """Return the entity text typed before the cursor, or ``None``.

    The query is the text from the last ``&`` on the cursor line up to the
    cursor.  When that ``&`` has already been closed by a ``;`` the query
    falls back to a bare ``"&"``.

    Args:
        editor: Editor whose cursor line is inspected.

    Returns:
        A string starting with ``&``, or ``None`` when no ``&`` precedes the
        cursor on its line or the cursor is inside a tag's attribute list.
    """
    query = ENTITY_START

    cursor = editor.get_cursor_pos()
    line_content = editor.document.get_range(Position(cursor.line, 0), cursor)

    start_char = line_content.rfind(ENTITY_START)
    end_char = line_content.rfind(ENTITY_END)

    if end_char < start_char:
        query = editor.document.get_range(Position(cursor.line, start_char), cursor)

    if start_char != -1 and not get_tag_attributes(editor, cursor):
        return query
    return None
