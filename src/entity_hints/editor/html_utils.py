"""HTML inspection helpers over an :class:`~entity_hints.editor.editor.Editor`.

Only the little HTML awareness the hint providers need: whether a position
lies inside an opening tag, and which attributes that tag declares.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .document import Position
from .editor import Editor

_ATTRIBUTE = re.compile(
    r"""([^\s"'<>/=]+)(?:\s*=\s*(?:"[^"]*"?|'[^']*'?|[^\s>]*))?"""
)
_TAG_NAME = re.compile(r"[A-Za-z][^\s/>]*")


def _open_tag_start(text: str, index: int) -> Optional[int]:
    """Return the offset of the ``<`` of the opening tag enclosing *index*.

    Quoted attribute values are skipped so that ``>`` inside them does not
    close the tag.  ``</``, ``<!`` and ``<?`` do not start opening tags.
    """
    tag_start = None
    quote = None
    for i in range(index):
        ch = text[i]
        if tag_start is None:
            if ch == "<" and i + 1 < len(text) and text[i + 1].isalpha():
                tag_start = i
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ">":
            tag_start = None
        elif ch == "<":
            # etiqueta sin cerrar: empieza otra
            tag_start = i if i + 1 < len(text) and text[i + 1].isalpha() else None
    return tag_start


def _tag_end(text: str, start: int) -> int:
    """Return the offset just past the ``>`` closing the tag at *start*."""
    quote = None
    for i in range(start + 1, len(text)):
        ch = text[i]
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch in "<>":
            return i + 1 if ch == ">" else i
    return len(text)


def get_tag_attributes(editor: Editor, pos: Position) -> List[str]:
    """Return the attribute names of the opening tag enclosing *pos*.

    Args:
        editor: Editor whose document is inspected.
        pos: Position to test.

    Returns:
        Lower-cased attribute names in document order, or an empty list
        when *pos* is not inside an opening tag (or the tag declares no
        attributes).
    """
    text = editor.document.get_text()
    index = editor.document.index_from_pos(pos)

    start = _open_tag_start(text, index)
    if start is None:
        return []

    body = text[start + 1 : _tag_end(text, start)].rstrip(">")
    name = _TAG_NAME.match(body)
    if name is None:
        return []

    return [m.group(1).lower() for m in _ATTRIBUTE.finditer(body, name.end())]
