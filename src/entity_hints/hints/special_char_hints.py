"""Hint provider for HTML special-character entities.

:class:`SpecialCharHints` offers the entries of an
:class:`~entity_hints.catalog.EntityCatalog` whenever the user is typing an
entity reference.  Each hinting cycle runs against a :class:`HintSession`
that carries the editor and the query typed so far, so the provider itself
holds no per-editor state.

Hints are display strings of the form::

    &amp;amp <span class='entity-display-character'>&amp;</span>

The part before the first space is the entity text with its ``&`` (named)
or ``#`` (numeric) escaped so that the renderer shows it literally; the
span previews the character.
"""

from __future__ import annotations

import locale
import string
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from entity_hints.catalog import EntityCatalog
from entity_hints.editor.document import Position
from entity_hints.editor.editor import Editor
from entity_hints.hints.query import extract_query

PRIMARY_TRIGGER_KEYS = "&" + string.ascii_letters + "#" + string.digits

DISPLAY_CHARACTER_CLASS = "entity-display-character"


@dataclass
class HintSession:
    """State of one hinting cycle.

    Attributes:
        editor: Editor the hints are computed for.
        current_query: Entity text already in the document that an inserted
            hint replaces; ``None`` until :meth:`SpecialCharHints.get_hints`
            has run.
    """

    editor: Editor
    current_query: Optional[str] = None


@dataclass(frozen=True)
class HintResult:
    """Sorted hints plus rendering hints for the host.

    Attributes:
        hints: Display strings, sorted.
        match: Escaped query, used to emphasise matching text.
        select_initial: Whether the first hint starts selected.
    """

    hints: List[str]
    match: str
    select_initial: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return {
            "hints": list(self.hints),
            "match": self.match,
            "selectInitial": self.select_initial,
        }


class HintProvider(Protocol):
    """Capability set a hint manager consumes."""

    def has_hints(self, session: HintSession, implicit_char: Optional[str]) -> bool: ...

    def get_hints(self, session: HintSession, implicit_char: Optional[str]) -> Optional[HintResult]: ...

    def insert_hint(self, session: HintSession, completion: str) -> bool: ...


def escape_entity(text: str) -> str:
    """Escape *text* so a markup renderer shows it literally.

    Numeric references get their ``#`` escaped, named ones their ``&``.
    """
    if "#" in text:
        return text.replace("#", "&#35;", 1)
    return text.replace("&", "&amp;", 1)


def unescape_entity(text: str) -> str:
    """Reverse :func:`escape_entity`."""
    return text.replace("&#35;", "#", 1).replace("&amp;", "&", 1)


def format_hint(entity: str) -> str:
    """Return the display string for a catalog *entity*."""
    return f"{escape_entity(entity)} <span class='{DISPLAY_CHARACTER_CLASS}'>{entity};</span>"


def entity_from_hint(hint: str) -> str:
    """Return the literal, ``;``-terminated entity text of a display string."""
    head = hint.split(" ", 1)[0]
    return unescape_entity(head + ";")


def _sort_key(hint: str) -> str:
    """Case-insensitive collation key under the process LC_COLLATE (code points under C)."""
    return locale.strxfrm(hint.lower())


class SpecialCharHints:
    """Entity hint provider.

    Args:
        catalog: Entities offered as hints.
    """

    def __init__(self, catalog: EntityCatalog) -> None:
        self.catalog = catalog
        self.primary_trigger_keys = PRIMARY_TRIGGER_KEYS

    def has_hints(self, session: HintSession, implicit_char: Optional[str]) -> bool:
        """Tell whether entity hints are available for *session*.

        Args:
            session: Current hinting cycle.
            implicit_char: ``None`` for an explicit request, otherwise the
                character just typed.
        """
        query = extract_query(session.editor)

        if implicit_char is None:
            return query is not None
        return implicit_char == "&" or query is not None

    def get_hints(self, session: HintSession, implicit_char: Optional[str]) -> Optional[HintResult]:
        """Return the hints matching the entity being typed.

        Returns:
            ``None`` to end the hinting session (unknown trigger character
            or no entity context), otherwise a :class:`HintResult`.
        """
        if implicit_char is not None and (
            len(implicit_char) != 1 or implicit_char not in self.primary_trigger_keys
        ):
            return None

        query = session.current_query = extract_query(session.editor)
        if query is None:
            return None

        hints = sorted(
            (format_hint(entity) for entity in self.catalog.matching(query)),
            key=_sort_key,
        )
        return HintResult(hints=hints, match=escape_entity(query), select_initial=True)

    def insert_hint(self, session: HintSession, completion: str) -> bool:
        """Replace the typed query with the entity of *completion*.

        Returns:
            Always ``False``: no follow-up hint request is wanted.
        """
        editor = session.editor
        cursor = editor.get_cursor_pos()
        query_len = len(session.current_query or "")

        start = Position(cursor.line, cursor.ch - query_len)
        end = Position(cursor.line, start.ch + query_len)
        entity = entity_from_hint(completion)

        if start != end:
            editor.document.replace_range(entity, start, end)
        else:
            editor.document.replace_range(entity, start)

        return False
