"""Editor view: a :class:`Document` plus a cursor."""

from __future__ import annotations

from .document import Document, Position


class Editor:
    """An editing context over a document.

    The cursor follows document edits made before it, so that after a
    completion is inserted the cursor sits right after the inserted text.

    Args:
        document: Buffer being edited.
        cursor: Initial cursor position (clipped to the document).
    """

    def __init__(self, document: Document, cursor: Position | None = None) -> None:
        self.document = document
        self._cursor = document.clip(cursor or Position(0, 0))
        document.subscribe(self._on_change)

    @classmethod
    def from_text(cls, text: str, cursor_index: int | None = None) -> "Editor":
        """Build an editor over *text* with the cursor at *cursor_index*.

        The cursor defaults to the end of the text.
        """
        document = Document.from_text(text)
        index = len(text) if cursor_index is None else cursor_index
        return cls(document, document.pos_from_index(index))

    def get_cursor_pos(self) -> Position:
        return self._cursor

    def set_cursor_pos(self, pos: Position) -> None:
        self._cursor = self.document.clip(pos)

    def cursor_index(self) -> int:
        """Absolute character offset of the cursor."""
        return self.document.index_from_pos(self._cursor)

    def close(self) -> None:
        self.document.unsubscribe(self._on_change)

    def _on_change(self, start: Position, old_end: Position, new_end: Position) -> None:
        cursor = self._cursor
        if cursor < start:
            return
        if cursor < old_end:
            # el cursor estaba dentro del rango reemplazado
            self._cursor = new_end
        elif old_end.line == cursor.line:
            self._cursor = Position(new_end.line, new_end.ch + (cursor.ch - old_end.ch))
        else:
            self._cursor = Position(cursor.line + new_end.line - old_end.line, cursor.ch)
