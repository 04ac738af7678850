"""Line-oriented text document used as the host editor buffer.

Positions are zero-based ``(line, ch)`` pairs.  Edits are applied through
:meth:`Document.replace_range`, which notifies subscribed listeners so that
views (for instance an :class:`~entity_hints.editor.editor.Editor` cursor)
can follow the change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based location in a :class:`Document`.

    Attributes:
        line: Line index.
        ch: Column (character offset inside the line).
    """

    line: int
    ch: int


ChangeListener = Callable[[Position, Position, Position], None]


@dataclass
class Document:
    """Mutable text buffer addressed by :class:`Position`.

    Attributes:
        lines: Text lines without their line terminators.
    """

    lines: List[str] = field(default_factory=lambda: [""])
    _listeners: List[ChangeListener] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_text(cls, text: str) -> "Document":
        """Build a document from *text*, splitting on ``\\n``."""
        return cls(lines=text.split("\n"))

    def subscribe(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, start: Position, old_end: Position, new_end: Position) -> None:
        for listener in list(self._listeners):
            listener(start, old_end, new_end)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_text(self) -> str:
        return "\n".join(self.lines)

    def get_line(self, line: int) -> str:
        self._check_line(line)
        return self.lines[line]

    def clip(self, pos: Position) -> Position:
        """Clamp *pos* to the nearest valid position."""
        line = max(0, min(pos.line, len(self.lines) - 1))
        ch = max(0, min(pos.ch, len(self.lines[line])))
        return Position(line, ch)

    def index_from_pos(self, pos: Position) -> int:
        """Return the absolute character offset of *pos*."""
        self._check_pos(pos)
        return sum(len(text) + 1 for text in self.lines[: pos.line]) + pos.ch

    def pos_from_index(self, index: int) -> Position:
        """Return the position of the absolute character offset *index*."""
        if index < 0:
            raise ValueError(f"Negative index: {index}")
        remaining = index
        for line, text in enumerate(self.lines):
            if remaining <= len(text):
                return Position(line, remaining)
            remaining -= len(text) + 1
        raise ValueError(f"Index out of range: {index}")

    def get_range(self, start: Position, end: Position) -> str:
        """Return the text between *start* (inclusive) and *end* (exclusive)."""
        text = self.get_text()
        return text[self.index_from_pos(start) : self.index_from_pos(end)]

    def replace_range(self, text: str, start: Position, end: Optional[Position] = None) -> Position:
        """Replace the span ``[start, end)`` with *text*.

        When *end* is omitted the text is inserted at *start* without
        removing anything.

        Returns:
            The position immediately after the inserted text.
        """
        end = start if end is None else end
        if end < start:
            raise ValueError(f"Range end {end} precedes start {start}")

        whole = self.get_text()
        begin = self.index_from_pos(start)
        finish = self.index_from_pos(end)
        self.lines = (whole[:begin] + text + whole[finish:]).split("\n")

        new_end = self.pos_from_index(begin + len(text))
        self._notify(start, end, new_end)
        return new_end

    # ──────────────────────────────
    # helpers
    # ──────────────────────────────

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self.lines):
            raise ValueError(f"Line out of range: {line}")

    def _check_pos(self, pos: Position) -> None:
        self._check_line(pos.line)
        if not 0 <= pos.ch <= len(self.lines[pos.line]):
            raise ValueError(f"Column out of range: {pos}")
