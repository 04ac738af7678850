"""In-memory host editor: document, cursor and HTML inspection helpers."""

from .document import Document, Position
from .editor import Editor
from .html_utils import get_tag_attributes

__all__ = ["Document", "Editor", "Position", "get_tag_attributes"]
