"""Static catalog of HTML character entities.

The catalog is read from the JSON resource bundled under
``entity_hints/data/special_chars.json``: a flat array of entity references
without their terminating ``;`` (``"&amp"``, ``"&#35"``).  It is loaded once
during application start-up and handed to the hint providers that need it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from jsonschema import validate

logger = logging.getLogger(__name__)

CATALOG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {"type": "string", "pattern": "^&#?[A-Za-z0-9]+$"},
}


def default_catalog_path() -> Path:
    """Return the path of the catalog bundled with the package."""
    return Path(__file__).parent / "data" / "special_chars.json"


@dataclass(frozen=True)
class EntityCatalog:
    """Immutable, ordered collection of entity references.

    Attributes:
        entries: Entity texts in resource order, each starting with ``&``.
    """

    entries: Tuple[str, ...]

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "EntityCatalog":
        """Parse and validate the catalog resource.

        Args:
            path: Alternative resource.  Falls back to
                :func:`default_catalog_path` when ``None``.

        Raises:
            json.JSONDecodeError: The resource is not valid JSON.
            jsonschema.ValidationError: The resource is not an array of
                entity references.
        """
        path = path or default_catalog_path()
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        validate(data, CATALOG_SCHEMA)

        logger.debug("Loaded %d entities from %s", len(data), path)
        return cls(entries=tuple(data))

    def matching(self, prefix: str) -> List[str]:
        """Return the entries starting with *prefix* (case-sensitive)."""
        return [entry for entry in self.entries if entry.startswith(prefix)]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self.entries
