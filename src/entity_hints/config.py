"""Hint configuration persisted as JSON in the user config directory.

The configuration file lives at ``~/.config/entity_hints/entity_hints.json``
by default and stores which languages the entity hints are registered for,
their priority against other providers, an optional replacement catalog and
the log level.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jsonschema import validate

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "catalog_path": {"type": ["string", "null"]},
        "languages": {"type": "array", "items": {"type": "string"}, "minItems": 1},
        "priority": {"type": "integer"},
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
    },
}


def default_config_path() -> Path:
    """Return the conventional path to the hints config file."""
    return Path.home() / ".config" / "entity_hints" / "entity_hints.json"


@dataclass
class HintsConfig:
    """Entity-hint configuration backed by a JSON file.

    Attributes:
        config_path: Absolute path to the JSON configuration file.
        catalog_path: Entity catalog replacing the bundled one, or ``None``.
        languages: Language identifiers the provider is registered for.
        priority: Registration priority; higher wins.
        log_level: Name of the root logging level.
    """

    config_path: Path
    catalog_path: Optional[Path] = None
    languages: List[str] = field(default_factory=lambda: ["html"])
    priority: int = 1
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "HintsConfig":
        """Load the configuration from a JSON file.

        If the file does not exist a ``HintsConfig`` with default values is
        returned.

        Raises:
            jsonschema.ValidationError: The file does not match
                :data:`CONFIG_SCHEMA`.
        """
        path = path or default_config_path()

        if not path.exists():
            return cls(config_path=path)

        data = json.loads(path.read_text())
        validate(data, CONFIG_SCHEMA)

        defaults = cls(config_path=path)
        return cls(
            config_path=path,
            catalog_path=Path(data["catalog_path"]) if data.get("catalog_path") else None,
            languages=data.get("languages", defaults.languages),
            priority=data.get("priority", defaults.priority),
            log_level=data.get("log_level", defaults.log_level),
        )

    def save(self) -> None:
        """Persist the configuration to disk as pretty-printed JSON.

        Parent directories are created automatically when they do not exist.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        payload = {
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "languages": self.languages,
            "priority": self.priority,
            "log_level": self.log_level,
        }

        self.config_path.write_text(json.dumps(payload, indent=2))
