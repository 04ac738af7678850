from __future__ import annotations

import argparse
import json
import locale
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from jsonschema import ValidationError
from rich.console import Console
from textual.logging import TextualHandler

from entity_hints.config import HintsConfig

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="entity-hints",
        description="HTML entity completion playground",
    )

    parser.add_argument(
        "-c",
        "--config",
        default=os.getenv("ENTITY_HINTS_CONFIG"),
        help="Configuration file (default: ~/.config/entity_hints/entity_hints.json).",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)

    try:
        config = HintsConfig.load(Path(args.config) if args.config else None)
    except (json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        return 1

    logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])

    try:
        # ordenar las sugerencias según el locale del usuario
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Keeping the C collation order: %s", exc)

    from entity_hints.ui.textual.app import EntityHintsApp

    try:
        app = EntityHintsApp(config)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Cannot load the entity catalog:[/red] {exc}")
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
