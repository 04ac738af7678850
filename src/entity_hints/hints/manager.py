"""Hint manager: provider registry and hinting-session driver.

Providers are registered per language identifier with a priority.  The
manager asks them, highest priority first, whether they have hints for the
editor, then routes the ``get_hints``/``insert_hint`` calls of the open
session to the provider that accepted it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from entity_hints.catalog import EntityCatalog
from entity_hints.config import HintsConfig
from entity_hints.editor.editor import Editor
from entity_hints.hints.special_char_hints import (
    HintProvider,
    HintResult,
    HintSession,
    SpecialCharHints,
)

logger = logging.getLogger(__name__)

ALL_LANGUAGES = "all"


@dataclass(frozen=True)
class _Registration:
    provider: HintProvider
    priority: int
    order: int


class HintManager:
    """Registry of hint providers and owner of the open hinting session."""

    def __init__(self) -> None:
        self._providers: Dict[str, List[_Registration]] = {}
        self._registered = 0
        self._active: Optional[HintProvider] = None
        self._session: Optional[HintSession] = None

    def register_hint_provider(
        self, provider: HintProvider, languages: Iterable[str], priority: int = 0
    ) -> None:
        """Register *provider* for each of *languages*.

        Args:
            provider: Object implementing the hint capability set.
            languages: Language identifiers; ``"all"`` matches any language.
            priority: Providers with higher priority are consulted first.
        """
        languages = list(languages)
        if not languages:
            raise ValueError("A hint provider needs at least one language")

        registration = _Registration(provider, priority, self._registered)
        self._registered += 1
        for language in languages:
            self._providers.setdefault(language, []).append(registration)
        logger.debug(
            "Registered %s for %s (priority %d)", type(provider).__name__, languages, priority
        )

    def providers_for(self, language: str) -> List[HintProvider]:
        """Return the providers for *language*, highest priority first."""
        registrations = list(self._providers.get(language, []))
        if language != ALL_LANGUAGES:
            registrations += self._providers.get(ALL_LANGUAGES, [])
        registrations.sort(key=lambda r: (-r.priority, r.order))
        return [r.provider for r in registrations]

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[HintSession]:
        return self._session

    def begin(
        self, editor: Editor, language: str, implicit_char: Optional[str] = None
    ) -> Optional[HintResult]:
        """Open a hinting session for *editor*.

        Returns:
            The first hint list of the accepting provider, or ``None`` when
            no provider has hints (no session is left open then).
        """
        self.end()
        for provider in self.providers_for(language):
            session = HintSession(editor)
            if provider.has_hints(session, implicit_char):
                self._active, self._session = provider, session
                logger.debug("Hint session opened with %s", type(provider).__name__)
                return self.update(implicit_char)
        return None

    def update(self, implicit_char: Optional[str] = None) -> Optional[HintResult]:
        """Refresh the hints of the open session; ``None`` closes it."""
        provider, session = self._require_session()
        result = provider.get_hints(session, implicit_char)
        if result is None:
            self.end()
        return result

    def insert(self, completion: str) -> bool:
        """Commit *completion* and close the session.

        Returns:
            Whether the provider asked for a follow-up explicit request.
        """
        provider, session = self._require_session()
        try:
            return provider.insert_hint(session, completion)
        finally:
            self.end()

    def end(self) -> None:
        if self._session is not None:
            logger.debug("Hint session closed")
        self._active = None
        self._session = None

    def _require_session(self):
        if self._active is None or self._session is None:
            raise RuntimeError("No hinting session is open")
        return self._active, self._session


def register_default_providers(
    manager: HintManager, config: HintsConfig, catalog: Optional[EntityCatalog] = None
) -> SpecialCharHints:
    """Load the entity catalog and register the entity hint provider.

    Args:
        manager: Manager to register with.
        config: Languages, priority and optional catalog override.
        catalog: Already loaded catalog; loaded from *config* when ``None``.

    Returns:
        The registered provider.
    """
    catalog = catalog or EntityCatalog.load(config.catalog_path)
    provider = SpecialCharHints(catalog)
    manager.register_hint_provider(provider, config.languages, config.priority)
    return provider
