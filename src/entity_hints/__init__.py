"""HTML special-character entity hints.

Provides the :class:`~entity_hints.catalog.EntityCatalog` of known entities,
the :class:`~entity_hints.hints.special_char_hints.SpecialCharHints` provider,
the :class:`~entity_hints.hints.manager.HintManager` that drives it and a
small Textual front-end.
"""
