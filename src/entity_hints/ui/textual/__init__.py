"""Textual widgets and application for entity hints.

Includes :class:`~.entity_auto_complete.EntityAutoComplete`,
:class:`~.entity_input.EntityInput` and :class:`~.app.EntityHintsApp`.
"""
