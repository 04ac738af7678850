"""Tests for entity_hints.hints.special_char_hints."""

from __future__ import annotations

import locale

import pytest

from entity_hints.catalog import EntityCatalog
from entity_hints.hints.special_char_hints import (
    HintResult,
    HintSession,
    SpecialCharHints,
    entity_from_hint,
    escape_entity,
    format_hint,
    unescape_entity,
)

from helpers import make_editor

AMP_HINT = "&amp;amp <span class='entity-display-character'>&amp;</span>"
HASH_HINT = "&&#35;35 <span class='entity-display-character'>&#35;</span>"


def _sorted(hints):
    return sorted(hints, key=lambda h: locale.strxfrm(h.lower()))


class TestEscaping:
    def test_named_entity_escapes_ampersand(self):
        assert escape_entity("&amp") == "&amp;amp"

    def test_numeric_entity_escapes_hash(self):
        assert escape_entity("&#35") == "&&#35;35"

    def test_bare_ampersand(self):
        assert escape_entity("&") == "&amp;"

    def test_format_hint(self):
        assert format_hint("&amp") == AMP_HINT
        assert format_hint("&#35") == HASH_HINT

    def test_entity_from_hint(self):
        assert entity_from_hint(AMP_HINT) == "&amp;"
        assert entity_from_hint(HASH_HINT) == "&#35;"

    def test_unescape_only_first_occurrence(self):
        assert unescape_entity("&amp;amp;") == "&amp;"

    def test_every_catalog_entry_round_trips(self, catalog):
        for entity in catalog:
            assert entity_from_hint(format_hint(entity)) == entity + ";"


class TestHasHints:
    def setup_method(self):
        self.provider = SpecialCharHints(EntityCatalog(entries=("&amp", "&lt")))

    def test_explicit_with_query(self):
        assert self.provider.has_hints(HintSession(make_editor("x &a|")), None) is True

    def test_explicit_without_query(self):
        assert self.provider.has_hints(HintSession(make_editor("x a|")), None) is False

    def test_implicit_ampersand_always(self):
        assert self.provider.has_hints(HintSession(make_editor('<a href="&|"')), "&") is True

    def test_implicit_letter_with_query(self):
        assert self.provider.has_hints(HintSession(make_editor("&l|")), "l") is True

    def test_implicit_letter_without_query(self):
        assert self.provider.has_hints(HintSession(make_editor("hel|")), "l") is False

    def test_does_not_touch_session_query(self):
        session = HintSession(make_editor("&l|"))
        self.provider.has_hints(session, "l")
        assert session.current_query is None


class TestGetHints:
    @pytest.fixture(autouse=True)
    def _provider(self, catalog):
        self.provider = SpecialCharHints(catalog)

    def _hints(self, marked, implicit_char=None):
        session = HintSession(make_editor(marked))
        return session, self.provider.get_hints(session, implicit_char)

    def test_prefix_filter(self):
        session, result = self._hints("foo &am|", "m")
        assert isinstance(result, HintResult)
        assert result.hints == [AMP_HINT]
        assert session.current_query == "&am"

    def test_only_matching_entries(self):
        _, result = self._hints("&a|")
        assert result.hints
        assert all(h.startswith("&amp;a") for h in result.hints)
        assert not any(h.startswith("&amp;A") for h in result.hints)

    def test_prefix_match_is_case_sensitive(self):
        _, result = self._hints("&Al|")
        assert [entity_from_hint(h) for h in result.hints] == ["&Alpha;"]

    def test_hints_are_sorted(self):
        _, result = self._hints("&|", "&")
        assert len(result.hints) == len(self.provider.catalog)
        assert result.hints == _sorted(result.hints)

    def test_sort_ignores_case(self):
        provider = SpecialCharHints(EntityCatalog(entries=("&beta", "&Alpha", "&alpha", "&Beta")))
        result = provider.get_hints(HintSession(make_editor("&|")), "&")
        assert [entity_from_hint(h) for h in result.hints] == ["&Alpha;", "&alpha;", "&beta;", "&Beta;"]

    def test_numeric_hints(self):
        _, result = self._hints("&#3|", "3")
        entities = {entity_from_hint(h) for h in result.hints}
        assert entities == {f"&#{n};" for n in range(32, 40)}
        assert result.match == "&&#35;3"

    def test_match_is_escaped_query(self):
        _, result = self._hints("&am|")
        assert result.match == "&amp;am"
        assert result.select_initial is True

    def test_no_matches_gives_empty_list(self):
        _, result = self._hints("&zzz|", "z")
        assert result is not None
        assert result.hints == []

    @pytest.mark.parametrize("char", [" ", ";", "-", "<", "ab"])
    def test_unknown_trigger_ends_session(self, char):
        _, result = self._hints("&am|", char)
        assert result is None

    def test_no_query_inside_attribute(self):
        session, result = self._hints('<a href="&|"', "&")
        assert result is None
        assert session.current_query is None

    def test_as_dict_payload(self):
        _, result = self._hints("&am|")
        assert result.as_dict() == {
            "hints": [AMP_HINT],
            "match": "&amp;am",
            "selectInitial": True,
        }


class TestInsertHint:
    @pytest.fixture(autouse=True)
    def _provider(self, catalog):
        self.provider = SpecialCharHints(catalog)

    def _complete(self, marked, pick=None):
        editor = make_editor(marked)
        session = HintSession(editor)
        result = self.provider.get_hints(session, None)
        hint = pick or result.hints[0]
        follow_up = self.provider.insert_hint(session, hint)
        return editor, follow_up

    def test_replaces_query(self):
        editor, follow_up = self._complete("foo &am|", AMP_HINT)
        assert editor.document.get_text() == "foo &amp;"
        assert follow_up is False

    def test_keeps_text_after_cursor(self):
        editor, _ = self._complete("a &am| b", AMP_HINT)
        assert editor.document.get_text() == "a &amp; b"
        assert editor.get_cursor_pos().ch == 7

    def test_numeric_entity(self):
        editor, _ = self._complete("&#3|", HASH_HINT)
        assert editor.document.get_text() == "&#35;"

    def test_no_residual_escaping(self, catalog):
        for entity in ("&amp", "&lt", "&#38", "&#35", "&nbsp"):
            editor, _ = self._complete("&|", format_hint(entity))
            assert editor.document.get_text() == entity + ";"

    def test_without_query_inserts_at_cursor(self):
        editor = make_editor("ab|cd")
        session = HintSession(editor)
        self.provider.insert_hint(session, AMP_HINT)
        assert editor.document.get_text() == "ab&amp;cd"

    def test_second_line(self):
        editor, _ = self._complete("line\nx &co|", format_hint("&copy"))
        assert editor.document.get_text() == "line\nx &copy;"
