"""
Tests for the mustache template backend.

Tests cover:
    - Field lookup and the %rec type
    - Repeated field names
    - Type selection and joiners
    - Template errors
"""

import pytest

from rrec.backends.template import load_template, record_context, render_record, render_recfile
from rrec.errors import TemplateError
from rrec.model import Recfile, Record
from rrec.parser import parse_string


class TestRecordContext:
    """Test how a record becomes a mustache context."""

    def test_fields_and_type(self):
        r = Record(fields=[("name", "Ada")], record_type="Person")
        assert record_context(r) == {"%rec": "Person", "name": "Ada"}

    def test_untyped_has_no_rec(self):
        assert record_context(Record(fields=[("a", "1")])) == {"a": "1"}

    def test_last_repeated_value_wins(self):
        r = Record(fields=[("a", "1"), ("a", "2")])
        assert record_context(r) == {"a": "2"}


class TestRendering:
    """Test rendering records and recfiles."""

    def test_render_record(self):
        r = Record(fields=[("name", "Ada")], record_type="Person")
        assert render_record(r, "{{name}} ({{%rec}})") == "Ada (Person)"

    def test_missing_field_renders_empty(self):
        assert render_record(Record(fields=[("a", "1")]), "[{{b}}]") == "[]"

    def test_render_recfile(self):
        rf = parse_string("n: 1\n\nn: 2\n")
        assert render_recfile(rf, "<{{n}}>") == "<1><2>"

    def test_joiner(self):
        rf = parse_string("n: 1\n\nn: 2\n\nn: 3\n")
        assert render_recfile(rf, "{{n}}\n", joiner="--") == "1\n--\n2\n--\n3\n"

    def test_type_selection(self):
        rf = parse_string("n: 0\n\n%rec: A\nn: 1\n\n%rec: B\nn: 2\n")
        assert render_recfile(rf, "{{n}};", record_type="A") == "1;"
        assert len(rf) == 3

    def test_type_selection_with_no_match_warns(self):
        rf = parse_string("n: 1\n")
        with pytest.warns(UserWarning, match="No records"):
            assert render_recfile(rf, "{{n}}", record_type="Z") == ""

    def test_empty_recfile(self):
        assert render_recfile(Recfile(), "{{n}}") == ""

    def test_malformed_template(self):
        with pytest.raises(TemplateError):
            render_record(Record(fields=[("a", "1")]), "{{#a}}unclosed")


class TestLoadTemplate:
    """Test reading templates from disk."""

    def test_load(self, tmp_path):
        path = tmp_path / "t.mustache"
        path.write_text("{{a}}\n", encoding="utf-8")
        assert load_template(str(path)) == "{{a}}\n"

    def test_load_missing(self, tmp_path):
        with pytest.raises(TemplateError, match="Cannot load template"):
            load_template(str(tmp_path / "missing.mustache"))
