"""Tests for the debug/pretty dumps."""

from rrec.backends.pretty import debug_repr, pretty_repr
from rrec.model import Recfile, Record


def test_debug_repr_is_single_line():
    rf = Recfile(records=[Record(fields=[("a", "1\n2")], record_type="T")])
    out = debug_repr(rf)
    assert "\n" not in out
    assert "record_type='T'" in out
    assert "('a', '1\\n2')" in out


def test_pretty_repr_lists_every_record():
    rf = Recfile(records=[Record(fields=[("a", "1")]), Record(fields=[("b", "2")], record_type="T")])
    out = pretty_repr(rf)
    assert out.startswith("Recfile(records=[")
    assert out.endswith("])")
    assert out.count("Record(") == 2
    assert "record_type=None," in out
    assert "record_type='T'," in out
    assert "fields=[('a', '1')]," in out


def test_pretty_repr_empty():
    assert pretty_repr(Recfile()) == "Recfile(records=[\n])"
