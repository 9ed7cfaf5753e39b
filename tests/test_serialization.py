"""
Tests for serialization and deserialization of rrec objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `rrec.serialization`, plus the flat JSON view.
"""

import json

from rrec.examples import build_example_recfile
from rrec.model import Recfile, Record
from rrec.serialization import (
    recfile_from_dict,
    recfile_from_json,
    recfile_from_yaml,
    recfile_to_dict,
    recfile_to_json,
    recfile_to_json_objects,
    recfile_to_yaml,
    record_to_dict,
    record_to_mapping,
)


def test_record_to_dict():
    r = Record(fields=[("a", "1"), ("a", "2")], record_type="T")
    assert record_to_dict(r) == {"type": "T", "fields": [["a", "1"], ["a", "2"]]}


def test_dict_roundtrip():
    recfile = build_example_recfile()
    assert recfile_from_dict(recfile_to_dict(recfile)) == recfile


def test_json_roundtrip():
    recfile = build_example_recfile()
    before = recfile_to_dict(recfile)
    restored = recfile_from_json(recfile_to_json(recfile))
    assert recfile_to_dict(restored) == before
    assert restored == recfile


def test_yaml_roundtrip():
    recfile = build_example_recfile()
    before = recfile_to_dict(recfile)
    restored = recfile_from_yaml(recfile_to_yaml(recfile))
    assert recfile_to_dict(restored) == before


def test_empty_recfile():
    assert recfile_from_json(recfile_to_json(Recfile())) == Recfile()


def test_record_to_mapping_single_values():
    r = Record(fields=[("hello", "yes"), ("bye", "no")])
    assert record_to_mapping(r) == {"hello": "yes", "bye": "no"}


def test_record_to_mapping_repeated_names():
    r = Record(fields=[("Author", "A"), ("Title", "T"), ("Author", "B"), ("Author", "C")])
    assert record_to_mapping(r) == {"Author": ["A", "B", "C"], "Title": "T"}


def test_json_objects():
    recfile = Recfile(records=[Record(fields=[("hello", "yes")]), Record(fields=[("goodbye", "no")])])
    out = recfile_to_json_objects(recfile)
    assert json.loads(out) == [{"hello": "yes"}, {"goodbye": "no"}]
    assert "\n" not in out


def test_json_objects_pretty():
    recfile = Recfile(records=[Record(fields=[("hello", "yes")])])
    out = recfile_to_json_objects(recfile, pretty=True)
    assert "\n" in out
    assert json.loads(out) == [{"hello": "yes"}]
