"""
Serialization helpers for rrec objects (Record, Recfile).

Provides lossless JSON/YAML round-trip via intermediate dict representation,
plus the flattened "one key per field name" JSON view used by `rrec tojson`.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from rrec.model import Record, Recfile


def record_to_dict(r: Record) -> Dict[str, Any]:
    return {"type": r.record_type, "fields": [[name, value] for name, value in r.fields]}


def record_from_dict(d: Dict[str, Any]) -> Record:
    return Record(
        fields=[(name, value) for name, value in d.get("fields", [])],
        record_type=d.get("type"),
    )


def recfile_to_dict(rf: Recfile) -> Dict[str, Any]:
    return {"records": [record_to_dict(r) for r in rf.records]}


def recfile_from_dict(d: Dict[str, Any]) -> Recfile:
    return Recfile(records=[record_from_dict(r) for r in d.get("records", [])])


def recfile_to_json(rf: Recfile) -> str:
    return json.dumps(recfile_to_dict(rf), sort_keys=True)


def recfile_from_json(s: str) -> Recfile:
    return recfile_from_dict(json.loads(s))


def recfile_to_yaml(rf: Recfile) -> str:
    return yaml.safe_dump(recfile_to_dict(rf))


def recfile_from_yaml(s: str) -> Recfile:
    return recfile_from_dict(yaml.safe_load(s))


def record_to_mapping(r: Record) -> Dict[str, str | List[str]]:
    """
    Flatten a record into a plain mapping.

    A name seen once maps to its value; a repeated name maps to the list
    of its values in encounter order. The record type is not included
    (the `%rec` field, if present, already is).
    """
    out: Dict[str, str | List[str]] = {}
    for name, value in r.fields:
        if name not in out:
            out[name] = value
        elif isinstance(out[name], list):
            out[name].append(value)
        else:
            out[name] = [out[name], value]
    return out


def recfile_to_json_objects(rf: Recfile, pretty: bool = False) -> str:
    """JSON array with one `record_to_mapping` object per record."""
    objects = [record_to_mapping(r) for r in rf.records]
    if pretty:
        return json.dumps(objects, indent=2, ensure_ascii=False)
    return json.dumps(objects, ensure_ascii=False)
