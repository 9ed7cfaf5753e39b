"""Backends for rrec output generation (mustache templates, debug dumps)."""

from .pretty import debug_repr, pretty_repr
from .template import load_template, record_context, render_record, render_recfile

__all__ = [
    "debug_repr",
    "pretty_repr",
    "load_template",
    "record_context",
    "render_record",
    "render_recfile",
]
