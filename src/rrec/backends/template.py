"""
Mustache template renderer for rrec records.

Each record is rendered on its own with a context built from its fields:

    %rec: Person
    name: Ada
    lang: ML

against `{{name}} ({{%rec}})` gives `Ada (Person)`.

Notes:
    - A repeated field name renders as its LAST value
    - `{{%rec}}` is the record's type when it has one
    - Values are HTML-escaped unless written as `{{{name}}}`
"""

import warnings
from typing import Dict, List, Optional

import chevron
from chevron.tokenizer import ChevronError

from rrec.errors import TemplateError
from rrec.model import RECORD_TYPE_FIELD, Recfile, Record


def record_context(record: Record) -> Dict[str, str]:
    """Mustache context for one record."""
    ctx: Dict[str, str] = {}
    if record.record_type is not None:
        ctx[RECORD_TYPE_FIELD] = record.record_type
    for name, value in record.fields:
        ctx[name] = value
    return ctx


def render_record(record: Record, template: str) -> str:
    """
    Render one record.

    Raises:
        TemplateError: If the template is malformed
    """
    try:
        return chevron.render(template, record_context(record))
    except ChevronError as e:
        raise TemplateError(f"Cannot render template: {e}") from e


def render_recfile(
    recfile: Recfile,
    template: str,
    record_type: Optional[str] = None,
    joiner: Optional[str] = None,
) -> str:
    """
    Render every record (or every record of one type) and concatenate.

    Args:
        recfile: Parsed recfile (not modified)
        template: Mustache template text
        record_type: Only render records of this type
        joiner: Written, followed by a newline, between consecutive records

    Returns:
        Rendered text

    Raises:
        TemplateError: If the template is malformed
    """
    if record_type is None:
        records = recfile.iter()
    else:
        records = recfile.iter_by_type(record_type)

    rendered: List[str] = [render_record(r, template) for r in records]

    if record_type is not None and not rendered:
        warnings.warn(f"No records of type {record_type!r}", UserWarning)

    separator = "" if joiner is None else joiner + "\n"
    return separator.join(rendered)


def load_template(filepath: str) -> str:
    """
    Read a mustache template from disk.

    Raises:
        TemplateError: If the file can't be read or decoded
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Cannot load template {filepath}: {e}") from e
