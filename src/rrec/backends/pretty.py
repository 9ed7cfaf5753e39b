"""
Structural dumps of a Recfile, for debugging.

    debug_repr   one line, like repr()
    pretty_repr  indented, one record per block
"""

import pprint

from rrec.model import Recfile


def debug_repr(recfile: Recfile) -> str:
    return repr(recfile)


def pretty_repr(recfile: Recfile, width: int = 80) -> str:
    """Indented dump of every record's type and fields."""
    lines = ["Recfile(records=["]
    for record in recfile.records:
        lines.append("    Record(")
        lines.append(f"        record_type={record.record_type!r},")
        body = pprint.pformat(record.fields, width=width - 15)
        body = body.replace("\n", "\n" + " " * 15)
        lines.append(f"        fields={body},")
        lines.append("    ),")
    lines.append("])")
    return "\n".join(lines)
