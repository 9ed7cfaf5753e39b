"""
Core Recfile Model Objects

Defines the in-memory shape of a parsed recfile:
    - Fields (name/value pairs)
    - Records (ordered fields plus an optional record type)
    - Recfiles (ordered records)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about how lines are classified
        - Preserve source order everywhere
        - Never assume field names are unique
"""

from dataclasses import dataclass, field
from io import StringIO
from typing import Iterator, List, Optional, TextIO, Tuple

from .contlines import CONTINUATION_MARKER
from .errors import MissingFieldError

CONT_FIELD_PREFIX = "+"
RECORD_TYPE_FIELD = "%rec"

Field = Tuple[str, str]


def _write_line(sink: TextIO, line: str) -> None:
    # A line ending in a backslash or CR gets one more backslash and an
    # empty physical line, which the reader joins away again.
    if line.endswith((CONTINUATION_MARKER, "\r")):
        sink.write(line + CONTINUATION_MARKER + "\n\n")
    else:
        sink.write(line + "\n")


def _write_field(sink: TextIO, name: str, value: str) -> None:
    # Embedded newlines go back out as `+` continuation lines.
    first, *rest = value.split("\n")
    _write_line(sink, f"{name}: {first}")
    for segment in rest:
        _write_line(sink, f"{CONT_FIELD_PREFIX} {segment}")


@dataclass
class Record:
    """
    One group of fields, terminated by a blank line or end of input.

    Properties:
        fields:
            (name, value) pairs in encounter order. Names may repeat
            (multi-valued attributes); values may contain newlines.

        record_type:
            Value of the most recent `%rec` field seen when this record
            was created, or None if there was none yet.

    The `%rec` field itself stays in `fields`.
    """

    fields: List[Field] = field(default_factory=list)
    record_type: Optional[str] = None

    def write(self, sink: TextIO) -> None:
        """
        Write this record, one `name: value` line per field, then a blank line.

        Args:
            sink: Anything with a `write(str)` method
        """
        for name, value in self.fields:
            _write_field(sink, name, value)
        sink.write("\n")

    def size(self) -> int:
        return len(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, name: str) -> str:
        """
        Value of the first field called `name`.

        Raises:
            MissingFieldError: If the record has no such field
        """
        for field_name, value in self.fields:
            if field_name == name:
                return value
        raise MissingFieldError(name)

    def get_all(self, name: str) -> List[str]:
        """Every value of fields called `name`, in order (possibly empty)."""
        return [value for field_name, value in self.fields if field_name == name]

    def field_names(self) -> List[str]:
        """Distinct field names in order of first appearance."""
        seen = []
        for name, _ in self.fields:
            if name not in seen:
                seen.append(name)
        return seen


@dataclass
class Recfile:
    """
    Root container: the whole parsed document.

    Record order is significant and survives parse -> write -> parse.

    INVARIANTS:
        - No record has an empty field list
        - Records are in source order
    """

    records: List[Record] = field(default_factory=list)

    def write(self, sink: TextIO) -> None:
        """Write every record in order, each followed by a blank line."""
        for record in self.records:
            record.write(sink)

    def dumps(self) -> str:
        """Serialized text of the whole recfile."""
        buf = StringIO()
        self.write(buf)
        return buf.getvalue()

    def filter_by_type(self, type_name: str) -> None:
        """
        Keep only records whose type is exactly `type_name` (in place).

        Untyped records are always dropped.
        """
        self.records = [r for r in self.records if r.record_type == type_name]

    def iter_by_type(self, type_name: str) -> Iterator[Record]:
        """Records of type `type_name`, in order. Does not modify the recfile."""
        return (r for r in self.records if r.record_type == type_name)

    def iter(self) -> Iterator[Record]:
        return iter(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
