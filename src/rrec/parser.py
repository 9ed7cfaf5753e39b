"""
Recfile Parser (logical lines -> Recfile).

Each logical line (see contlines.py) is classified, after stripping
leading space characters, in this order:

    # comment            ignored
    (blank)              closes the current record if it has fields
    + continuation       appends "\\n" + text to the last field's value
    name: value          adds a field; `%rec` also sets the record type
    anything else        InvalidLineError

Syntax Notes:
    - Only spaces are stripped from the start of a line, not tabs
    - `+ text` and `+text` both continue with "text"; `+  text` keeps
      one leading space
    - The key is everything before the first colon, verbatim
    - The record type sticks across blank lines until the next `%rec`
"""

from dataclasses import dataclass, field
from io import StringIO
from typing import Iterable, Iterator, List, Optional, TextIO

from .contlines import ContinuationLines
from .errors import BadContLineError, InvalidLineError
from .model import CONT_FIELD_PREFIX, RECORD_TYPE_FIELD, Recfile, Record

COMMENT_PREFIX = "#"
DEFAULT_ENCODING = "utf-8"


@dataclass
class ParsingContext:
    """
    Transient state threaded through the line classifier.

    Properties:
        record_type:
            Type declared by the most recent `%rec` field, or None
        current:
            Record being accumulated
        records:
            Records sealed so far
    """

    record_type: Optional[str] = None
    current: Record = field(default_factory=Record)
    records: List[Record] = field(default_factory=list)

    def seal(self) -> None:
        """Close the current record (if it has fields) and start a fresh one."""
        if self.current.fields:
            self.records.append(self.current)
        self.current = Record(record_type=self.record_type)


def _continue_field(ctx: ParsingContext, line: str) -> None:
    if not ctx.current.fields:
        raise BadContLineError(line)

    rest = line[len(CONT_FIELD_PREFIX):]
    if rest.startswith(" "):
        rest = rest[1:]

    name, value = ctx.current.fields[-1]
    ctx.current.fields[-1] = (name, value + "\n" + rest)


def _add_field(ctx: ParsingContext, line: str) -> None:
    key, _, rest = line.partition(":")
    value = rest.lstrip(" ")
    fresh = not ctx.current.fields

    ctx.current.fields.append((key, value))

    if key == RECORD_TYPE_FIELD:
        ctx.record_type = value.strip()
        # A record opened by its own %rec line belongs to that type;
        # one already holding fields keeps the type it was created with.
        if fresh:
            ctx.current.record_type = ctx.record_type


def classify_line(ctx: ParsingContext, line: str) -> None:
    """
    Apply one logical line to the parsing context.

    Args:
        ctx: Parsing state, updated in place
        line: One logical line, newline already removed

    Raises:
        BadContLineError: `+` line with no field to continue
        InvalidLineError: Non-empty line that fits no other category
    """
    line = line.lstrip(" ")

    if line.startswith(COMMENT_PREFIX):
        return
    if not line:
        ctx.seal()
    elif line.startswith(CONT_FIELD_PREFIX):
        _continue_field(ctx, line)
    elif ":" in line:
        _add_field(ctx, line)
    else:
        raise InvalidLineError(line)


def parse_lines(lines: Iterable[str]) -> Recfile:
    """
    Parse newline-stripped physical lines into a Recfile.

    Args:
        lines: Iterable of lines; anything it raises propagates unchanged

    Returns:
        Recfile with every non-empty record, in source order

    Raises:
        BadContLineError, InvalidLineError: On malformed input
        OSError: Whatever the line source raises
    """
    ctx = ParsingContext()
    for line in ContinuationLines(lines):
        classify_line(ctx, line)
    ctx.seal()
    return Recfile(records=ctx.records)


def _strip_newlines(fh: Iterable[str]) -> Iterator[str]:
    for line in fh:
        if line.endswith("\r\n"):
            line = line[:-2]
        elif line.endswith("\n"):
            line = line[:-1]
        yield line


def parse_stream(fh: TextIO) -> Recfile:
    """Parse an open text stream (file, stdin, StringIO)."""
    return parse_lines(_strip_newlines(fh))


def parse_string(text: str) -> Recfile:
    """Parse recfile text held in a string."""
    return parse_stream(StringIO(text))


def parse_bytes(data: bytes, encoding: str = DEFAULT_ENCODING) -> Recfile:
    """
    Decode and parse raw recfile bytes.

    Raises:
        UnicodeDecodeError: If `data` is not valid in `encoding`
    """
    return parse_string(data.decode(encoding))


def parse_file(filepath: str, encoding: str = DEFAULT_ENCODING) -> Recfile:
    """
    Parse a recfile on disk.

    Args:
        filepath: Path to the recfile
        encoding: Text encoding of the file

    Returns:
        Recfile object

    Raises:
        FileNotFoundError: If the file doesn't exist
        RecParseError: If parsing fails
    """
    with open(filepath, "r", encoding=encoding) as f:
        return parse_stream(f)


__all__ = [
    "COMMENT_PREFIX",
    "DEFAULT_ENCODING",
    "ParsingContext",
    "classify_line",
    "parse_lines",
    "parse_stream",
    "parse_string",
    "parse_bytes",
    "parse_file",
]
