"""
rrec: reader and writer for recfiles

A recfile is a plain-text list of records:

    # comment
    %rec: Book
    Title: Volume 1
    Author: A. Writer
    Author: Co Writer
    Blurb: First line
    + second line

    Title: Volume 2

Records are separated by blank lines. `+` lines continue the previous
field's value; a trailing backslash joins two physical lines. `%rec` sets
the type of the records that follow.

This package parses that text into Recfile/Record objects and writes it
back. Schema fields such as `%type` or `%mandatory` are kept as plain
fields and never interpreted.
"""

from rrec.errors import (
    BadContLineError,
    InvalidLineError,
    MissingFieldError,
    RecError,
    RecParseError,
    TemplateError,
)
from rrec.model import Record, Recfile
from rrec.parser import parse_bytes, parse_file, parse_lines, parse_stream, parse_string

__version__ = "0.1.0"

__all__ = [
    "BadContLineError",
    "InvalidLineError",
    "MissingFieldError",
    "RecError",
    "RecParseError",
    "TemplateError",
    "Record",
    "Recfile",
    "parse_bytes",
    "parse_file",
    "parse_lines",
    "parse_stream",
    "parse_string",
]
