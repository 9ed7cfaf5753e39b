"""Command-line interface for rrec.

    rrec select  [-t TYPE]                 re-emit records, optionally of one type
    rrec tojson  [-p]                      JSON array, one object per record
    rrec format  -m FILE [-t TYPE] [-j S]  render each record with a mustache template
    rrec debug   [-p]                      dump the parsed structure

Every sub-command reads from -i/--input and writes to -o/--output; both
default to "-" (stdin/stdout).

Exit status: 0 ok, 1 bad input or template, 2 I/O or usage error.
"""

from __future__ import annotations

import argparse
import contextlib
import io
import logging
import sys
from typing import ContextManager, Iterator, TextIO

from rrec import __version__
from rrec.backends import debug_repr, load_template, pretty_repr, render_recfile
from rrec.errors import RecError
from rrec.model import Recfile
from rrec.parser import DEFAULT_ENCODING, parse_stream
from rrec.serialization import recfile_to_json_objects

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _std_stream(stream: TextIO) -> Iterator[TextIO]:
    """Re-read or re-write a standard stream as UTF-8, whatever the locale says."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        yield stream
        return

    stream.flush()
    wrapper = io.TextIOWrapper(buffer, encoding=DEFAULT_ENCODING)
    try:
        yield wrapper
    finally:
        wrapper.flush()
        # Leave the underlying stream open for whoever owns it.
        wrapper.detach()


def _open_input(path: str | None) -> ContextManager[TextIO]:
    if path is None or path == "-":
        logger.debug("reading from stdin")
        return _std_stream(sys.stdin)
    logger.debug("reading from %s", path)
    return open(path, "r", encoding=DEFAULT_ENCODING)


def _open_output(path: str | None) -> ContextManager[TextIO]:
    if path is None or path == "-":
        return _std_stream(sys.stdout)
    logger.debug("writing to %s", path)
    return open(path, "w", encoding=DEFAULT_ENCODING)


def _read_recfile(args: argparse.Namespace) -> Recfile:
    with _open_input(args.input) as fh:
        recfile = parse_stream(fh)
    logger.info("parsed %d record(s)", len(recfile))
    return recfile


def _cmd_select(args: argparse.Namespace) -> None:
    recfile = _read_recfile(args)
    if args.type is not None:
        recfile.filter_by_type(args.type)
        logger.info("%d record(s) of type %r", len(recfile), args.type)
    with _open_output(args.output) as out:
        recfile.write(out)


def _cmd_tojson(args: argparse.Namespace) -> None:
    recfile = _read_recfile(args)
    with _open_output(args.output) as out:
        out.write(recfile_to_json_objects(recfile, pretty=args.pretty) + "\n")


def _cmd_format(args: argparse.Namespace) -> None:
    template = load_template(args.mustache)
    recfile = _read_recfile(args)
    text = render_recfile(recfile, template, record_type=args.type, joiner=args.joiner)
    with _open_output(args.output) as out:
        out.write(text)


def _cmd_debug(args: argparse.Namespace) -> None:
    recfile = _read_recfile(args)
    with _open_output(args.output) as out:
        out.write((pretty_repr(recfile) if args.pretty else debug_repr(recfile)) + "\n")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rrec", description="Read, filter and convert recfiles.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")

    io_args = argparse.ArgumentParser(add_help=False)
    io_args.add_argument("-i", "--input", metavar="FILE", default="-", help="The input recfile (or - for stdin)")
    io_args.add_argument("-o", "--output", metavar="FILE", default="-", help="The output location (or - for stdout)")

    sub = p.add_subparsers(dest="command", required=True)

    sel = sub.add_parser("select", parents=[io_args], help="Print records from a recfile")
    sel.add_argument("-t", "--type", help="Only records of this type")
    sel.set_defaults(func=_cmd_select)

    tojson = sub.add_parser("tojson", parents=[io_args], help="Convert a recfile to JSON")
    tojson.add_argument("-p", "--pretty", action="store_true", help="Pretty-print the resulting JSON")
    tojson.set_defaults(func=_cmd_tojson)

    fmt = sub.add_parser("format", parents=[io_args], help="Render records with a mustache template")
    fmt.add_argument("-m", "--mustache", metavar="FILE", required=True, help="The mustache template to use")
    fmt.add_argument("-t", "--type", help="Only render records of this type")
    fmt.add_argument("-j", "--joiner", metavar="STRING", help="The string used to separate each fragment")
    fmt.set_defaults(func=_cmd_format)

    dbg = sub.add_parser("debug", parents=[io_args], help="Display the parsed structure of a recfile")
    dbg.add_argument("-p", "--pretty", action="store_true", help="Indented output")
    dbg.set_defaults(func=_cmd_debug)

    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.captureWarnings(True)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.func(args)
    except (RecError, UnicodeDecodeError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 1
    except OSError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
