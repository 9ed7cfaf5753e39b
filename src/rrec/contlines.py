"""
Physical-line joining (raw lines -> logical lines).

A physical line ending in a single backslash is glued to the line that
follows it, marker removed. Any number of lines can be chained:

    foo\\
    bar\\
    baz

is one logical line, "foobarbaz".

Errors raised by the underlying iterator propagate as soon as they are
hit; a join in progress is abandoned.
"""

from typing import Iterable, Iterator, List

CONTINUATION_MARKER = "\\"


class ContinuationLines:
    """
    Iterator of logical lines over an iterable of newline-stripped lines.

    Single pass: it consumes the underlying iterator as it goes and
    cannot be restarted.
    """

    def __init__(self, lines: Iterable[str]):
        self._underlying: Iterator[str] = iter(lines)

    def __iter__(self) -> "ContinuationLines":
        return self

    def __next__(self) -> str:
        line = next(self._underlying)
        if not line.endswith(CONTINUATION_MARKER):
            return line

        parts: List[str] = [line[:-1]]
        for line in self._underlying:
            if line.endswith(CONTINUATION_MARKER):
                parts.append(line[:-1])
            else:
                parts.append(line)
                break
        # Source ran dry with a join pending: emit what we have.
        return "".join(parts)


__all__ = [
    "CONTINUATION_MARKER",
    "ContinuationLines",
]
