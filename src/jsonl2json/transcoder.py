"""Streaming JSON Lines to JSON array transcoder.

Reads one record per line, parses it and writes it back out as an element
of a single JSON array. Only the current record is held in memory; the
array framing (brackets, separators, newlines) is written around the
elements as they stream through.

Output shape:
    compact:  [e1,e2,...,eN]         (empty input: [])
    pretty:   [\\n e1,\\n e2 ... \\n]  (empty input: [\\n])

A failure aborts the run where it happens. Whatever was already written
stays in the output, so a failed run leaves an incomplete array behind.
"""

import io
from typing import IO, Any, Iterable, Optional

from .codec import JsonCodec
from .errors import RecordParseError

_BOM = "\ufeff"


def _strip_terminator(line):
    """Remove a trailing \\n and then a trailing \\r, if present."""
    if isinstance(line, bytes):
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        return line
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _decode(line, line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecordParseError(line_number, f"Invalid UTF-8: {e.reason}") from e


def _is_binary(writer) -> bool:
    """Text if an io.TextIOBase or its ``mode`` lacks "b"; binary otherwise."""
    if isinstance(writer, io.TextIOBase):
        return False
    mode = getattr(writer, "mode", None)
    if isinstance(mode, str):
        return "b" in mode
    return True


class _Sink:
    """Writes text to either a text or a binary stream."""

    def __init__(self, writer: IO[Any]):
        self._writer = writer
        self._binary = _is_binary(writer)

    def write(self, text: str) -> None:
        if self._binary:
            self._writer.write(text.encode("utf-8"))
        else:
            self._writer.write(text)

    def flush(self) -> None:
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            flush()


def transcode(
    reader: Iterable[Any],
    writer: IO[Any],
    pretty: bool = False,
    codec: Optional[JsonCodec] = None,
) -> int:
    """Convert JSON Lines from ``reader`` into a JSON array on ``writer``.

    Args:
        reader: Binary or text stream (any iterable of lines)
        writer: Binary or text stream, written to in order
        pretty: Indent elements and put each on its own lines
        codec: JSON codec (default: JsonCodec())

    Returns:
        Number of elements written

    Raises:
        RecordParseError: A line is not valid JSON (blank lines included)
        RecordSerializationError: A parsed value could not be re-encoded
        OSError: Reading or writing failed
    """
    codec = codec or JsonCodec()
    sink = _Sink(writer)

    sink.write("[")
    if pretty:
        sink.write("\n")

    count = 0
    for line_number, raw in enumerate(reader, start=1):
        if count:
            sink.write(",\n" if pretty else ",")

        text = _decode(_strip_terminator(raw), line_number)
        if line_number == 1 and text.startswith(_BOM):
            text = text[1:]

        value = codec.loads(text, line_number=line_number)
        sink.write(codec.dumps(value, pretty=pretty, line_number=line_number))
        count += 1

    # No blank line between the brackets when nothing was written
    if pretty and count:
        sink.write("\n")
    sink.write("]")
    sink.flush()

    return count
