"""Input and output endpoints: files or standard streams.

Both endpoints are binary. ``None`` or ``"-"`` selects stdin/stdout, which
are flushed but never closed. Files are always closed on exit, including
when the run fails.
"""

import sys
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

PathLike = Union[str, Path, None]

STDIO = "-"


def is_stdio(path: PathLike) -> bool:
    """Return True if ``path`` selects a standard stream."""
    return path is None or str(path) == STDIO


@contextmanager
def open_input(path: PathLike = None) -> Iterator[BinaryIO]:
    """Open the input endpoint for binary reading."""
    if is_stdio(path):
        yield sys.stdin.buffer
        return

    with open(path, "rb") as infile:
        yield infile


@contextmanager
def open_output(path: PathLike = None) -> Iterator[BinaryIO]:
    """Open the output endpoint for binary writing (truncates files)."""
    if is_stdio(path):
        stdout = sys.stdout.buffer
        try:
            yield stdout
        finally:
            stdout.flush()
        return

    with open(path, "wb") as outfile:
        yield outfile


@contextmanager
def open_endpoints(
    input_path: PathLike = None, output_path: PathLike = None
) -> Iterator[Tuple[BinaryIO, BinaryIO]]:
    """Open input then output; both are released on every exit path.

    The input is opened first so a missing input never truncates the output.
    """
    with ExitStack() as stack:
        reader = stack.enter_context(open_input(input_path))
        writer = stack.enter_context(open_output(output_path))
        yield reader, writer
