"""JSON codec used by the transcoder.

Thin wrapper over the standard library ``json`` module that fixes the two
output styles (compact and two-space pretty) and makes parsing strict.
"""

import json
from typing import Any

from .errors import RecordParseError, RecordSerializationError

PRETTY_INDENT = 2
COMPACT_SEPARATORS = (",", ":")
PRETTY_SEPARATORS = (",", ": ")


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"Invalid JSON constant {name!r}")


class JsonCodec:
    """Parse one line of text and serialize a value back to text."""

    def __init__(self):
        self._decoder = json.JSONDecoder(parse_constant=_reject_constant)

    def loads(self, text: str, line_number: int = 0) -> Any:
        """Parse ``text`` as exactly one JSON value.

        Raises:
            RecordParseError: If ``text`` is empty or not valid JSON
        """
        try:
            return self._decoder.decode(text)
        except json.JSONDecodeError as e:
            raise RecordParseError(
                line_number, f"{e.msg} (column {e.colno})"
            ) from e
        except (ValueError, RecursionError) as e:
            raise RecordParseError(line_number, str(e)) from e

    def dumps(self, value: Any, pretty: bool = False, line_number: int = 0) -> str:
        """Serialize ``value`` compactly, or indented when ``pretty``.

        The result is always encodable as UTF-8.

        Raises:
            RecordSerializationError: If ``value`` cannot be encoded
        """
        try:
            if pretty:
                text = json.dumps(
                    value,
                    indent=PRETTY_INDENT,
                    separators=PRETTY_SEPARATORS,
                    ensure_ascii=False,
                    allow_nan=False,
                )
            else:
                text = json.dumps(
                    value,
                    separators=COMPACT_SEPARATORS,
                    ensure_ascii=False,
                    allow_nan=False,
                )
            # Lone surrogates (e.g. from "\ud800") have no UTF-8 form
            text.encode("utf-8")
            return text
        except (TypeError, ValueError, RecursionError) as e:
            raise RecordSerializationError(line_number, str(e)) from e
