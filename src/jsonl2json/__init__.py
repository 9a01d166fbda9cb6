"""jsonl2json: stream JSON Lines into a single JSON array."""

__version__ = "0.1.0"

from .codec import JsonCodec
from .errors import (
    RecordError,
    RecordParseError,
    RecordSerializationError,
    TranscodeError,
)
from .options import TranscodeOptions
from .transcoder import transcode

__all__ = [
    "JsonCodec",
    "RecordError",
    "RecordParseError",
    "RecordSerializationError",
    "TranscodeError",
    "TranscodeOptions",
    "__version__",
    "transcode",
]
