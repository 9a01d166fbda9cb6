"""Run configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class TranscodeOptions(BaseModel):
    """Options for one transcode run, fixed for its duration.

    ``input``/``output`` of None (or ``-``) mean stdin/stdout.
    """

    model_config = ConfigDict(frozen=True)

    input: Path | None = None
    output: Path | None = None
    pretty: bool = False
    verbose: bool = False


__all__ = ["TranscodeOptions"]
