"""SessionConfig and ReviewSettings — file-provided defaults and the resolved run settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SessionConfig(BaseModel, frozen=True):
    """Contents of an optional YAML session file. Every key may be omitted."""

    model_config = ConfigDict(extra="forbid")

    input: Path | None = None
    output: Path | None = None
    prelabelled: bool = False
    labels: list[str] = Field(default_factory=list)


class ReviewSettings(BaseModel, frozen=True):
    """Fully resolved settings for one review run.

    ``labels`` may be empty here; an empty vocabulary is reported to the
    reviewer and ends the run cleanly rather than failing validation.
    """

    input: Path
    output: Path
    prelabelled: bool
    labels: list[str]
