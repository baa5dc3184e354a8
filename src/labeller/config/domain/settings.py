"""Merge command-line options over a SessionConfig into ReviewSettings."""

from pathlib import Path

from labeller.config.domain.config import ReviewSettings, SessionConfig
from labeller.config.domain.errors import MissingOptionError


def resolve_settings(
    session: SessionConfig | None,
    input_path: Path | None,
    output_path: Path | None,
    prelabelled: bool,
    labels: list[str],
) -> ReviewSettings:
    """
    Combine command-line values with the session file.

    Command-line paths win over the file. Command-line labels replace the
    file's labels when at least one is given. Prelabelled mode is on if either
    source enables it.

    Raises:
        MissingOptionError: listing every required path supplied by neither source.
    """
    session = session or SessionConfig()
    resolved_input = input_path or session.input
    resolved_output = output_path or session.output

    missing: list[str] = []
    if resolved_input is None:
        missing.append("--input")
    if resolved_output is None:
        missing.append("--output")
    if missing:
        raise MissingOptionError(missing)

    return ReviewSettings(
        input=resolved_input,
        output=resolved_output,
        prelabelled=prelabelled or session.prelabelled,
        labels=list(labels) if labels else list(session.labels),
    )
