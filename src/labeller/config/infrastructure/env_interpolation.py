"""${ENV_VAR} expansion for string values in raw session-file data."""

import os
import re
from collections.abc import Iterator, Mapping

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)


def collect_missing_vars(
    data: RawValue, environ: Mapping[str, str] | None = None
) -> list[str]:
    """Return every referenced variable absent from environ, in first-seen order."""
    env = os.environ if environ is None else environ
    missing: list[str] = []
    for text in _strings(data):
        for name in _ENV_VAR_PATTERN.findall(text):
            if name not in env and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue, environ: Mapping[str, str] | None = None) -> RawValue:
    """
    Return a copy of data with each ${ENV_VAR} replaced by its value.

    Every referenced variable must be set; check with collect_missing_vars first.
    """
    env = os.environ if environ is None else environ
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(lambda m: env[m.group(1)], data)
    if isinstance(data, list):
        return [interpolate(item, env) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value, env) for key, value in data.items()}
    return data
