"""YAML session-file loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from labeller.config.domain.config import SessionConfig
from labeller.config.domain.observer import ConfigObserver
from labeller.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from labeller.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a SessionConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> SessionConfig:
        """
        Load, interpolate, validate, and return a SessionConfig from a YAML file.

        An empty file yields a SessionConfig with every default.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not valid YAML or violates the schema.
        """
        raw = _parse_yaml(path=path)
        if raw is None:
            self._observer.config_empty(path=str(path))
            return SessionConfig()

        _check_missing_env_vars(raw=raw)
        cfg = _build_config(raw=interpolate(raw))
        self._observer.config_loaded(path=str(path), label_count=len(cfg.labels))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path) from exc
    except OSError as exc:
        raise ConfigLoadError(path, reason=exc.strerror or "cannot read file") from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _check_missing_env_vars(raw: Any) -> None:
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(raw: Any) -> SessionConfig:
    try:
        return SessionConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
