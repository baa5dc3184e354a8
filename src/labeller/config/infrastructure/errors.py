"""Error types raised by config infrastructure."""

from pathlib import Path

from labeller.core.errors import LabellerError


class MissingEnvVarsError(LabellerError):
    """Raised when one or more environment variables referenced by the session file are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(LabellerError):
    """Raised when the session file is not valid YAML or violates the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(LabellerError):
    """Raised when the session file cannot be opened or read."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
