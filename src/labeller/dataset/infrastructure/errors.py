"""Error types raised by dataset infrastructure."""

from labeller.core.errors import LabellerError


class DatasetLoadError(LabellerError):
    """Raised when an examples document cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load examples: {reason}")


class DatasetWriteError(LabellerError):
    """Raised when the labelled examples cannot be serialised or written."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to write examples: {reason}")
