"""Base exception class for all labeller-specific errors."""


class LabellerError(Exception):
    """Base class for all labeller errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
