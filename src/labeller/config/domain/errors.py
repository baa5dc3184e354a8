"""Error types raised while resolving review settings."""

from labeller.core.errors import LabellerError


class MissingOptionError(LabellerError):
    """Raised when a required setting is given neither on the command line nor in the session file."""

    def __init__(self, options: list[str]) -> None:
        self.options = options
        option_list = ", ".join(options)
        super().__init__(f"Failed to resolve settings: missing option(s): {option_list}")
