"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, label_count: int) -> None:
        self._log.info("config.loaded", path=path, label_count=label_count)

    def config_empty(self, path: str) -> None:
        self._log.warning(
            "config.empty",
            path=path,
            message="Session file is empty; command-line options must supply all settings",
        )
