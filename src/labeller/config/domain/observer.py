"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, label_count: int) -> None: ...

    def config_empty(self, path: str) -> None: ...
